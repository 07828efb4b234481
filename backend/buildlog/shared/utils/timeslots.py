"""
Check-in time slots.

A check-in's type is derived from the wall-clock hour it was written at:

    00:00 - 10:59  → morning
    11:00 - 14:59  → midday
    15:00 - 23:59  → evening
"""

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from buildlog.shared.models.enums import CheckInType


MIDDAY_START_HOUR = 11
EVENING_START_HOUR = 15


def classify_check_in_type(hour: int) -> CheckInType:
    """Map a 0-23 hour to its check-in slot."""
    if hour < MIDDAY_START_HOUR:
        return CheckInType.MORNING
    if hour < EVENING_START_HOUR:
        return CheckInType.MIDDAY
    return CheckInType.EVENING


def resolve_local_time(
    local_timestamp: Optional[datetime],
    default_timezone: str,
) -> datetime:
    """
    Pick the wall-clock time a check-in belongs to.

    The client's own timestamp wins and is used as sent (its hour is the
    user's local hour). Without one, the server clock in
    ``default_timezone`` is used.
    """
    if local_timestamp is not None:
        return local_timestamp
    return datetime.now(ZoneInfo(default_timezone))


def check_in_slot(
    local_timestamp: Optional[datetime],
    default_timezone: str,
) -> tuple[CheckInType, date]:
    """Return (check_in_type, check_in_date) for a new check-in."""
    moment = resolve_local_time(local_timestamp, default_timezone)
    return classify_check_in_type(moment.hour), moment.date()

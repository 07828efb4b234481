from datetime import datetime, timedelta, timezone

import jwt
import pytest
import structlog

from buildlog.shared.core.logging import clear_log_context, log_context
from buildlog.shared.models.enums import CheckInType
from buildlog.shared.utils.security import SecurityUtils
from buildlog.shared.utils.storage_paths import (
    belongs_to_user,
    build_object_key,
    clipboard_filename,
    get_storage_path,
    sanitize_filename,
)
from buildlog.shared.utils.text import join_comma_list, normalize_optional_text, parse_comma_list
from buildlog.shared.utils.timeslots import check_in_slot, classify_check_in_type


# ═══════════════════════════════════════════════════════════════════════════════
# TEXT
# ═══════════════════════════════════════════════════════════════════════════════


def test_parse_comma_list_drops_blank_entries():
    assert parse_comma_list(" React, ,Postgres ,") == ["React", "Postgres"]
    assert parse_comma_list("") == []
    assert parse_comma_list(None) == []


def test_parse_comma_list_keeps_list_entries_whole():
    assert parse_comma_list(["a, b", " c "]) == ["a, b", "c"]


def test_join_comma_list():
    assert join_comma_list(["React", "Postgres"]) == "React, Postgres"
    assert join_comma_list(None) == ""


def test_normalize_optional_text():
    assert normalize_optional_text("  hi ") == "hi"
    assert normalize_optional_text("   ") is None
    assert normalize_optional_text(None) is None


# ═══════════════════════════════════════════════════════════════════════════════
# TIME SLOTS
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    "hour, expected",
    [
        (0, CheckInType.MORNING),
        (10, CheckInType.MORNING),
        (11, CheckInType.MIDDAY),
        (14, CheckInType.MIDDAY),
        (15, CheckInType.EVENING),
        (23, CheckInType.EVENING),
    ],
)
def test_classify_check_in_type(hour, expected):
    assert classify_check_in_type(hour) == expected


def test_check_in_slot_uses_client_wall_clock():
    moment = datetime.fromisoformat("2024-03-05T23:30:00-08:00")

    assert check_in_slot(moment, "UTC") == (CheckInType.EVENING, moment.date())


def test_check_in_slot_without_timestamp_uses_default_timezone():
    check_in_type, check_in_date = check_in_slot(None, "UTC")

    now = datetime.now(timezone.utc)
    assert check_in_type in set(CheckInType)
    assert abs((check_in_date - now.date()).days) <= 1


# ═══════════════════════════════════════════════════════════════════════════════
# STORAGE PATHS
# ═══════════════════════════════════════════════════════════════════════════════


def test_sanitize_filename():
    assert sanitize_filename("my shot (1).png") == "my_shot__1_.png"


def test_build_object_key():
    assert build_object_key("u1", "a b.png", 1700000000000) == "u1/1700000000000_a_b.png"


def test_clipboard_filename_uses_mime_subtype():
    assert clipboard_filename("image/jpeg", 42) == "clipboard_42.jpeg"


def test_get_storage_path_maps_urls_back_to_keys():
    url = "https://x.supabase.co/storage/v1/object/public/uploads/u1/1_my%20shot.png"

    assert get_storage_path(url) == "u1/1_my shot.png"
    assert get_storage_path("u1/1_a.png") == "u1/1_a.png"
    assert get_storage_path("https://cdn.example.com/other/a.png") == (
        "https://cdn.example.com/other/a.png"
    )


def test_belongs_to_user():
    assert belongs_to_user("u1/1_a.png", "u1")
    assert not belongs_to_user("u10/1_a.png", "u1")


# ═══════════════════════════════════════════════════════════════════════════════
# SECURITY
# ═══════════════════════════════════════════════════════════════════════════════


def test_password_hash_round_trip():
    hashed = SecurityUtils.hash_password("password123")

    assert hashed != "password123"
    assert SecurityUtils.verify_password("password123", hashed)
    assert not SecurityUtils.verify_password("nope", hashed)


def test_token_with_wrong_secret_is_rejected():
    token = SecurityUtils.create_access_token({"user_id": "u1"}, "secret-a")

    with pytest.raises(ValueError):
        SecurityUtils.decode_access_token(token, "secret-b")


def test_token_without_expiry_is_rejected():
    token = jwt.encode({"user_id": "u1"}, "secret-a", algorithm="HS256")

    with pytest.raises(ValueError):
        SecurityUtils.decode_access_token(token, "secret-a")


def test_expired_token_is_rejected():
    token = SecurityUtils.create_access_token(
        {"user_id": "u1"}, "secret-a", expires_delta=timedelta(seconds=-1)
    )

    with pytest.raises(ValueError, match="expired"):
        SecurityUtils.decode_access_token(token, "secret-a")


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING
# ═══════════════════════════════════════════════════════════════════════════════


def test_log_context_binds_until_cleared():
    clear_log_context()
    log_context(request_id="req-1", user_id="u1")

    assert structlog.contextvars.get_contextvars() == {"request_id": "req-1", "user_id": "u1"}

    clear_log_context()
    assert structlog.contextvars.get_contextvars() == {}

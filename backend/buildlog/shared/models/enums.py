"""
Enums used across the application.
"""

from enum import Enum


class ProjectStatus(str, Enum):
    """Lifecycle of a tracked project."""

    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class CheckInType(str, Enum):
    """Time-of-day slot a check-in was written in."""

    MORNING = "morning"
    MIDDAY = "midday"
    EVENING = "evening"


class DayType(str, Enum):
    """
    How the day went, picked by the user on the check-in.

    Replaces the older great/good/okay/struggling mood scale.
    """

    BREAKTHROUGH = "breakthrough"
    GRIND = "grind"
    STUCK = "stuck"


class UploadOrigin(str, Enum):
    """Input channel a file arrived through. All channels share one ingestion path."""

    PICKER = "picker"
    DROP = "drop"
    CLIPBOARD = "clipboard"


class PromptCategory(str, Enum):
    """Groups of reflection prompts offered while writing a check-in."""

    GENERAL = "general"
    STUCK = "stuck"
    BREAKTHROUGH = "breakthrough"
    PROBLEM = "problem"
    SOLUTION = "solution"
    LEARNING = "learning"

"""Time band and urgency enums."""

from enum import Enum


class TimeBand(Enum):
    """How reachable a departure is from the traveler's current position."""

    TOO_SOON = "Too soon"
    GETTABLE = "Gettable"
    FAR_AWAY = "Far away"


class Urgency(Enum):
    """How a suggestion should be worded."""

    LEAVE_NOW = "leave-now"
    NO_RUSH = "no-rush"

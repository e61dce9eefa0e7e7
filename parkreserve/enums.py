"""Fixed enumerations shared by the API, the store and the classifier."""

from enum import Enum


class SpotStatus(str, Enum):
    """Status of a parking spot."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    RESERVED = "reserved"


class ReservationBucket(str, Enum):
    """Display lifecycle stage of a reservation."""

    UPCOMING = "upcoming"
    LIVE = "live"
    PAST = "past"


FULL_DAY_DURATION = "24 hours"

DURATIONS = (
    "30 min",
    "1 hour",
    "2 hours",
    "4 hours",
    "8 hours",
    FULL_DAY_DURATION,
)

# Hour-aligned slots in 12-hour format, midnight first
TIME_SLOTS = tuple(
    f"{(hour % 12) or 12}:00 {'AM' if hour < 12 else 'PM'}" for hour in range(24)
)

"""Reservation lifecycle classification.

A reservation's bucket is never read from the store: it is recomputed from
its date, slot and duration against the current wall-clock time. Same-day
comparison works on whole hours only, so a reservation that started in the
current hour is live regardless of how short it is.
"""

import re
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional

from parkreserve.enums import FULL_DAY_DURATION, ReservationBucket

_SLOT_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*(AM|PM)\s*$", re.IGNORECASE)
_LEADING_INT = re.compile(r"^\s*(\d+)")


def _parse_slot(time_label: str):
    match = _SLOT_PATTERN.match(time_label)
    if not match:
        raise ValueError(f"Invalid time slot: {time_label!r}")

    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = match.group(3).upper()

    if meridiem == "PM" and hour < 12:
        hour += 12
    elif meridiem == "AM" and hour == 12:
        hour = 0

    return hour, minute


def parse_slot_hour(time_label: str) -> int:
    """Convert a ``"H:MM AM|PM"`` slot label to a 24-hour hour."""
    return _parse_slot(time_label)[0]


def parse_duration_hours(duration_label: str) -> float:
    """Convert a duration label such as ``"2 hours"`` or ``"30 min"`` to hours."""
    match = _LEADING_INT.match(duration_label)
    if not match:
        raise ValueError(f"Invalid duration: {duration_label!r}")

    value = int(match.group(1))
    if "min" in duration_label:
        return value / 60
    return float(value)


def classify_reservation(
    date: str,
    time: str,
    duration: str,
    now: Optional[datetime] = None,
) -> ReservationBucket:
    """
    Determine the display bucket of a reservation.

    ``date`` is an ISO ``YYYY-MM-DD`` string, so plain string comparison
    against today's date is calendar-correct.
    """
    now = now or datetime.now()
    today = now.date().isoformat()

    if date > today:
        return ReservationBucket.UPCOMING
    if date < today:
        return ReservationBucket.PAST

    start_hour = parse_slot_hour(time)
    duration_hours = parse_duration_hours(duration)

    if start_hour > now.hour:
        return ReservationBucket.UPCOMING
    if start_hour + duration_hours > now.hour or duration == FULL_DAY_DURATION:
        return ReservationBucket.LIVE
    return ReservationBucket.PAST


def partition_reservations(
    reservations: Iterable,
    now: Optional[datetime] = None,
) -> Dict[ReservationBucket, List]:
    """Group reservation records by bucket, keeping their original order."""
    now = now or datetime.now()
    buckets: Dict[ReservationBucket, List] = {bucket: [] for bucket in ReservationBucket}

    for reservation in reservations:
        bucket = classify_reservation(
            reservation.date, reservation.time, reservation.duration, now
        )
        buckets[bucket].append(reservation)

    return buckets


def remaining_time(time: str, duration: str, now: Optional[datetime] = None) -> str:
    """Human readable time left on a live reservation, e.g. ``"1h 15m"``."""
    now = now or datetime.now()

    if duration == FULL_DAY_DURATION:
        duration_hours = 24.0
    else:
        duration_hours = parse_duration_hours(duration)

    hour, minute = _parse_slot(time)
    end_time = now.replace(hour=hour, minute=minute, second=0, microsecond=0) + timedelta(
        hours=duration_hours
    )

    if end_time <= now:
        return "Expired"

    diff_minutes = int((end_time - now).total_seconds() // 60)
    hours, minutes = divmod(diff_minutes, 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"

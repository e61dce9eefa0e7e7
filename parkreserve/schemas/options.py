"""Schemas for the fixed enumerations exposed to clients."""

from typing import List

from pydantic import BaseModel


class ReservationOptions(BaseModel):
    """Values a client may offer when building a reservation form."""

    durations: List[str]
    time_slots: List[str]
    spot_statuses: List[str]
    reservation_buckets: List[str]


class ComplexList(BaseModel):
    """Configured parking complexes."""

    complexes: List[str]

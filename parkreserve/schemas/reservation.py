"""Reservation schemas."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from parkreserve.enums import DURATIONS, TIME_SLOTS, ReservationBucket


class ReservationCreate(BaseModel):
    """Schema for creating a reservation. The date is always today."""

    parking_complex: str = Field(..., min_length=1, max_length=255)
    spot_id: str = Field(..., max_length=32)
    vehicle_plate: str = Field(..., max_length=32)
    time: str = "12:00 PM"
    duration: str = "1 hour"

    @field_validator("spot_id")
    @classmethod
    def spot_selected(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Invalid parking spot selected")
        return value

    @field_validator("vehicle_plate")
    @classmethod
    def plate_entered(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please enter your vehicle plate number")
        return value

    @field_validator("time")
    @classmethod
    def known_time_slot(cls, value: str) -> str:
        if value not in TIME_SLOTS:
            raise ValueError("Please select a time")
        return value

    @field_validator("duration")
    @classmethod
    def known_duration(cls, value: str) -> str:
        if value not in DURATIONS:
            raise ValueError("Please select the duration")
        return value


class ReservationResponse(BaseModel):
    """
    Schema for reservation response.

    ``status`` is the bucket derived at read time; ``recorded_status`` is
    the value stored when the reservation was created.
    """

    id: UUID
    user_id: UUID
    parking_complex: str
    spot_id: str
    vehicle_plate: str
    date: str
    time: str
    duration: str
    status: ReservationBucket
    recorded_status: str
    remaining_time: Optional[str] = None
    created_at: datetime


class ReservationBuckets(BaseModel):
    """A user's reservations partitioned by lifecycle stage."""

    upcoming: List[ReservationResponse]
    live: List[ReservationResponse]
    past: List[ReservationResponse]

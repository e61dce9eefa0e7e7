"""Schemas package."""

from parkreserve.schemas.auth import (
    CurrentSession,
    PasswordChangeRequest,
    SessionResponse,
    SignInRequest,
    SignUpRequest,
)
from parkreserve.schemas.options import ComplexList, ReservationOptions
from parkreserve.schemas.parking_spot import ComplexSpots, ParkingSpotResponse
from parkreserve.schemas.profile import ProfileResponse, ProfileUpdate
from parkreserve.schemas.reservation import (
    ReservationBuckets,
    ReservationCreate,
    ReservationResponse,
)

__all__ = [
    "CurrentSession",
    "PasswordChangeRequest",
    "SessionResponse",
    "SignInRequest",
    "SignUpRequest",
    "ComplexList",
    "ReservationOptions",
    "ComplexSpots",
    "ParkingSpotResponse",
    "ProfileResponse",
    "ProfileUpdate",
    "ReservationBuckets",
    "ReservationCreate",
    "ReservationResponse",
]

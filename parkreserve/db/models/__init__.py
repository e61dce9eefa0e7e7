"""Database models package."""

from parkreserve.db.base import Base
from parkreserve.db.models.user import User
from parkreserve.db.models.auth_session import AuthSession
from parkreserve.db.models.parking_spot import ParkingSpot
from parkreserve.db.models.reservation import Reservation

__all__ = [
    "Base",
    "User",
    "AuthSession",
    "ParkingSpot",
    "Reservation",
]

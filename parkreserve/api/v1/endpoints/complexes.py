"""Parking complex endpoints."""

from fastapi import APIRouter

from parkreserve.config import settings
from parkreserve.enums import DURATIONS, TIME_SLOTS, ReservationBucket, SpotStatus
from parkreserve.schemas.options import ComplexList, ReservationOptions

router = APIRouter()


@router.get("/", response_model=ComplexList)
async def list_complexes():
    """List the parking complexes."""
    return ComplexList(complexes=settings.PARKING_COMPLEXES)


@router.get("/options", response_model=ReservationOptions)
async def get_reservation_options():
    """Durations, time slots and status values offered to clients."""
    return ReservationOptions(
        durations=list(DURATIONS),
        time_slots=list(TIME_SLOTS),
        spot_statuses=[spot_status.value for spot_status in SpotStatus],
        reservation_buckets=[bucket.value for bucket in ReservationBucket],
    )

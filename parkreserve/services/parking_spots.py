"""Spot status store: filtered reads through a per-complex cache and filtered updates."""

import logging
from typing import Dict, List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from parkreserve.config import settings
from parkreserve.db.models import ParkingSpot
from parkreserve.enums import SpotStatus
from parkreserve.schemas.parking_spot import ParkingSpotResponse

logger = logging.getLogger(__name__)


class SpotCache:
    """Process-local read-through cache of spot lists keyed by complex name."""

    def __init__(self):
        self._spots: Dict[str, List[ParkingSpotResponse]] = {}

    def get(self, parking_complex: str) -> Optional[List[ParkingSpotResponse]]:
        return self._spots.get(parking_complex)

    def set(self, parking_complex: str, spots: List[ParkingSpotResponse]) -> None:
        self._spots[parking_complex] = spots

    def invalidate(self, parking_complex: str) -> None:
        if self._spots.pop(parking_complex, None) is not None:
            logger.debug(f"Invalidated spot cache for {parking_complex}")

    def clear(self) -> None:
        self._spots.clear()


spot_cache = SpotCache()


async def fetch_parking_spots(db: AsyncSession, parking_complex: str) -> List[ParkingSpotResponse]:
    """Return the spots of a complex, served from the cache when present."""
    cached = spot_cache.get(parking_complex)
    if cached is not None:
        return cached

    result = await db.execute(
        select(ParkingSpot)
        .where(ParkingSpot.parking_complex == parking_complex)
        .order_by(ParkingSpot.spot_id)
        .execution_options(populate_existing=True)
    )
    spots = [ParkingSpotResponse.model_validate(spot) for spot in result.scalars().all()]

    spot_cache.set(parking_complex, spots)
    return spots


async def get_all_parking_spots(db: AsyncSession) -> Dict[str, List[ParkingSpotResponse]]:
    """Return the spots of every configured complex."""
    all_spots = {}
    for parking_complex in settings.PARKING_COMPLEXES:
        all_spots[parking_complex] = await fetch_parking_spots(db, parking_complex)
    return all_spots


async def get_parking_spot(
    db: AsyncSession, parking_complex: str, spot_id: str
) -> Optional[ParkingSpot]:
    result = await db.execute(
        select(ParkingSpot).where(
            ParkingSpot.parking_complex == parking_complex,
            ParkingSpot.spot_id == spot_id,
        )
    )
    return result.scalar_one_or_none()


async def update_spot_status(
    db: AsyncSession,
    parking_complex: str,
    spot_id: str,
    new_status: SpotStatus,
    only_if: Optional[SpotStatus] = None,
) -> bool:
    """
    Set the status of a spot identified by complex and spot id.

    With ``only_if`` the update is conditional on the current status.
    Returns whether a row was matched. Errors propagate to the caller.
    """
    logger.info(f"Updating spot {spot_id} in {parking_complex} to {new_status.value}")

    query = (
        update(ParkingSpot)
        .where(
            ParkingSpot.parking_complex == parking_complex,
            ParkingSpot.spot_id == spot_id,
        )
        .values(status=new_status.value)
    )
    if only_if is not None:
        query = query.where(ParkingSpot.status == only_if.value)

    result = await db.execute(query)
    await db.commit()

    return result.rowcount > 0

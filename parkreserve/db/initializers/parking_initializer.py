"""Seed the demo parking spots."""

import logging
import string
from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from parkreserve.config import settings
from parkreserve.db.models import ParkingSpot
from parkreserve.enums import SpotStatus

logger = logging.getLogger(__name__)

SPOTS_PER_ROW = 6


def spot_labels(count: int) -> List[str]:
    """Grid labels ``A1``..``A6``, ``B1``.. for ``count`` spots."""
    return [
        f"{string.ascii_uppercase[index // SPOTS_PER_ROW]}{index % SPOTS_PER_ROW + 1}"
        for index in range(count)
    ]


async def initialize_parking_spots(db: AsyncSession) -> int:
    """Create the spots of every complex if none exist yet. Returns the number created."""
    existing = await db.scalar(select(func.count()).select_from(ParkingSpot))
    if existing:
        logger.info("Parking spots already initialized")
        return 0

    created = 0
    for parking_complex in settings.PARKING_COMPLEXES:
        for label in spot_labels(settings.SPOTS_PER_COMPLEX):
            db.add(
                ParkingSpot(
                    parking_complex=parking_complex,
                    spot_id=label,
                    status=SpotStatus.AVAILABLE.value,
                )
            )
            created += 1

    await db.commit()
    logger.info(f"Initialized {created} parking spots")
    return created

"""ParkingSpot endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from parkreserve.api.deps import get_db_session
from parkreserve.config import settings
from parkreserve.schemas.parking_spot import ComplexSpots, ParkingSpotResponse
from parkreserve.services import parking_spots

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=List[ParkingSpotResponse])
async def list_parking_spots(
    parking_complex: str = Query(..., description="Parking complex name"),
    db: AsyncSession = Depends(get_db_session),
):
    """List the spots of a parking complex with their status."""
    if parking_complex not in settings.PARKING_COMPLEXES:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Parking complex {parking_complex} not found",
        )

    try:
        return await parking_spots.fetch_parking_spots(db, parking_complex)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Error fetching parking spots")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load parking spots",
        )


@router.get("/all", response_model=ComplexSpots)
async def list_all_parking_spots(
    db: AsyncSession = Depends(get_db_session),
):
    """List the spots of every parking complex."""
    try:
        all_spots = await parking_spots.get_all_parking_spots(db)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Error fetching parking spots")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load parking spots",
        )

    return ComplexSpots(complexes=all_spots)

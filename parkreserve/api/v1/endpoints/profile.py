"""Profile endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from parkreserve.api.deps import get_current_user, get_db_session
from parkreserve.db.models import User
from parkreserve.enums import ReservationBucket
from parkreserve.schemas.profile import ProfileResponse, ProfileUpdate
from parkreserve.schemas.reservation import ReservationBuckets
from parkreserve.services import reservations as reservation_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=ProfileResponse)
async def get_profile(user: User = Depends(get_current_user)):
    """Get the signed-in user's profile."""
    return user


@router.patch("/", response_model=ProfileResponse)
async def update_profile(
    profile_data: ProfileUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    """Update name and vehicle plate."""
    update_data = profile_data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(user, field, value.strip())

    try:
        await db.commit()
        await db.refresh(user)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Update error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update your details",
        )

    return user


@router.get("/reservations", response_model=ReservationBuckets)
async def get_profile_reservations(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    """The signed-in user's reservations grouped into upcoming, live and past."""
    try:
        buckets = await reservation_service.get_bucketed_reservations(db, user.id)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Error fetching user reservations")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load your reservations",
        )

    return ReservationBuckets(
        upcoming=buckets[ReservationBucket.UPCOMING],
        live=buckets[ReservationBucket.LIVE],
        past=buckets[ReservationBucket.PAST],
    )

"""Reservation endpoints."""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from parkreserve.api.deps import get_current_user, get_db_session
from parkreserve.db.models import User
from parkreserve.enums import ReservationBucket
from parkreserve.schemas.reservation import ReservationCreate, ReservationResponse
from parkreserve.services import reservations as reservation_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
async def create_reservation(
    data: ReservationCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    """Reserve a spot for today and mark it reserved."""
    try:
        reservation = await reservation_service.reserve_spot(db, user, data)
    except reservation_service.UnknownComplexError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except reservation_service.SpotNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except reservation_service.SpotUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except reservation_service.ReservationError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)

    return reservation_service.to_response(reservation)


@router.get("/", response_model=List[ReservationResponse])
async def list_reservations(
    bucket: Optional[ReservationBucket] = Query(
        None, description="Filter by derived status (upcoming/live/past)"
    ),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    """List the signed-in user's reservations with their current status."""
    try:
        reservations = await reservation_service.get_reservations_by_user_id(db, user.id)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Error fetching user reservations")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load your reservations",
        )

    responses = [reservation_service.to_response(reservation) for reservation in reservations]

    if bucket:
        responses = [response for response in responses if response.status == bucket]

    return responses


@router.get("/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(
    reservation_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    """Get one of the signed-in user's reservations."""
    try:
        reservation = await reservation_service.get_user_reservation(db, user.id, reservation_id)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception(f"Error fetching reservation {reservation_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load your reservation",
        )

    if not reservation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Reservation with id {reservation_id} not found",
        )

    return reservation_service.to_response(reservation)

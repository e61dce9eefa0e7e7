"""Reservation workflow: booking a spot and reading a user's reservations."""

import logging
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from parkreserve.config import settings
from parkreserve.db.models import Reservation, User
from parkreserve.enums import ReservationBucket, SpotStatus
from parkreserve.schemas.reservation import ReservationCreate, ReservationResponse
from parkreserve.services import parking_spots
from parkreserve.services.classifier import (
    classify_reservation,
    partition_reservations,
    remaining_time,
)

logger = logging.getLogger(__name__)


class ReservationError(Exception):
    """Base error raised by the reservation workflow."""

    message = "Failed to create your reservation"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class UnknownComplexError(ReservationError):
    message = "Unknown parking complex"


class SpotNotFoundError(ReservationError):
    message = "Invalid parking spot selected"


class SpotUnavailableError(ReservationError):
    message = "Parking spot is no longer available"


class ReservationStoreError(ReservationError):
    message = "Failed to create your reservation"


async def reserve_spot(
    db: AsyncSession,
    user: User,
    data: ReservationCreate,
    now: Optional[datetime] = None,
) -> Reservation:
    """
    Book a spot for today.

    The reservation insert and the spot status update are committed
    separately. If the insert fails nothing else happens. If the status
    update fails the reservation stands and the spot keeps its previous
    status, unless ``STRICT_SPOT_BOOKING`` is enabled, in which case the
    update only applies to an available spot and the reservation is deleted
    again when it does not.
    """
    now = now or datetime.now()

    if data.parking_complex not in settings.PARKING_COMPLEXES:
        raise UnknownComplexError(f"Unknown parking complex: {data.parking_complex}")

    spot = await parking_spots.get_parking_spot(db, data.parking_complex, data.spot_id)
    if spot is None:
        raise SpotNotFoundError()

    reservation = Reservation(
        user_id=user.id,
        parking_complex=data.parking_complex,
        spot_id=data.spot_id,
        vehicle_plate=data.vehicle_plate,
        date=now.date().isoformat(),
        time=data.time,
        duration=data.duration,
        status=ReservationBucket.UPCOMING.value,
    )

    logger.info(f"Adding reservation for spot {data.spot_id} in {data.parking_complex}")
    try:
        db.add(reservation)
        await db.commit()
        await db.refresh(reservation)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Error creating reservation")
        raise ReservationStoreError() from e

    # Detach so a rollback of the status update does not expire the row
    db.expunge(reservation)

    if settings.STRICT_SPOT_BOOKING:
        await _reserve_spot_or_compensate(db, reservation)
    else:
        try:
            matched = await parking_spots.update_spot_status(
                db, data.parking_complex, data.spot_id, SpotStatus.RESERVED
            )
            if not matched:
                logger.warning(
                    f"Spot {data.spot_id} in {data.parking_complex} disappeared before update"
                )
        except SQLAlchemyError:
            await db.rollback()
            logger.exception(
                f"Reservation {reservation.id} created but spot {data.spot_id} "
                f"in {data.parking_complex} was not marked reserved"
            )

    parking_spots.spot_cache.invalidate(data.parking_complex)

    logger.info(f"Reservation {reservation.id} created")
    return reservation


async def _reserve_spot_or_compensate(db: AsyncSession, reservation: Reservation) -> None:
    try:
        matched = await parking_spots.update_spot_status(
            db,
            reservation.parking_complex,
            reservation.spot_id,
            SpotStatus.RESERVED,
            only_if=SpotStatus.AVAILABLE,
        )
    except SQLAlchemyError:
        await db.rollback()
        logger.exception(f"Failed to mark spot {reservation.spot_id} reserved")
        matched = False

    if matched:
        return

    logger.warning(
        f"Spot {reservation.spot_id} in {reservation.parking_complex} not available, "
        f"removing reservation {reservation.id}"
    )
    try:
        await db.execute(delete(Reservation).where(Reservation.id == reservation.id))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception(
            f"Failed to remove reservation {reservation.id}, it is orphaned on spot "
            f"{reservation.spot_id} in {reservation.parking_complex}"
        )
        raise ReservationStoreError() from e
    finally:
        parking_spots.spot_cache.invalidate(reservation.parking_complex)

    raise SpotUnavailableError()


async def get_reservations_by_user_id(db: AsyncSession, user_id: UUID) -> List[Reservation]:
    result = await db.execute(
        select(Reservation)
        .where(Reservation.user_id == user_id)
        .order_by(Reservation.date.desc(), Reservation.created_at.desc())
    )
    return list(result.scalars().all())


async def get_user_reservation(
    db: AsyncSession, user_id: UUID, reservation_id: UUID
) -> Optional[Reservation]:
    result = await db.execute(
        select(Reservation).where(
            Reservation.id == reservation_id,
            Reservation.user_id == user_id,
        )
    )
    return result.scalar_one_or_none()


def to_response(reservation: Reservation, now: Optional[datetime] = None) -> ReservationResponse:
    """Build the API view of a reservation with its status recomputed."""
    now = now or datetime.now()
    bucket = classify_reservation(reservation.date, reservation.time, reservation.duration, now)

    return ReservationResponse(
        id=reservation.id,
        user_id=reservation.user_id,
        parking_complex=reservation.parking_complex,
        spot_id=reservation.spot_id,
        vehicle_plate=reservation.vehicle_plate,
        date=reservation.date,
        time=reservation.time,
        duration=reservation.duration,
        status=bucket,
        recorded_status=reservation.status,
        remaining_time=(
            remaining_time(reservation.time, reservation.duration, now)
            if bucket == ReservationBucket.LIVE
            else None
        ),
        created_at=reservation.created_at,
    )


async def get_bucketed_reservations(
    db: AsyncSession, user_id: UUID, now: Optional[datetime] = None
) -> Dict[ReservationBucket, List[ReservationResponse]]:
    """Fetch a user's reservations and partition them into display buckets."""
    now = now or datetime.now()
    reservations = await get_reservations_by_user_id(db, user_id)

    return {
        bucket: [to_response(reservation, now) for reservation in members]
        for bucket, members in partition_reservations(reservations, now).items()
    }

"""Reservation model."""

from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from parkreserve.db.base import Base


class Reservation(Base):
    """A user's booking of one parking spot for a time slot on a given day."""

    __tablename__ = "reservations"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    parking_complex = Column(String(255), nullable=False)
    spot_id = Column(String(32), nullable=False)
    vehicle_plate = Column(String(32), nullable=False)

    # ISO date (YYYY-MM-DD), 12-hour slot label and duration label
    date = Column(String(10), nullable=False)
    time = Column(String(8), nullable=False)
    duration = Column(String(16), nullable=False)

    # Snapshot taken at creation; the display bucket is derived on read
    status = Column(String(16), nullable=False, default="upcoming")

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    # Constraints
    __table_args__ = (
        CheckConstraint("status IN ('upcoming', 'live', 'past')", name="check_reservation_status"),
    )

    # Relationships
    user = relationship("User", back_populates="reservations")

    def __repr__(self):
        return f"<Reservation(id={self.id}, spot_id={self.spot_id}, date={self.date}, time={self.time})>"

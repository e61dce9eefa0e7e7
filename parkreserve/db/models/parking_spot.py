"""ParkingSpot model."""

from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, DateTime, String, UniqueConstraint, Uuid
from sqlalchemy.sql import func

from parkreserve.db.base import Base


class ParkingSpot(Base):
    """Individual parking spot within a parking complex."""

    __tablename__ = "parking_spots"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    parking_complex = Column(String(255), nullable=False, index=True)
    spot_id = Column(String(32), nullable=False)
    status = Column(String(16), nullable=False, default="available")  # 'available', 'occupied', 'reserved'
    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Constraints
    __table_args__ = (
        UniqueConstraint("parking_complex", "spot_id", name="uq_parking_spots_complex_spot"),
        CheckConstraint(
            "status IN ('available', 'occupied', 'reserved')", name="check_spot_status"
        ),
    )

    def __repr__(self):
        return f"<ParkingSpot(complex={self.parking_complex}, spot_id={self.spot_id}, status={self.status})>"

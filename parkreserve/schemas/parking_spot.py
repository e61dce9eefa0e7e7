"""ParkingSpot schemas."""

from typing import Dict, List

from pydantic import BaseModel

from parkreserve.enums import SpotStatus


class ParkingSpotResponse(BaseModel):
    """Schema for parking spot response."""

    parking_complex: str
    spot_id: str
    status: SpotStatus

    model_config = {"from_attributes": True}


class ComplexSpots(BaseModel):
    """Spots of every parking complex keyed by complex name."""

    complexes: Dict[str, List[ParkingSpotResponse]]

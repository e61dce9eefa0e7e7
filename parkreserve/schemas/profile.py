"""Profile schemas."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class ProfileResponse(BaseModel):
    """Schema for profile response."""

    id: UUID
    name: str
    email: str
    vehicle_plate: str

    model_config = {"from_attributes": True}


class ProfileUpdate(BaseModel):
    """Schema for updating profile details."""

    name: Optional[str] = Field(None, max_length=255)
    vehicle_plate: Optional[str] = Field(None, max_length=32)

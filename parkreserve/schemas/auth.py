"""Auth schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    """Schema for registering an account."""

    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=255)
    password: str
    vehicle_plate: str = Field(..., max_length=32)


class SignInRequest(BaseModel):
    """Schema for signing in."""

    email: str
    password: str


class PasswordChangeRequest(BaseModel):
    """Schema for changing the password of the signed-in user."""

    new_password: str
    confirm_password: str


class SessionResponse(BaseModel):
    """Schema for an issued session."""

    access_token: str
    token_type: str = "bearer"
    user_id: UUID
    expires_at: datetime


class CurrentSession(BaseModel):
    """Schema describing the caller's session state."""

    authenticated: bool
    user_id: UUID
    email: str

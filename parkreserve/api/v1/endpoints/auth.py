"""Auth endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from parkreserve.api.deps import get_current_user, get_db_session, get_token
from parkreserve.db.models import User
from parkreserve.schemas.auth import (
    CurrentSession,
    PasswordChangeRequest,
    SessionResponse,
    SignInRequest,
    SignUpRequest,
)
from parkreserve.schemas.profile import ProfileResponse
from parkreserve.services import auth as auth_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/sign-up", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(
    data: SignUpRequest,
    db: AsyncSession = Depends(get_db_session),
):
    """Register a new account."""
    try:
        user = await auth_service.sign_up(
            db,
            email=data.email,
            password=data.password,
            name=data.name,
            vehicle_plate=data.vehicle_plate,
        )
    except auth_service.EmailTakenError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except auth_service.AuthError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Registration error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error registering account",
        )

    return user


@router.post("/sign-in", response_model=SessionResponse)
async def sign_in(
    data: SignInRequest,
    db: AsyncSession = Depends(get_db_session),
):
    """Sign in and receive a bearer token."""
    try:
        session = await auth_service.sign_in(db, data.email, data.password)
    except auth_service.InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Login error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to log in",
        )

    return SessionResponse(
        access_token=session.token,
        user_id=session.user_id,
        expires_at=session.expires_at,
    )


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    token: str = Depends(get_token),
    db: AsyncSession = Depends(get_db_session),
):
    """End the current session."""
    try:
        await auth_service.sign_out(db, token)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Logout error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to log out",
        )


@router.get("/session", response_model=CurrentSession)
async def get_session(user: User = Depends(get_current_user)):
    """Describe the caller's session."""
    return CurrentSession(authenticated=True, user_id=user.id, email=user.email)


@router.post("/password", status_code=status.HTTP_204_NO_CONTENT)
async def change_password(
    data: PasswordChangeRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    """Change the password of the signed-in user."""
    try:
        await auth_service.update_password(db, user, data.new_password, data.confirm_password)
    except auth_service.AuthError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Password change error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to change password",
        )

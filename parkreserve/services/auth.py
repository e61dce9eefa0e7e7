"""Auth provider: accounts, password hashing and bearer sessions."""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from werkzeug.security import check_password_hash, generate_password_hash

from parkreserve.config import settings
from parkreserve.db.models import AuthSession, User

logger = logging.getLogger(__name__)

MIN_SIGN_UP_PASSWORD_LENGTH = 6
MIN_CHANGED_PASSWORD_LENGTH = 8


class AuthError(Exception):
    """Raised when an auth operation is rejected."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidCredentialsError(AuthError):
    pass


class EmailTakenError(AuthError):
    pass


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == normalize_email(email)))
    return result.scalar_one_or_none()


async def sign_up(
    db: AsyncSession,
    email: str,
    password: str,
    name: str,
    vehicle_plate: str,
) -> User:
    """Register a new account."""
    if not all(value and value.strip() for value in (name, email, password, vehicle_plate)):
        raise AuthError("Please fill in all fields")
    if len(password) < MIN_SIGN_UP_PASSWORD_LENGTH:
        raise AuthError(
            f"Password must be at least {MIN_SIGN_UP_PASSWORD_LENGTH} characters long"
        )
    if await get_user_by_email(db, email):
        raise EmailTakenError("An account with this email already exists")

    user = User(
        email=normalize_email(email),
        password_hash=generate_password_hash(password),
        name=name.strip(),
        vehicle_plate=vehicle_plate.strip(),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return user


async def sign_in(db: AsyncSession, email: str, password: str) -> AuthSession:
    """Check credentials and open a new session."""
    user = await get_user_by_email(db, email)
    if user is None or not check_password_hash(user.password_hash, password):
        raise InvalidCredentialsError("Invalid email or password")

    session = AuthSession(
        token=secrets.token_urlsafe(32),
        user_id=user.id,
        expires_at=datetime.now(timezone.utc) + timedelta(hours=settings.SESSION_TTL_HOURS),
    )
    db.add(session)
    await db.commit()
    await db.refresh(session)

    logger.info(f"User {user.id} signed in")
    return session


async def sign_out(db: AsyncSession, token: str) -> None:
    await db.execute(delete(AuthSession).where(AuthSession.token == token))
    await db.commit()


async def get_session_user(db: AsyncSession, token: str) -> Optional[User]:
    """Return the user owning an unexpired session token, if any."""
    result = await db.execute(
        select(User)
        .join(AuthSession, AuthSession.user_id == User.id)
        .where(
            AuthSession.token == token,
            AuthSession.expires_at > datetime.now(timezone.utc),
        )
    )
    return result.scalar_one_or_none()


async def update_password(
    db: AsyncSession, user: User, new_password: str, confirm_password: str
) -> None:
    if new_password != confirm_password:
        raise AuthError("Passwords don't match")
    if len(new_password) < MIN_CHANGED_PASSWORD_LENGTH:
        raise AuthError(
            f"Password must be at least {MIN_CHANGED_PASSWORD_LENGTH} characters"
        )

    user.password_hash = generate_password_hash(new_password)
    await db.commit()
    logger.info(f"Password changed for user {user.id}")

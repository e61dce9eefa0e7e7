"""AuthSession model."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from parkreserve.db.base import Base


class AuthSession(Base):
    """Bearer token issued on sign-in."""

    __tablename__ = "auth_sessions"

    token = Column(String(128), primary_key=True)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    expires_at = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    user = relationship("User", back_populates="sessions")

    def __repr__(self):
        return f"<AuthSession(user_id={self.user_id}, expires_at={self.expires_at})>"

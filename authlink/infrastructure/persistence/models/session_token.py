"""Login session token database model."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from authlink.infrastructure.persistence.base import BaseModel


class SessionTokenModel(BaseModel):
    """Session token issued by login.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Issue time (from BaseModel)
        user_id: Foreign key to users table (cascade delete)
        token: Random hex string (64 characters, unique)
        expires_at: Expiry timestamp
    """

    __tablename__ = "session_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    token: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<SessionTokenModel(id={self.id}, user_id={self.user_id})>"

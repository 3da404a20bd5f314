"""Email verification token database model.

Security:
    - token: Random 32-byte hex string (unguessable, 2^256 possibilities)
    - One row per user (unique user_id); resend rewrites it in place
    - Deleted on use or on discovery of expiry (no used_at flag)
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from authlink.infrastructure.persistence.base import BaseModel


class VerificationTokenModel(BaseModel):
    """Verification token model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Issue time; reset on resend (from BaseModel)
        user_id: Foreign key to users table (cascade delete, unique)
        token: Random hex string (64 characters, indexed)
    """

    __tablename__ = "verification_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
        comment="User who needs to verify their email",
    )

    token: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
        comment="Random verification token (64-char hex string)",
    )

    def __repr__(self) -> str:
        return (
            f"<VerificationTokenModel("
            f"id={self.id}, "
            f"user_id={self.user_id}, "
            f"created_at={self.created_at}"
            f")>"
        )

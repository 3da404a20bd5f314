"""User database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - email: unique index, so concurrent registrations cannot both succeed
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from authlink.infrastructure.persistence.base import BaseModel


class UserModel(BaseModel):
    """User model for registration and login.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when user registered (from BaseModel)
        first_name: Given name
        last_name: Family name
        email: Unique email address, case-sensitive as stored
        password_hash: Bcrypt hashed password
        is_verified: Email verification status
    """

    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    last_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Unique email address",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    is_verified: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Email verification status",
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, is_verified={self.is_verified})>"

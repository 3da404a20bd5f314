"""Authentication DTOs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from authlink.domain.entities import User


@dataclass(frozen=True, kw_only=True)
class UserView:
    """Externally observable user data.

    The password hash never leaves the application layer.

    Attributes:
        id: User identifier.
        first_name: Given name.
        last_name: Family name.
        email: Email address as stored.
        is_verified: Email verification status.
        created_at: Registration timestamp.
    """

    id: UUID
    first_name: str
    last_name: str
    email: str
    is_verified: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        if user.id is None:
            raise ValueError("User has not been persisted")
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            is_verified=user.is_verified,
            created_at=user.created_at,
        )

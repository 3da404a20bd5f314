"""User domain entity.

Pure business data, no framework dependencies.

Business Rules:
    - Email is unique across users (enforced by the credential store)
    - password_hash is never empty once created
    - is_verified goes False -> True exactly once and is never reversed
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """User account awaiting or holding email verification.

    Attributes:
        first_name: Given name (non-empty).
        last_name: Family name (non-empty).
        email: Email address, case-sensitive as stored.
        password_hash: Bcrypt hash (never plaintext).
        is_verified: Email verification status.
        created_at: Timestamp when user was created.
        id: Store-assigned identifier (None until inserted).

    Example:
        >>> user = User(
        ...     first_name="Ada",
        ...     last_name="Lovelace",
        ...     email="ada@example.com",
        ...     password_hash="$2b$10$...",
        ... )
        >>> user.is_verified
        False
    """

    first_name: str
    last_name: str
    email: str
    password_hash: str
    is_verified: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    id: UUID | None = None

    def __post_init__(self) -> None:
        if not self.password_hash:
            raise ValueError("password_hash must not be empty")

    def mark_verified(self) -> None:
        """Flip the verified flag (idempotent, never reverses)."""
        self.is_verified = True

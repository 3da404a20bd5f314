"""CredentialStore protocol (port) for user and token persistence.

Pure data-access contract: no business rules live here. Every operation is
atomic at the single-record level; nothing requires multi-record
transactions. "Not found" is expressed as None, never as an exception.

Implementations:
    - InMemoryCredentialStore: authlink/infrastructure/persistence/memory_credential_store.py
    - SqlCredentialStore: authlink/infrastructure/persistence/sql_credential_store.py
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from authlink.domain.entities import SessionToken, User, VerificationToken


class DuplicateEmailError(Exception):
    """Raised by insert_user when the email is already registered.

    Stores with a uniqueness constraint raise this for the losing side of a
    concurrent registration race as well.
    """

    def __init__(self, email: str) -> None:
        super().__init__(f"User with email {email!r} already exists")
        self.email = email


class CredentialStore(Protocol):
    """Persistence for User, VerificationToken and SessionToken records."""

    async def find_user_by_email(self, email: str) -> User | None:
        """Find user by exact (case-sensitive) email."""
        ...

    async def insert_user(self, user: User) -> UUID:
        """Persist a new user and assign its identifier.

        Returns:
            The store-assigned user id (also set on `user.id`).

        Raises:
            DuplicateEmailError: If the email is already present.
        """
        ...

    async def find_user_by_id(self, user_id: UUID) -> User | None:
        """Find user by identifier."""
        ...

    async def set_user_verified(self, user_id: UUID) -> None:
        """Set the user's verified flag to True."""
        ...

    async def find_token_by_user(self, user_id: UUID) -> VerificationToken | None:
        """Find the verification token row owned by a user."""
        ...

    async def find_token_by_user_and_secret(
        self, user_id: UUID, secret: str
    ) -> VerificationToken | None:
        """Find the verification token matching both owner and secret."""
        ...

    async def insert_token(self, token: VerificationToken) -> UUID:
        """Persist a new verification token and assign its identifier."""
        ...

    async def replace_token_secret(
        self, token_id: UUID, new_secret: str, new_created_at: datetime
    ) -> None:
        """Overwrite a token's secret and creation timestamp in place."""
        ...

    async def delete_token(self, token_id: UUID) -> None:
        """Delete a verification token (no-op if already gone)."""
        ...

    async def insert_session_token(self, session_token: SessionToken) -> UUID:
        """Persist a login session token and assign its identifier."""
        ...

    async def find_session_token(self, secret: str) -> SessionToken | None:
        """Find a login session token by its secret."""
        ...

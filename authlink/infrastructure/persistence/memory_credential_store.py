"""InMemoryCredentialStore - process-local CredentialStore implementation.

Used for development (no DATABASE_URL) and tests. Callers receive copies of
stored records, never the records themselves, matching the request-scoped
semantics of a real backend.
"""

import asyncio
from dataclasses import replace
from datetime import datetime
from uuid import UUID

from uuid_extensions import uuid7

from authlink.domain.entities import SessionToken, User, VerificationToken
from authlink.domain.protocols.credential_store import DuplicateEmailError


class InMemoryCredentialStore:
    """Dictionary-backed credential store.

    Email uniqueness is enforced under an asyncio.Lock, so two concurrent
    registrations for the same address cannot both insert.

    Example:
        >>> store = InMemoryCredentialStore()
        >>> user_id = await store.insert_user(user)
        >>> (await store.find_user_by_id(user_id)).email
        'a@b.com'
    """

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}
        self._tokens: dict[UUID, VerificationToken] = {}
        self._session_tokens: dict[UUID, SessionToken] = {}
        self._lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def find_user_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return replace(user)
        return None

    async def insert_user(self, user: User) -> UUID:
        async with self._lock:
            if any(existing.email == user.email for existing in self._users.values()):
                raise DuplicateEmailError(user.email)
            user_id = uuid7()
            self._users[user_id] = replace(user, id=user_id)
        user.id = user_id
        return user_id

    async def find_user_by_id(self, user_id: UUID) -> User | None:
        user = self._users.get(user_id)
        return replace(user) if user else None

    async def set_user_verified(self, user_id: UUID) -> None:
        user = self._users.get(user_id)
        if user is not None:
            user.mark_verified()

    # ------------------------------------------------------------------
    # Verification tokens
    # ------------------------------------------------------------------

    async def find_token_by_user(self, user_id: UUID) -> VerificationToken | None:
        for token in self._tokens.values():
            if token.user_id == user_id:
                return replace(token)
        return None

    async def find_token_by_user_and_secret(
        self, user_id: UUID, secret: str
    ) -> VerificationToken | None:
        for token in self._tokens.values():
            if token.user_id == user_id and token.token == secret:
                return replace(token)
        return None

    async def insert_token(self, token: VerificationToken) -> UUID:
        token_id = uuid7()
        self._tokens[token_id] = replace(token, id=token_id)
        token.id = token_id
        return token_id

    async def replace_token_secret(
        self, token_id: UUID, new_secret: str, new_created_at: datetime
    ) -> None:
        token = self._tokens.get(token_id)
        if token is not None:
            token.token = new_secret
            token.created_at = new_created_at

    async def delete_token(self, token_id: UUID) -> None:
        self._tokens.pop(token_id, None)

    # ------------------------------------------------------------------
    # Session tokens
    # ------------------------------------------------------------------

    async def insert_session_token(self, session_token: SessionToken) -> UUID:
        token_id = uuid7()
        self._session_tokens[token_id] = replace(session_token, id=token_id)
        session_token.id = token_id
        return token_id

    async def find_session_token(self, secret: str) -> SessionToken | None:
        for session_token in self._session_tokens.values():
            if session_token.token == secret:
                return replace(session_token)
        return None

    # ------------------------------------------------------------------
    # Inspection helpers (tests, debugging)
    # ------------------------------------------------------------------

    def count_users(self, email: str | None = None) -> int:
        """Number of stored users, optionally filtered by email."""
        if email is None:
            return len(self._users)
        return sum(1 for user in self._users.values() if user.email == email)

    def count_tokens(self, user_id: UUID | None = None) -> int:
        """Number of stored verification tokens, optionally for one user."""
        if user_id is None:
            return len(self._tokens)
        return sum(1 for token in self._tokens.values() if token.user_id == user_id)

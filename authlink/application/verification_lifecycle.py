"""Email verification token lifecycle.

States:
    NoToken -> Active (issue)
    Active -> Active (reissue: new secret, new timestamp, same row)
    Active -> Consumed (check_and_consume within the lifetime; row deleted)
    Active -> Expired (check_and_consume after the lifetime; row deleted)

A token exactly `ttl` old is still valid. Expiry is decided against the
same clock that stamped created_at.
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from enum import Enum
from uuid import UUID

from authlink.core.constants import VERIFICATION_TOKEN_TTL
from authlink.core.enums import ErrorCode
from authlink.core.errors import NotFoundError
from authlink.core.result import Failure, Result, Success
from authlink.domain.entities import VerificationToken
from authlink.domain.protocols import CredentialStore, TokenGenerationProtocol


def utc_now() -> datetime:
    """Timezone-aware UTC wall clock."""
    return datetime.now(UTC)


class VerificationOutcome(Enum):
    """Result of presenting a (user, secret) pair."""

    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    CONSUMED = "consumed"


class VerificationLifecycle:
    """Issue, reissue and consume verification tokens.

    Store exceptions propagate; the auth service turns them into
    InfrastructureError results.

    Example:
        >>> lifecycle = VerificationLifecycle(store, SecureTokenGenerator())
        >>> secret = await lifecycle.issue(user_id)
        >>> await lifecycle.check_and_consume(user_id, secret)
        <VerificationOutcome.CONSUMED: 'consumed'>
    """

    def __init__(
        self,
        store: CredentialStore,
        token_generator: TokenGenerationProtocol,
        *,
        ttl: timedelta = VERIFICATION_TOKEN_TTL,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._token_generator = token_generator
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    async def issue(self, user_id: UUID) -> str:
        """Create the user's verification token row.

        Returns:
            The new secret.
        """
        secret = self._token_generator.new_token()
        token = VerificationToken(
            user_id=user_id,
            token=secret,
            created_at=self._clock(),
        )
        await self._store.insert_token(token)
        return secret

    async def reissue(self, user_id: UUID) -> Result[str, NotFoundError]:
        """Overwrite the user's existing token with a fresh secret.

        The row keeps its identity; secret and created_at are replaced, so
        the previous secret stops matching immediately.

        Returns:
            Success(new_secret), or Failure(NotFoundError) if the user has no
            token row (never registered, or already verified).
        """
        existing = await self._store.find_token_by_user(user_id)
        if existing is None or existing.id is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.TOKEN_NOT_FOUND,
                    message="Verification token not found",
                    resource_type="VerificationToken",
                    resource_id=str(user_id),
                )
            )

        secret = self._token_generator.new_token()
        await self._store.replace_token_secret(existing.id, secret, self._clock())
        return Success(value=secret)

    async def check_and_consume(
        self, user_id: UUID, secret: str, now: datetime | None = None
    ) -> VerificationOutcome:
        """Present a secret for consumption.

        Args:
            user_id: Claimed owner.
            secret: Secret from the verification link.
            now: Evaluation time (defaults to the lifecycle clock).

        Returns:
            NOT_FOUND if no row matches (nothing changes), EXPIRED if the row
            is older than the lifetime, CONSUMED otherwise. The matching row
            is deleted in both of the latter cases.
        """
        token = await self._store.find_token_by_user_and_secret(user_id, secret)
        if token is None or token.id is None:
            return VerificationOutcome.NOT_FOUND

        if now is None:
            now = self._clock()
        expired = token.is_expired(now, self._ttl)
        await self._store.delete_token(token.id)
        if expired:
            return VerificationOutcome.EXPIRED
        return VerificationOutcome.CONSUMED

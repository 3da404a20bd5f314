"""Email verification token entity.

Lifecycle:
    1. Created on registration (paired with the new user)
    2. Secret and created_at replaced in place on resend
    3. Deleted on successful verification or when found expired
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID


@dataclass
class VerificationToken:
    """Single-use verification secret owned by one user.

    Attributes:
        user_id: Owning user's identifier.
        token: 64-char hex secret.
        created_at: Issue timestamp (timezone-aware UTC).
        id: Store-assigned identifier (None until inserted).
    """

    user_id: UUID
    token: str
    created_at: datetime
    id: UUID | None = None

    def is_expired(self, now: datetime, ttl: timedelta) -> bool:
        """Check whether the token is older than its lifetime.

        A token exactly `ttl` old is still valid.

        Args:
            now: Current time from the same clock that stamped created_at.
            ttl: Token lifetime.

        Returns:
            True if now - created_at > ttl.
        """
        return now - self.created_at > ttl

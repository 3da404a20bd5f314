"""Login session token entity.

Session tokens are long-lived bearer tokens returned by login. They are
not single-use; they stop resolving once expires_at has passed.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class SessionToken:
    """Bearer credential issued on successful login.

    Attributes:
        user_id: Owning user's identifier.
        token: 64-char hex secret.
        created_at: Issue timestamp (UTC).
        expires_at: Timestamp after which the token no longer resolves.
        id: Store-assigned identifier (None until inserted).
    """

    user_id: UUID
    token: str
    created_at: datetime
    expires_at: datetime
    id: UUID | None = None

    def is_expired(self, now: datetime) -> bool:
        """True once now has passed expires_at."""
        return now > self.expires_at

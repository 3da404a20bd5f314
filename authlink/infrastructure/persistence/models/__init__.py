"""Database models for the persistence layer.

Models Organization:
    - user.py: User model
    - verification_token.py: Email verification token model (one per user)
    - session_token.py: Login session token model

Note:
    Domain entities (dataclasses) live in authlink/domain/entities/ and are
    mapped to/from these models by SqlCredentialStore.
"""

from authlink.infrastructure.persistence.models.session_token import (
    SessionTokenModel,
)
from authlink.infrastructure.persistence.models.user import UserModel
from authlink.infrastructure.persistence.models.verification_token import (
    VerificationTokenModel,
)

__all__ = [
    "UserModel",
    "VerificationTokenModel",
    "SessionTokenModel",
]

"""Domain entities package."""

from authlink.domain.entities.session_token import SessionToken
from authlink.domain.entities.user import User
from authlink.domain.entities.verification_token import VerificationToken

__all__ = ["User", "VerificationToken", "SessionToken"]

"""Security adapters: token generation and password hashing."""

from authlink.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from authlink.infrastructure.security.token_generator import SecureTokenGenerator

__all__ = ["BcryptPasswordService", "SecureTokenGenerator"]

"""Core errors package.

Usage:
    from authlink.core.errors import DomainError, ValidationError, NotFoundError
"""

from authlink.core.errors.common_errors import (
    AuthenticationError,
    ConflictError,
    InfrastructureError,
    NotFoundError,
    TokenExpiredError,
    ValidationError,
)
from authlink.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "TokenExpiredError",
    "InfrastructureError",
]

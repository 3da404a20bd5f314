"""Common error classes used across the service.

Error Types:
- ValidationError: Input validation failures (never retried)
- ConflictError: Duplicate email
- AuthenticationError: Bad credentials or unusable session token
- NotFoundError: Unknown user or token
- TokenExpiredError: Verification token older than its lifetime ("gone")
- InfrastructureError: Store, randomness source or hashing failures

Usage:
    from authlink.core.enums import ErrorCode
    from authlink.core.errors import ValidationError
    from authlink.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Invalid email address",
        field="email",
    ))
"""

from dataclasses import dataclass

from authlink.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, VerificationToken).
        resource_id: Identifier of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate email).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, unusable session token)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenExpiredError(DomainError):
    """Verification token exceeded its lifetime.

    The expired record has already been deleted when this error is returned.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Failure of an external dependency (store, CSPRNG, hashing).

    Attributes:
        operation: Name of the operation that failed.
    """

    operation: str | None = None

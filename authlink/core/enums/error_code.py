"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.

Categories:
- Validation errors (INVALID_*, *_REQUIRED, *_TOO_SHORT)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*, SESSION_EXPIRED)
- Infrastructure errors (STORE_*, TOKEN_GENERATION_FAILED, PASSWORD_HASHING_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    NAME_REQUIRED = "name_required"
    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    INVALID_USER_ID = "invalid_user_id"
    EMPTY_INPUT = "empty_input"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    TOKEN_NOT_FOUND = "token_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
    SESSION_EXPIRED = "session_expired"

    # Infrastructure errors
    STORE_OPERATION_FAILED = "store_operation_failed"
    TOKEN_GENERATION_FAILED = "token_generation_failed"
    PASSWORD_HASHING_FAILED = "password_hashing_failed"

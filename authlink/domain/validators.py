"""Registration and identifier validation functions.

Validators are pure functions that raise ValueError on failure, so they can
be reused from pydantic schemas as well as from the auth service.
"""

from uuid import UUID

from email_validator import EmailNotValidError, validate_email as _validate_email

from authlink.core.constants import BCRYPT_MAX_PASSWORD_BYTES, PASSWORD_MIN_LENGTH


def validate_name(v: str, field_name: str = "name") -> str:
    """Require a non-blank name.

    Raises:
        ValueError: If the name is empty or whitespace only.
    """
    if not v or not v.strip():
        raise ValueError(f"{field_name} is required")
    return v.strip()


def validate_email_address(v: str) -> str:
    """Validate email syntax including deliverability-oriented rules.

    Uses email-validator without DNS lookups. Beyond RFC shape this rejects
    special-use and reserved domains (localhost, .test, .invalid, ...) and
    domains without a dot, which can never receive mail.

    Returns:
        The email unchanged (stored case-sensitive as provided).

    Raises:
        ValueError: If the address cannot be delivered to.

    Example:
        >>> validate_email_address("a@b.com")
        'a@b.com'
        >>> validate_email_address("user@localhost")
        ValueError: Invalid email address: ...
    """
    try:
        _validate_email(v, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email address: {e}") from e
    return v


def validate_password_length(v: str) -> str:
    """Require at least PASSWORD_MIN_LENGTH characters.

    Raises:
        ValueError: If the password is too short.
    """
    if len(v) < PASSWORD_MIN_LENGTH:
        raise ValueError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
        )
    return v


def validate_password_size(v: str) -> str:
    """Reject passwords bcrypt cannot hash in full.

    Raises:
        ValueError: If the UTF-8 encoding exceeds BCRYPT_MAX_PASSWORD_BYTES.
    """
    if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(
            f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes long"
        )
    return v


def parse_user_id(v: str) -> UUID:
    """Parse a store-assigned user identifier.

    Accepts the canonical hyphenated form and the bare 32-char hex form.

    Raises:
        ValueError: If v is not a structurally valid identifier.
    """
    try:
        return UUID(v.strip())
    except (ValueError, AttributeError, TypeError) as e:
        raise ValueError(f"Invalid user ID: {v!r}") from e

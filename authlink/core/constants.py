"""Centralized constants for internal implementation details.

These are NOT environment-specific configuration. For environment-specific
settings, use `authlink/core/config.py` instead.
"""

from datetime import timedelta

# =============================================================================
# Token and Key Lengths
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of bytes for secure token generation (32 bytes = 256 bits)."""

TOKEN_PREVIEW_LENGTH: int = 8
"""Characters of a token that may appear in logs."""

BCRYPT_ROUNDS_DEFAULT: int = 10
"""Default bcrypt work factor (tens of milliseconds per hash)."""

BCRYPT_MAX_PASSWORD_BYTES: int = 72
"""bcrypt ignores or rejects input beyond 72 bytes."""


# =============================================================================
# Lifetimes
# =============================================================================

VERIFICATION_TOKEN_TTL: timedelta = timedelta(hours=1)
"""Default lifetime of an email verification token."""


# =============================================================================
# Validation
# =============================================================================

PASSWORD_MIN_LENGTH: int = 6
"""Minimum accepted password length at registration."""


# =============================================================================
# Email
# =============================================================================

VERIFICATION_EMAIL_SUBJECT: str = "Verify Email"
"""Subject line of verification emails."""

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum characters of a message body written to logs."""

"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Security:
    - Adaptive, salted one-way hash
    - Constant-time comparison via bcrypt.checkpw
    - Cost factor 10 by default (tens of milliseconds per hash)

Performance:
    - Hashing is CPU-bound; async callers run it via asyncio.to_thread
      so the event loop keeps serving other requests.
"""

import bcrypt

from authlink.core.constants import BCRYPT_MAX_PASSWORD_BYTES, BCRYPT_ROUNDS_DEFAULT


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        password_service = BcryptPasswordService(cost_factor=10)

        password_hash = password_service.hash_password("secret1")
        is_valid = password_service.verify_password("secret1", password_hash)
    """

    def __init__(self, cost_factor: int = BCRYPT_ROUNDS_DEFAULT) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor. Logarithmic: each +1 doubles
                computation time.

        Raises:
            ValueError: If cost_factor is outside 10..20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password (at most 72 UTF-8 bytes).

        Returns:
            Hash string in bcrypt format ($2b$<cost>$<salt><hash>), 60 chars.

        Raises:
            ValueError: If the password exceeds bcrypt's 72-byte input limit.

        Example:
            >>> service = BcryptPasswordService()
            >>> service.hash_password("secret1") != service.hash_password("secret1")
            True
        """
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            msg = f"Password exceeds {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            raise ValueError(msg)

        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise.

        Note:
            Returns False for invalid hash format or oversized input instead
            of raising (fail securely, safe with untrusted input).
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False

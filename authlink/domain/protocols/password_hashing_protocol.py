"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt, configurable cost factor
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Salted one-way hash.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Compare a plaintext password with a stored hash in constant time.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored hash.

        Returns:
            True if the password matches, False otherwise (including
            malformed hashes).
        """
        ...

"""Secure opaque token generator.

Token Strategy:
    - 32-byte random hex string (64 characters)
    - OS CSPRNG via `secrets` (no fallback to `random`)
    - 2^256 possibilities, collisions negligible
    - Stored in plain text (already unguessable)
"""

import secrets

from authlink.core.constants import TOKEN_BYTES
from authlink.domain.protocols.token_generation_protocol import TokenGenerationError


class SecureTokenGenerator:
    """Opaque token generator used for verification and session tokens.

    Usage:
        generator = SecureTokenGenerator()
        token = generator.new_token()
    """

    def __init__(self, num_bytes: int = TOKEN_BYTES) -> None:
        if num_bytes < TOKEN_BYTES:
            msg = f"Tokens need at least {TOKEN_BYTES} bytes of entropy"
            raise ValueError(msg)
        self._num_bytes = num_bytes

    def new_token(self) -> str:
        """Generate a token.

        Returns:
            Lowercase hex string, two characters per byte.

        Example:
            >>> token = SecureTokenGenerator().new_token()
            >>> len(token)
            64
            >>> all(c in "0123456789abcdef" for c in token)
            True

        Raises:
            TokenGenerationError: If the OS randomness source fails.
        """
        try:
            return secrets.token_hex(self._num_bytes)
        except (OSError, NotImplementedError) as e:
            raise TokenGenerationError("Secure randomness source unavailable") from e

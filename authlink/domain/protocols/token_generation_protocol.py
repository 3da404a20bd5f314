"""Opaque token generation protocol."""

from typing import Protocol


class TokenGenerationError(Exception):
    """Raised by new_token when the secure randomness source is unavailable."""


class TokenGenerationProtocol(Protocol):
    """Produces unguessable opaque token strings.

    Implementations:
        - SecureTokenGenerator: 32 CSPRNG bytes, hex encoded
    """

    def new_token(self) -> str:
        """Return a fresh opaque token.

        Raises:
            TokenGenerationError: If the secure randomness source is
                unavailable. Never falls back to a weaker source.
        """
        ...

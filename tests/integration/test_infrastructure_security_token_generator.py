"""Integration tests for SecureTokenGenerator (real OS randomness)."""

import string
from unittest.mock import patch

import pytest

from authlink.domain.protocols import TokenGenerationError
from authlink.infrastructure.security import SecureTokenGenerator


@pytest.mark.integration
class TestSecureTokenGenerator:
    def test_token_is_64_lowercase_hex_chars(self):
        token = SecureTokenGenerator().new_token()

        assert len(token) == 64
        assert set(token) <= set(string.hexdigits.lower())

    def test_tokens_do_not_repeat(self):
        generator = SecureTokenGenerator()

        tokens = {generator.new_token() for _ in range(1000)}

        assert len(tokens) == 1000

    def test_fewer_than_32_bytes_rejected(self):
        with pytest.raises(ValueError):
            SecureTokenGenerator(num_bytes=16)

    def test_randomness_failure_raises_token_generation_error(self):
        generator = SecureTokenGenerator()

        with patch(
            "authlink.infrastructure.security.token_generator.secrets.token_hex",
            side_effect=OSError("entropy source unavailable"),
        ):
            with pytest.raises(TokenGenerationError) as exc_info:
                generator.new_token()

        assert isinstance(exc_info.value.__cause__, OSError)

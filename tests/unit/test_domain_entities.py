"""Unit tests for User, VerificationToken and SessionToken entities."""

from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from authlink.domain.entities import SessionToken, User, VerificationToken


def create_user(**overrides) -> User:
    kwargs = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "password_hash": "$2b$10$hash",
    }
    kwargs.update(overrides)
    return User(**kwargs)


@pytest.mark.unit
class TestUser:
    def test_new_user_is_unverified(self):
        user = create_user()

        assert user.is_verified is False
        assert user.id is None

    @freeze_time("2024-01-01 12:00:00")
    def test_created_at_defaults_to_utc_now(self):
        user = create_user()

        assert user.created_at == datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

    def test_empty_password_hash_rejected(self):
        with pytest.raises(ValueError, match="password_hash"):
            create_user(password_hash="")

    def test_mark_verified_is_idempotent(self):
        user = create_user()

        user.mark_verified()
        user.mark_verified()

        assert user.is_verified is True


@pytest.mark.unit
class TestVerificationToken:
    def test_expiry_boundary(self):
        created = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
        token = VerificationToken(user_id=uuid7(), token="a" * 64, created_at=created)
        ttl = timedelta(hours=1)

        assert token.is_expired(created + ttl, ttl) is False
        assert token.is_expired(created + ttl + timedelta(seconds=1), ttl) is True


@pytest.mark.unit
class TestSessionToken:
    def test_expiry(self):
        now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
        session_token = SessionToken(
            user_id=uuid7(),
            token="b" * 64,
            created_at=now,
            expires_at=now + timedelta(hours=24),
        )

        assert session_token.is_expired(now + timedelta(hours=24)) is False
        assert session_token.is_expired(now + timedelta(hours=24, microseconds=1))

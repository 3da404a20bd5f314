"""Shared pytest configuration and fixtures.

Markers:
    unit: Tests with mocked or in-memory dependencies
    integration: Tests against real libraries or a real database
    api: HTTP tests through FastAPI's TestClient
"""

import asyncio
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest

from authlink.application.auth_service import AuthService
from authlink.application.verification_lifecycle import VerificationLifecycle
from authlink.infrastructure.persistence import InMemoryCredentialStore
from authlink.infrastructure.security import SecureTokenGenerator

T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real libraries or database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if asyncio.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


class FakeClock:
    """Settable clock for lifecycle and session expiry tests."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class FakePasswordService:
    """Reversible stand-in for bcrypt so unit tests stay fast."""

    def hash_password(self, password: str) -> str:
        return f"hashed:{password}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def token_generator() -> SecureTokenGenerator:
    return SecureTokenGenerator()


@pytest.fixture
def password_service() -> FakePasswordService:
    return FakePasswordService()


@pytest.fixture
def notification_sink() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_logger() -> Mock:
    return Mock()


@pytest.fixture
def lifecycle(store, token_generator, clock) -> VerificationLifecycle:
    return VerificationLifecycle(store, token_generator, clock=clock)


@pytest.fixture
def auth_service(
    store, password_service, lifecycle, token_generator, notification_sink, mock_logger, clock
) -> AuthService:
    return AuthService(
        store=store,
        password_service=password_service,
        lifecycle=lifecycle,
        token_generator=token_generator,
        notification_sink=notification_sink,
        logger=mock_logger,
        verification_url_base="http://localhost:2402",
        session_ttl=timedelta(hours=24),
        clock=clock,
    )

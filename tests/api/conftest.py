"""Fixtures for API tests.

Each test gets a fresh app with its own in-memory store. The notification
sink is an AsyncMock so tests can read the delivered verification link.
"""

import re
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from authlink.core.config import Settings
from authlink.core.container import build_container
from authlink.main import create_app

LINK_PATTERN = re.compile(r"/user/([0-9a-f-]+)/verify/([0-9a-f]{64})")


@pytest.fixture
def settings():
    return Settings(_env_file=None, bcrypt_rounds=10)


@pytest.fixture
def notification_sink():
    return AsyncMock()


@pytest.fixture
def container(settings, notification_sink):
    return build_container(settings, notification_sink=notification_sink, logger=Mock())


@pytest.fixture
def client(container):
    app = create_app(container=container)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def last_link(notification_sink):
    """Return (user_id, token) from the most recent verification email."""

    def _last_link() -> tuple[str, str]:
        _, html_body, _ = notification_sink.send.await_args.args
        match = LINK_PATTERN.search(html_body)
        assert match is not None
        return match.group(1), match.group(2)

    return _last_link

"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from log_helpers import RecordingLog
from reqlog.api.main import create_app
from reqlog.api.settings import Settings


@pytest.fixture()
def recording_log() -> RecordingLog:
    return RecordingLog()


@pytest.fixture()
def test_settings() -> Settings:
    # Short delay; the handler still suspends.
    return Settings(ping_delay_ms=5)


@pytest.fixture()
def client_factory(test_settings):
    """
    Factory fixture that creates a fresh TestClient.

    IMPORTANT:
        Used when tests need extra routes or different settings before the
        first request.
    """

    def _make(settings: Settings | None = None, *, raise_server_exceptions: bool = True) -> TestClient:
        app = create_app(settings or test_settings)
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    """Alias for tests that only need the default app."""
    return client_factory()

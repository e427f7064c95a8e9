"""Integration test fixtures.

This module provides the application under test built by the real factory,
driven in-process through ``TestClient`` so no socket is opened.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from everfit_app.platform.server.app import create_app
from everfit_app.platform.settings import Settings


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings with the port taken from its default."""
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("APP_HTTP__PORT", raising=False)
    return Settings()


@pytest.fixture
def test_app(settings: Settings) -> FastAPI:
    """Create the application with its full middleware stack."""
    return create_app(settings)


@pytest.fixture
def client(test_app: FastAPI) -> TestClient:
    """Create a test client for the test app.

    No context manager needed since route tests do not depend on the lifespan.
    """
    return TestClient(test_app)

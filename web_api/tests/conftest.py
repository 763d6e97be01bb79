"""Pytest fixtures for web API tests."""

from unittest.mock import patch

import jwt
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from web_api.routes.notifications import router as notifications_router
from web_api.routes.settings import router as settings_router

TEST_SECRET = "test-secret-for-session-tokens-only"


@pytest.fixture(autouse=True)
def _jwt_secret():
    """Ensure JWT_SECRET is set so verify_jwt can decode test tokens."""
    with patch("web_api.auth.JWT_SECRET", TEST_SECRET):
        yield


@pytest.fixture
def app():
    """App with the API routers but no lifespan (no scheduler, no DB engine)."""
    app = FastAPI()
    app.include_router(settings_router)
    app.include_router(notifications_router)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def session_token():
    """Build a session token for a user id."""

    def _make(user_id: int) -> str:
        return jwt.encode({"sub": str(user_id)}, TEST_SECRET, algorithm="HS256")

    return _make

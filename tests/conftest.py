"""Shared fixtures for the admin frontend tests."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from gudang_admin.config import settings
from gudang_admin.main import app
from gudang_admin.session import Session, session_store


@pytest.fixture(autouse=True)
def clear_sessions() -> Generator[None, None, None]:
    """Start every test with an empty session store."""
    session_store.clear()
    yield
    session_store.clear()


@pytest.fixture
def user_session() -> Session:
    """A live session as created by a successful login."""
    return session_store.create(token="test-token", role="admin")


@pytest.fixture
def anon_client() -> TestClient:
    """Test client without a session cookie."""
    return TestClient(app)


@pytest.fixture
def client(user_session: Session) -> TestClient:
    """Test client carrying the session cookie of ``user_session``."""
    return TestClient(
        app, cookies={settings.session_cookie_name: user_session.session_id}
    )

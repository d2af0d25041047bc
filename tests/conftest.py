"""
Global test fixtures for the community association backend.

This module provides shared fixtures for all tests including:
- In-memory record store (MemoryStore) in place of the JSON files
- FastAPI test client wired to that store
- Member and admin account helpers
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Never let a test fall back to the real data directory
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="community-tests-"))


# =============================================================================
# Constants
# =============================================================================

ADMIN_EMAIL = "admin@kta-community.org"
ADMIN_PASSWORD = "admin123"

MEMBER_DATA = {
    "name": "Test Member",
    "email": "member@kta.org",
    "phone": "+60111111111",
    "password": "SecurePassword123!",
}


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def store():
    """
    Create an empty in-memory record store.

    Collections are seeded by the app lifespan when a client fixture is used.
    """
    from app.database.store import MemoryStore
    return MemoryStore()


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(store):
    """
    FastAPI app whose get_store() returns the in-memory store.
    """
    import app.database.connections as connections
    from app.main import app as fastapi_app

    connections._store = store
    yield fastapi_app
    connections._store = None


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Entering the client runs the lifespan, which seeds the bootstrap admin
    and the default event into the store.
    """
    with TestClient(app) as c:
        yield c


# =============================================================================
# Authentication Helpers
# =============================================================================

def auth_headers(token: str) -> dict:
    """Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}


def signin(client: TestClient, email: str, password: str) -> str:
    """Sign in and return the token, failing the test on error."""
    response = client.post("/api/auth/signin", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def member_data() -> dict:
    """Basic member data for signup."""
    return dict(MEMBER_DATA)


@pytest.fixture
def admin_token(client) -> str:
    """Token of the seeded bootstrap admin."""
    return signin(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def admin_headers(admin_token) -> dict:
    return auth_headers(admin_token)


@pytest.fixture
def member_token(client, member_data) -> str:
    """Sign up a regular member and return their token."""
    response = client.post("/api/auth/signup", json=member_data)
    assert response.status_code == 201, response.text
    return signin(client, member_data["email"], member_data["password"])


@pytest.fixture
def member_headers(member_token) -> dict:
    return auth_headers(member_token)


@pytest.fixture
def bearer():
    """Build an Authorization header: bearer(token)."""
    return auth_headers


@pytest.fixture
def signin_as(client):
    """Sign in with given credentials and return the token."""
    def _signin(email: str, password: str) -> str:
        return signin(client, email, password)
    return _signin

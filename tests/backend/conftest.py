"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with service instances bound to
the in-memory store and helpers for building collection documents.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Document Builders
# =============================================================================

def make_event_doc(event_id: int, **overrides) -> dict:
    """An event document as stored in events.json."""
    doc = {
        "id": event_id,
        "name": f"Event {event_id}",
        "date": "2026-03-01",
        "time": "18:00",
        "location": "Community Hall",
        "description": "",
        "icon": "",
        "registrations": 0,
        "createdAt": datetime.now(timezone.utc).isoformat(),
    }
    doc.update(overrides)
    return doc


def make_message_doc(message_id: int, likes: int = 0, **overrides) -> dict:
    """A message document as stored in messages.json."""
    doc = {
        "id": message_id,
        "name": f"Visitor {message_id}",
        "email": f"visitor{message_id}@kta.org",
        "phone": None,
        "subject": f"Question {message_id}",
        "message": "When is the next festival?",
        "date": datetime.now(timezone.utc).isoformat(),
        "read": False,
        "likes": likes,
    }
    doc.update(overrides)
    return doc


def make_gallery_doc(item_id: int, **overrides) -> dict:
    doc = {
        "id": item_id,
        "title": f"Photo {item_id}",
        "description": "Festival photo",
        "category": "festivals",
        "type": "image",
        "mimeType": "image/png",
        "data": "aGVsbG8=",
        "uploadedBy": "admin@kta-community.org",
        "uploadedAt": datetime.now(timezone.utc).isoformat(),
    }
    doc.update(overrides)
    return doc


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def auth_service(store):
    from app.services.auth_service import AuthService
    return AuthService(store)


@pytest.fixture
def event_service(store):
    from app.services.event_service import EventService
    return EventService(store)


@pytest.fixture
def gallery_service(store):
    from app.services.gallery_service import GalleryService
    return GalleryService(store)


@pytest.fixture
def message_service(store):
    from app.services.message_service import MessageService
    return MessageService(store)


@pytest.fixture
def user_service(store):
    from app.services.user_service import UserService
    return UserService(store)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, error_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert set(data) == {"error"}
        if error_contains:
            assert error_contains.lower() in data["error"].lower()
    return _assert


# =============================================================================
# Builder Fixtures
# =============================================================================

@pytest.fixture
def event_doc():
    return make_event_doc


@pytest.fixture
def message_doc():
    return make_message_doc


@pytest.fixture
def gallery_doc():
    return make_gallery_doc

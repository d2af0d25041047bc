"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import (
    SignupRequest,
    SignupResponse,
    SigninRequest,
    SigninResponse,
    UserProfile,
)
from app.schemas.event import (
    EventCreate,
    EventUpdate,
    EventRegistrations,
    RegistrationResponse,
)
from app.schemas.gallery import GalleryUpload
from app.schemas.message import ContactRequest, FAQEntry, LikeResponse
from app.schemas.user import AdminChangeRequest, StatsResponse, StatusResponse

__all__ = [
    # Auth
    "SignupRequest",
    "SignupResponse",
    "SigninRequest",
    "SigninResponse",
    "UserProfile",
    # Event
    "EventCreate",
    "EventUpdate",
    "EventRegistrations",
    "RegistrationResponse",
    # Gallery
    "GalleryUpload",
    # Message
    "ContactRequest",
    "FAQEntry",
    "LikeResponse",
    # Admin
    "AdminChangeRequest",
    "StatsResponse",
    "StatusResponse",
]

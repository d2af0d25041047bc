"""
Service layer for business logic.
"""
from app.services.auth_service import AuthService
from app.services.event_service import EventService
from app.services.gallery_service import GalleryService
from app.services.message_service import MessageService
from app.services.stats_service import StatsService
from app.services.user_service import UserService

__all__ = [
    "AuthService",
    "EventService",
    "GalleryService",
    "MessageService",
    "StatsService",
    "UserService",
]

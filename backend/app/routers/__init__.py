"""
API Routers module.
"""
from app.routers import auth, contact, events, faqs, gallery, health, stats, users

__all__ = ["auth", "contact", "events", "faqs", "gallery", "health", "stats", "users"]

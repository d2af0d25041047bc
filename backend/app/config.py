"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    environment: str = "development"
    log_level: str = "INFO"

    # JSON collection files live here
    data_dir: str = "data"

    # JWT Configuration
    jwt_secret_key: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_days: int = 7

    # Password hashing cost factor
    bcrypt_rounds: int = 10

    # Seeded on first run, can never be demoted or deleted
    bootstrap_admin_email: str = "admin@kta-community.org"
    bootstrap_admin_name: str = "Association Admin"
    bootstrap_admin_phone: str = "+60123456789"
    bootstrap_admin_password: str = "admin123"

    cors_origins: list[str] = ["*"]

    # Gallery uploads
    max_upload_mb: int = 50

    # Number of entries returned by the FAQ board
    faq_limit: int = 20

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret_key == DEFAULT_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

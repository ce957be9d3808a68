"""
Application configuration using environment variables.
"""
import os
import secrets
from functools import lru_cache
from pydantic_settings import BaseSettings
from typing import List

_GENERATED_SECRET = secrets.token_urlsafe(32)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Admin Portal API"
    debug: bool = False
    environment: str = "development"

    # Security
    secret_key: str = os.getenv("SECRET_KEY", _GENERATED_SECRET)
    algorithm: str = "HS256"
    session_token_expire_hours: int = 24
    session_cookie_max_age_days: int = 7
    session_cookie_name: str = "token"
    one_time_token_expire_hours: int = 24

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./admin_portal.db")

    # Invite links point at the dashboard frontend
    public_domain: str = "http://localhost:3000"

    # Email (Brevo transactional API)
    brevo_email: str = ""
    brevo_api_key: str = ""
    mail_sender_name: str = "Admin Portal"

    # Image storage (Cloudinary)
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    cloudinary_folder: str = "adminportal"

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:3001",
    ]

    # Session gate
    sign_in_path: str = "/sign-in"
    public_paths: List[str] = [
        "/sign-in",
        "/sign-up",
        "/auth/reset-password",
        "/api/sign-in",
        "/api/sign-up",
        "/api/validate-token",
        "/api/set-password",
        "/api/health",
        "/api/docs",
        "/api/redoc",
        "/openapi.json",
    ]
    # Readable without a session; writes still need one
    public_read_paths: List[str] = ["/api/blog"]

    # Rate limiting
    sign_in_rate_limit: str = "5/minute"
    sign_up_rate_limit: str = "3/minute"
    invite_rate_limit: str = "10/minute"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Validate secret key on startup
settings = get_settings()
if settings.is_production and settings.secret_key == _GENERATED_SECRET:
    raise ValueError(
        "SECRET_KEY must be set in production! "
        "Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\""
    )

"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    admin_password: str
    record_store_url: str = "https://lacy-fine-tax.glitch.me"
    record_store_timeout_seconds: float = 10.0
    session_ttl_seconds: int = 24 * 60 * 60
    session_cookie_name: str = "flight_session"
    session_cookie_secure: bool = False
    cors_origins: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse a comma separated list of allowed CORS origins."""
    if raw is None:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]

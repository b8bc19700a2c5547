"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    access_token_secret: str
    supabase_url: str
    supabase_service_key: str
    cors_origins: str = "http://localhost:5173"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5000
    token_ttl_seconds: int = 3600
    # Must be True in production deployments served over TLS.
    cookie_secure: bool = False
    enforce_booking_ownership: bool = True
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed browser origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    return [chunk.strip() for chunk in cleaned.split(",") if chunk.strip()]

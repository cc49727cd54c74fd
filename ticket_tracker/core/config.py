# ticket_tracker/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    APP_NAME: str = "Ticket Tracker API"
    APP_DESC: str = "Session-scoped ticket tracking with FastAPI"
    APP_VERSION: str = "1.0.0"

    # Signs the session cookie
    SECRET_KEY: str = Field(default="change-me-in-production")
    SESSION_COOKIE: str = "ticket_tracker_session"
    SESSION_MAX_AGE: int = 14 * 24 * 3600  # seconds

    # CORS origins, comma-separated
    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"
    DASHBOARD_RECENT_LIMIT: int = Field(default=5, ge=1)

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        origins = [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]

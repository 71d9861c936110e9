"""
config.py — pydantic-settings Settings class.

All environment variables for the back office are declared here.
The API, the CLI and the tests import `settings` from this module, or
build their own `Settings(...)` and hand it to `create_app()`.

Usage:
    from agneby_shared.config import settings
    print(settings.supabase_url)
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Value shipped in the sample .env; treated the same as a missing key.
PLACEHOLDER_KEY = "your-api-key-here"


def _find_dotenv() -> Path | None:
    """Walk up from CWD to find the nearest .env file."""
    current = Path.cwd()
    for parent in [current, *current.parents]:
        candidate = parent / ".env"
        if candidate.is_file():
            return candidate
    return None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_find_dotenv() or ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Supabase
    # -------------------------------------------------------------------------
    supabase_url: str = Field(default="http://localhost:54321")
    supabase_anon_key: str = Field(default="")
    supabase_service_key: str = Field(default="")
    supabase_storage_bucket: str = Field(default="images")

    # -------------------------------------------------------------------------
    # API server
    # -------------------------------------------------------------------------
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)
    cors_origins: str = Field(default="http://localhost:3000,http://localhost:3001")
    jwt_secret: str = Field(default="change-me-in-production")

    # -------------------------------------------------------------------------
    # Dashboard windows
    # -------------------------------------------------------------------------
    upcoming_events_days: int = Field(default=30, ge=1)
    recent_jobs_days: int = Field(default=7, ge=1)

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")

    # -------------------------------------------------------------------------
    # Derived / computed
    # -------------------------------------------------------------------------
    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def is_configured(self) -> bool:
        """True when the primary Supabase credential is present."""
        key = self.supabase_anon_key.strip()
        return bool(key) and key != PLACEHOLDER_KEY

    @property
    def backend_key(self) -> str:
        """Key used for data access: service role when given, anon otherwise."""
        return self.supabase_service_key or self.supabase_anon_key

    @field_validator("supabase_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/") if isinstance(v, str) else v


# ---------------------------------------------------------------------------
# Module-level default — the app factory accepts an explicit instance instead
# ---------------------------------------------------------------------------
settings = Settings()

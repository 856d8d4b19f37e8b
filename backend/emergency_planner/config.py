"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - The server runs with no environment at all (the maps key is optional)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Text log format by default: stderr is read by humans next to an MCP client
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Server identity reported during MCP initialization
    server_name: str = "emergency-medicare-planner"
    server_version: str = "1.0.0"

    # Location services — accepted but not queried by facility search
    google_maps_api_key: str | None = None

    @field_validator("google_maps_api_key", mode="before")
    @classmethod
    def blank_key_is_none(cls, v: str | None) -> str | None:
        """An exported-but-empty GOOGLE_MAPS_API_KEY counts as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

    @property
    def location_services_configured(self) -> bool:
        return self.google_maps_api_key is not None


@lru_cache
def get_settings() -> Settings:
    return Settings()

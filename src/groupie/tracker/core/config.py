# groupie/tracker/core/config.py
"""
Central configuration for the Groupie Tracker service.

Environment variables (and an optional ``.env`` file) override defaults.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    # Translation catalogs (glob patterns)
    translations_config_paths: list[str] = Field(
        default_factory=lambda: ["config/translations.yaml"]
    )
    default_language: str = "fr"

    # Artist data
    artists_data_path: str = Field(
        default="api/artists.json",
        description="JSON array seeding the local artists store",
    )
    artists_api_url: str = Field(
        default="",
        description="Remote artists API base URL (empty = serve from the local store)",
    )
    artists_api_timeout: float = 10.0

    # Link resolution
    link_timeout: float | None = Field(
        default=10.0,
        description="Seconds before a deferred link falls back to a plain link (None = no limit)",
    )
    link_text_limit: int = 1000

    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])


settings = Settings()

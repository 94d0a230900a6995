"""Configuration management for the application."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_data_dir() -> Path:
    """Directory holding the application's database file."""
    override = os.getenv("PEEKY_DATA_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".local" / "share" / "peeky"


def default_database_url() -> str:
    return f"sqlite:///{default_data_dir() / 'peeky.db'}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default_factory=default_database_url)

    # App info
    app_name: str = Field(default="Peeky")
    app_version: str = Field(default="0.1.0")
    app_description: str = Field(default="macOS menu bar memo overlay app")

    # Shell defaults (read-only, reported to the GUI)
    main_window_label: str = Field(default="main")
    overlay_window_label: str = Field(default="overlay")
    toggle_overlay_shortcut: str = Field(default="Cmd+Shift+O")
    toggle_main_shortcut: str = Field(default="Cmd+Shift+L")

    # Runtime
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production persists to a real file."""
        if self.environment == "production" and ":memory:" in self.database_url:
            raise ValueError("DATABASE_URL must point to a file in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def sqlite_path(self) -> Path | None:
        """Filesystem path of the SQLite database, if file-backed."""
        prefix = "sqlite:///"
        if not self.database_url.startswith(prefix) or ":memory:" in self.database_url:
            return None
        return Path(self.database_url[len(prefix) :])


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

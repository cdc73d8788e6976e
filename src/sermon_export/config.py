"""Configuration management for Sermon Export."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output settings
    output_dir: Path = Field(
        default=Path("."),
        alias="SERMON_EXPORT_OUTPUT_DIR",
    )
    default_format: str = Field(
        default=".docx",
        alias="SERMON_EXPORT_FORMAT",
    )

    # strftime pattern for the "today" fallback; %x follows the process locale
    date_format: str = Field(
        default="%d.%m.%Y",
        alias="SERMON_EXPORT_DATE_FORMAT",
    )

    # Rendering settings
    placeholder_text: str = Field(
        default="Содержание будет добавлено позже...",
        alias="SERMON_EXPORT_PLACEHOLDER",
    )
    font_name: str = Field(
        default="Arial",
        alias="SERMON_EXPORT_FONT",
    )

    log_level: str = Field(
        default="WARNING",
        alias="SERMON_EXPORT_LOG_LEVEL",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings

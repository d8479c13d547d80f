"""
Configuration settings for the meeting launcher.
Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Launcher settings, read from MTG_* environment variables."""
    model_config = SettingsConfigDict(
        env_prefix="MTG_",
        extra="ignore"
    )

    home: Path = Field(
        default=Path("~/mtg"),
        description="Directory holding the meeting file and its template"
    )
    config_file: Optional[Path] = Field(
        default=None,
        description="Meeting file path (defaults to <home>/.env)"
    )
    template_file: Optional[Path] = Field(
        default=None,
        description="Required-keys template path (defaults to <home>/.env.defaults)"
    )
    allow_empty_values: bool = Field(
        default=False,
        description="Accept required keys whose value is empty"
    )

    log_level: str = Field(default="WARNING", description="Logging level")
    log_file: Optional[str] = Field(
        default=None,
        description="Rotating log file path (console only when unset)"
    )

    @property
    def config_path(self) -> Path:
        """Resolved meeting file path."""
        return (self.config_file or self.home / ".env").expanduser()

    @property
    def template_path(self) -> Path:
        """Resolved template path."""
        return (self.template_file or self.home / ".env.defaults").expanduser()

    @property
    def strict(self) -> bool:
        return not self.allow_empty_values

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

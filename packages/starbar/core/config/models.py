"""Configuration models for Starbar."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from starbar.core.rating.models import RatingConfig


class ConfigBase(BaseModel):
    """Base class for Starbar configuration files.

    Provides common functionality for loading from files with defaults.
    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type.

        Returns:
            Path to the default config file
        """
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path or use default path.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        from starbar.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        raw = load_config(path)
        return cls.model_validate(raw)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file, None for stdout")


class AppConfig(ConfigBase):
    """Application-level configuration: logging plus the default widget."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    widget: RatingConfig = Field(default_factory=RatingConfig)

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("starbar.yaml")

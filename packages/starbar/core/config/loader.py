"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from starbar.core.config.models import AppConfig
from starbar.core.rating.models import RatingConfig
from starbar.core.utils.json import read_json
from starbar.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("widget.json")
        'json'
        >>> detect_format("widget.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Format is auto-detected from the file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            return read_json(path)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError subclass
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(content).__name__}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Args:
        path: Path to app config file, defaults to AppConfig.default_path().
              A missing default file yields an all-defaults config.

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If an explicitly given file does not exist
        ValidationError: If config is invalid
    """
    if path is None:
        path = AppConfig.default_path()
        if not path.exists():
            logger.debug("No app config at %s, using defaults", path)
            return AppConfig()

    return AppConfig.model_validate(load_config(path))


def load_rating_config(path: str | Path) -> RatingConfig:
    """Load and validate a widget configuration.

    Accepts the host property names (``numberOfStars``, ``staticColor``...)
    as well as snake_case field names.

    Example:
        >>> config = load_rating_config("widget.yaml")
        >>> config.star_count
        5
    """
    return RatingConfig.model_validate(load_config(path))


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )

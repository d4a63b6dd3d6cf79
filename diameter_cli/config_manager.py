"""Configuration manager for the diameter CLI using TOML files."""

from __future__ import annotations

import logging
from typing import Any, Dict

import toml

from . import config

logger = logging.getLogger(__name__)


def default_config() -> Dict[str, Any]:
    return {"workers": config.DEFAULT_WORKERS, "log_level": config.DEFAULT_LOG_LEVEL}


def load_full_config() -> Dict[str, Any]:
    """Load the entire TOML config (all sections)."""
    path = config.CONFIG_FILE
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            return toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}


def load_config() -> Dict[str, Any]:
    """Load the ``[diameter]`` section merged over the defaults.

    Returns:
        Configuration dictionary with ``workers`` and ``log_level``.
        Falls back to defaults if the file doesn't exist or is unreadable, and
        per key for values that fail :func:`validate_setting`.
    """
    settings = default_config()
    section = load_full_config().get(config.SECTION, {})
    if not isinstance(section, dict):
        logger.warning(
            "Ignoring [%s] in %s: expected a table, got %r", config.SECTION, config.CONFIG_FILE, section
        )
        return settings

    for key, value in section.items():
        try:
            settings[key] = validate_setting(key, str(value))
        except ValueError as exc:
            logger.warning("Ignoring %s = %r in %s: %s", key, value, config.CONFIG_FILE, exc)
    return settings


def validate_setting(key: str, value: str) -> Any:
    """Convert a raw ``KEY VALUE`` pair from the command line.

    Raises:
        ValueError: for unknown keys or values of the wrong shape.
    """
    if key == "workers":
        workers = int(value)
        if workers < 1:
            raise ValueError("workers must be >= 1")
        return workers
    if key == "log_level":
        level = value.upper()
        if level not in config.LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(config.LOG_LEVELS)}")
        return level
    raise ValueError(f"Unknown setting '{key}'. Known: {', '.join(default_config())}")


def save_config(**values: Any) -> None:
    """Write settings into ``[diameter]``, preserving other sections."""
    full = load_full_config()
    section = full.get(config.SECTION)
    if not isinstance(section, dict):
        section = full[config.SECTION] = {}
    section.update(values)
    path = config.CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        toml.dump(full, f)
    logger.debug("Saved %s to %s", sorted(values), path)

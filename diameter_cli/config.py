"""Configuration paths and defaults for the diameter CLI."""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(os.environ.get("DIAMETER_HOME", str(Path.home() / ".diameter"))).expanduser()
CONFIG_FILE = BASE_DIR / "config.toml"

# Section of config.toml owned by this tool
SECTION = "diameter"

DEFAULT_WORKERS = 1
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

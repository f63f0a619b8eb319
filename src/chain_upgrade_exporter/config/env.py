"""Environment variable lookups for configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

CONFIG_PATH_ENV_VAR: Final[str] = "CHAIN_UPGRADE_EXPORTER_CONFIG"
DEFAULT_CONFIG_FILENAME: Final[str] = "config.toml"


def get_config_path() -> Path:
    """Return the configuration file path, honouring the environment override."""

    value = os.getenv(CONFIG_PATH_ENV_VAR)
    if value is None or not value.strip():
        return Path(DEFAULT_CONFIG_FILENAME)
    return Path(value.strip()).expanduser()

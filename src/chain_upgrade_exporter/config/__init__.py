"""Application configuration helpers."""

from __future__ import annotations

from .durations import parse_duration
from .env import CONFIG_PATH_ENV_VAR, get_config_path
from .errors import ConfigurationError, MissingConfigurationError
from .exporter import (
    ChainConfig,
    ExporterConfig,
    PrometheusConfig,
    load_exporter_config,
    parse_exporter_config,
)
from .http_client import HttpClientConfig

__all__ = [
    "CONFIG_PATH_ENV_VAR",
    "ChainConfig",
    "ConfigurationError",
    "ExporterConfig",
    "HttpClientConfig",
    "MissingConfigurationError",
    "PrometheusConfig",
    "get_config_path",
    "load_exporter_config",
    "parse_duration",
    "parse_exporter_config",
]

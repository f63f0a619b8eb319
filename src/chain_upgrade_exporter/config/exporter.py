"""Loading and validation of the exporter's TOML configuration file."""

from __future__ import annotations

import ipaddress
import tomllib
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeVar

import httpx

from .durations import parse_duration
from .errors import ConfigurationError, MissingConfigurationError
from .http_client import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT, HttpClientConfig

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import timedelta
    from pathlib import Path

DEFAULT_REQUEST_TIMEOUT: Final[str] = f"{int(DEFAULT_TIMEOUT_SECONDS)}s"
_MAX_PORT: Final[int] = 65_535


@dataclass(frozen=True, slots=True)
class PrometheusConfig:
    """Bind address of the scrape endpoint."""

    host: str
    port: int


@dataclass(frozen=True, slots=True)
class ChainConfig:
    """Upgrade source settings and the set of watched networks."""

    watch_list: frozenset[str]
    refresh: timedelta
    endpoint: str
    timeout: timedelta

    def http_client_config(self) -> HttpClientConfig:
        return HttpClientConfig(
            timeout_seconds=self.timeout.total_seconds(),
            default_headers={"User-Agent": DEFAULT_USER_AGENT, "Accept": "application/json"},
        )


@dataclass(frozen=True, slots=True)
class ExporterConfig:
    prometheus: PrometheusConfig
    chain: ChainConfig


def load_exporter_config(path: Path) -> ExporterConfig:
    """Read ``path`` as TOML and return the validated configuration."""

    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except FileNotFoundError as exc:
        raise MissingConfigurationError(f"Config file not found: {path}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Failed to read config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Failed to parse config file {path}: {exc}") from exc

    return parse_exporter_config(document)


def parse_exporter_config(document: Mapping[str, object]) -> ExporterConfig:
    prometheus = _require_table(document, "prometheus")
    chain = _require_table(document, "chain")
    return ExporterConfig(
        prometheus=PrometheusConfig(
            host=_parse_host(_require(prometheus, "prometheus", "host", str)),
            port=_parse_port(_require(prometheus, "prometheus", "port", int)),
        ),
        chain=ChainConfig(
            watch_list=_parse_watch_list(_require(chain, "chain", "watch_list", list)),
            refresh=_parse_positive_duration(
                "chain.refresh", _require(chain, "chain", "refresh", str)
            ),
            endpoint=_parse_endpoint(_require(chain, "chain", "endpoint", str)),
            timeout=_parse_positive_duration(
                "chain.timeout", _optional(chain, "chain", "timeout", str, DEFAULT_REQUEST_TIMEOUT)
            ),
        ),
    )


def _require_table(document: Mapping[str, object], name: str) -> Mapping[str, object]:
    table = document.get(name)
    if table is None:
        raise MissingConfigurationError(f"Missing configuration table: [{name}]")
    if not isinstance(table, dict):
        raise ConfigurationError(f"Configuration entry {name!r} must be a table")
    return table


T = TypeVar("T")


def _require(table: Mapping[str, object], section: str, key: str, kind: type[T]) -> T:
    if key not in table:
        raise MissingConfigurationError(f"Missing configuration for: {section}.{key}")
    return _check_type(table[key], section, key, kind)


def _optional(
    table: Mapping[str, object], section: str, key: str, kind: type[T], default: T
) -> T:
    if key not in table:
        return default
    return _check_type(table[key], section, key, kind)


def _check_type(value: object, section: str, key: str, kind: type[T]) -> T:
    # bool is an int subclass; a port of ``true`` is still a mistake.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigurationError(
            f"Configuration value {section}.{key} must be of type {kind.__name__}"
        )
    return value


def _parse_host(value: str) -> str:
    try:
        return str(ipaddress.ip_address(value.strip()))
    except ValueError as exc:
        raise ConfigurationError(f"Invalid prometheus.host address: {value!r}") from exc


def _parse_port(value: int) -> int:
    if not 0 <= value <= _MAX_PORT:
        raise ConfigurationError(f"prometheus.port must be between 0 and {_MAX_PORT}")
    return value


def _parse_watch_list(values: list[object]) -> frozenset[str]:
    networks: set[str] = set()
    for value in values:
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError("chain.watch_list entries must be non-empty strings")
        networks.add(value)
    if not networks:
        raise ConfigurationError("chain.watch_list must name at least one network")
    return frozenset(networks)


def _parse_positive_duration(name: str, value: str) -> timedelta:
    duration = parse_duration(value)
    if duration.total_seconds() <= 0:
        raise ConfigurationError(f"{name} must be a positive duration, got {value!r}")
    return duration


def _parse_endpoint(value: str) -> str:
    try:
        url = httpx.URL(value.strip())
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid chain.endpoint URL: {value!r}") from exc
    if url.scheme not in {"http", "https"} or not url.host:
        raise ConfigurationError(f"chain.endpoint must be an http(s) URL, got {value!r}")
    return str(url)

"""Configuration types for the HTTP client used by source adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "chain-upgrade-exporter"


@dataclass(slots=True, frozen=True)
class HttpClientConfig:
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    default_headers: Mapping[str, str] | None = None

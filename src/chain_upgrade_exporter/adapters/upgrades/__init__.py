"""Public interface for the upgrade source adapter."""

from __future__ import annotations

from .client import HttpUpgradeEventFetcher, build_http_upgrade_fetcher
from .schema import UpgradeListAdapter, UpgradePayload
from .translator import UpgradePayloadInput, parse_upgrade_event

__all__ = [
    "HttpUpgradeEventFetcher",
    "UpgradeListAdapter",
    "UpgradePayload",
    "UpgradePayloadInput",
    "build_http_upgrade_fetcher",
    "parse_upgrade_event",
]

"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import UpgradeEventFetcher, UpgradeSourceError
from .metrics import GaugeRegistry

__all__ = ["GaugeRegistry", "UpgradeEventFetcher", "UpgradeSourceError"]

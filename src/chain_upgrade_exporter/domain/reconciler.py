"""Keep the set of active upgrades and the exported gauges in lockstep.

The reconciler owns the authoritative set of active upgrade events. Every pass
admits watched, future-dated events from a fresh snapshot and expires members
whose upgrade time has passed, mirroring each change onto the gauge registry.
The registry is always written before the set so an interrupted pass never
leaves a member without its series.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from .model import InvalidUpgradeTimeError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from .model import ExportKey, UpgradeEvent
    from .ports.metrics import GaugeRegistry

log = getLogger(__name__)

ACTIVE_GAUGE_VALUE: Final[int] = 1


@dataclass(slots=True, frozen=True)
class ReconcileResult:
    """Outcome of a single reconciliation pass."""

    added: int
    removed: int
    skipped: int
    active: int


class Reconciler:
    def __init__(self, *, watch_list: Iterable[str], registry: GaugeRegistry) -> None:
        self._watch_list = frozenset(watch_list)
        self._registry = registry
        self._active: dict[UpgradeEvent, datetime] = {}
        self._lock = threading.Lock()

    @property
    def watch_list(self) -> frozenset[str]:
        return self._watch_list

    def active_events(self) -> frozenset[UpgradeEvent]:
        """Return a snapshot of the currently active upgrade events."""

        with self._lock:
            return frozenset(self._active)

    def reconcile(self, fetched: Iterable[UpgradeEvent], *, now: datetime) -> ReconcileResult:
        """Merge ``fetched`` into the active set and expire members due at ``now``.

        Calling this again with the same snapshot and the same ``now`` leaves the
        registry untouched.
        """

        if now.tzinfo is None or now.utcoffset() is None:
            raise ValueError("Reconciliation time must include timezone information")

        with self._lock:
            added, skipped = self._admit(fetched, now)
            removed = self._expire(now)
            active = len(self._active)

        return ReconcileResult(added=added, removed=removed, skipped=skipped, active=active)

    def _admit(self, fetched: Iterable[UpgradeEvent], now: datetime) -> tuple[int, int]:
        added = 0
        skipped = 0
        for event in fetched:
            if event.network not in self._watch_list or event in self._active:
                continue
            try:
                upgrade_time = event.upgrade_time()
            except InvalidUpgradeTimeError as exc:
                log.warning(
                    "Skipping upgrade %s %s at block %s: %s",
                    event.network,
                    event.node_version,
                    event.block,
                    exc,
                )
                skipped += 1
                continue
            if upgrade_time <= now:
                continue
            self._registry.set_gauge(event.export_key(), ACTIVE_GAUGE_VALUE)
            self._active[event] = upgrade_time
            added += 1
        return added, skipped

    def _expire(self, now: datetime) -> int:
        expired = [event for event, upgrade_time in self._active.items() if upgrade_time <= now]
        if not expired:
            return 0

        # A series stays while any surviving member still maps onto its key.
        surviving_keys = {
            event.export_key()
            for event, upgrade_time in self._active.items()
            if upgrade_time > now
        }
        removed_keys: set[ExportKey] = set()
        for event in expired:
            key = event.export_key()
            if key not in surviving_keys and key not in removed_keys:
                self._registry.remove_series(key)
                removed_keys.add(key)
            del self._active[event]
            log.debug("Expired upgrade %s %s at block %s", key.network, key.node_version, key.block)
        return len(expired)


__all__ = ["ACTIVE_GAUGE_VALUE", "ReconcileResult", "Reconciler"]

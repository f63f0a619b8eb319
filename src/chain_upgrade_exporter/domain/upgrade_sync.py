"""Application service running one fetch-then-reconcile tick."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .ports.fetching import UpgradeEventFetcher
    from .reconciler import ReconcileResult, Reconciler

log = getLogger(__name__)


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def _utcnow() -> datetime:
    return datetime.now(UTC)


async def refresh_upgrades(
    *,
    fetcher: UpgradeEventFetcher,
    reconciler: Reconciler,
    clock: Clock = _utcnow,
) -> ReconcileResult:
    """Fetch the current upgrade snapshot and reconcile it against the registry.

    Fetch failures propagate unchanged; nothing is reconciled for that tick.
    """

    events = await fetcher()
    result = reconciler.reconcile(events, now=clock())
    log.info(
        "Upgrade metrics updated: fetched=%s, added=%s, removed=%s, skipped=%s, active=%s",
        len(events),
        result.added,
        result.removed,
        result.skipped,
        result.active,
    )
    return result


__all__ = ["Clock", "refresh_upgrades"]

"""Ports for fetching upgrade announcements from an external source."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Awaitable, Sequence

    from chain_upgrade_exporter.domain.model import UpgradeEvent


class UpgradeSourceError(RuntimeError):
    """Raised when a snapshot of upgrade events could not be obtained.

    Covers transport failures, non-2xx responses, timeouts and payloads that do
    not have the expected shape. A failed fetch consumes the tick.
    """


@runtime_checkable
class UpgradeEventFetcher(Protocol):
    """Callable port returning the current snapshot of announced upgrades."""

    def __call__(self) -> Awaitable[Sequence[UpgradeEvent]]: ...


__all__ = ["UpgradeEventFetcher", "UpgradeSourceError"]

"""Port for the labelled gauge store the reconciler projects onto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chain_upgrade_exporter.domain.model import ExportKey


@runtime_checkable
class GaugeRegistry(Protocol):
    """Write-only view of a labelled gauge.

    Implementations own their synchronisation; removing a series that does
    not exist must be a no-op.
    """

    def set_gauge(self, key: ExportKey, value: int) -> None: ...

    def remove_series(self, key: ExportKey) -> None: ...


__all__ = ["GaugeRegistry"]

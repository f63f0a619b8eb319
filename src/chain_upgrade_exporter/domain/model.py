"""Domain model for announced network upgrades."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


class InvalidUpgradeTimeError(ValueError):
    """Raised when an upgrade's timestamp is not a timezone-aware RFC 3339 instant."""


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 timestamp, rejecting values without an offset."""

    normalized = value.strip()
    if normalized[-1:] in {"Z", "z"}:
        normalized = normalized[:-1] + "+00:00"
    normalized = normalized.replace("t", "T", 1)
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise InvalidUpgradeTimeError(f"Invalid RFC 3339 timestamp: {value!r}") from exc
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise InvalidUpgradeTimeError(f"Timestamp lacks a UTC offset: {value!r}")
    return parsed


@dataclass(frozen=True, slots=True)
class ExportKey:
    """Label set identifying one ``chain_upgrade`` series."""

    network: str
    node_version: str
    block: str

    def labels(self) -> dict[str, str]:
        return {"network": self.network, "node_version": self.node_version, "block": self.block}


@dataclass(frozen=True, slots=True)
class UpgradeEvent:
    """One announced upgrade for a network.

    Equality covers all four attributes as received from the source. The
    export key is narrower and leaves out ``estimated_upgrade_time``.
    """

    network: str
    node_version: str
    estimated_upgrade_time: str
    block: int

    def export_key(self) -> ExportKey:
        return ExportKey(
            network=self.network,
            node_version=self.node_version,
            block=str(self.block),
        )

    def upgrade_time(self) -> datetime:
        return parse_rfc3339(self.estimated_upgrade_time)


__all__ = ["ExportKey", "InvalidUpgradeTimeError", "UpgradeEvent", "parse_rfc3339"]

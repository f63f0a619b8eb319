"""Translate upgrade source payloads into domain events."""

from __future__ import annotations

from collections.abc import Mapping

from chain_upgrade_exporter.domain.model import UpgradeEvent

from .schema import UpgradePayload

UpgradePayloadInput = UpgradePayload | Mapping[str, object]


def parse_upgrade_event(payload: UpgradePayloadInput) -> UpgradeEvent:
    model = (
        payload if isinstance(payload, UpgradePayload) else UpgradePayload.model_validate(payload)
    )
    return UpgradeEvent(
        network=model.network,
        node_version=model.node_version,
        estimated_upgrade_time=model.estimated_upgrade_time,
        block=model.block,
    )

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from chain_upgrade_exporter.domain.model import (
    ExportKey,
    InvalidUpgradeTimeError,
    UpgradeEvent,
    parse_rfc3339,
)


def test_parse_rfc3339_accepts_zulu_suffix() -> None:
    assert parse_rfc3339("2026-11-01T12:00:00Z") == datetime(2026, 11, 1, 12, tzinfo=UTC)


def test_parse_rfc3339_keeps_offsets_and_fractions() -> None:
    parsed = parse_rfc3339("2026-11-01T12:00:00.250+02:00")

    assert parsed.utcoffset() == timedelta(hours=2)
    assert parsed == datetime(2026, 11, 1, 10, 0, 0, 250000, tzinfo=UTC)
    assert parsed.tzinfo == timezone(timedelta(hours=2))


@pytest.mark.parametrize("value", ["", "soon", "2026-11-01T12:00:00", "2026-13-01T00:00:00Z"])
def test_parse_rfc3339_rejects_invalid_values(value: str) -> None:
    with pytest.raises(InvalidUpgradeTimeError):
        parse_rfc3339(value)


def test_identity_covers_all_attributes() -> None:
    base = UpgradeEvent("testnet", "v1.1", "2026-11-01T12:00:00Z", 12345)

    assert base == UpgradeEvent("testnet", "v1.1", "2026-11-01T12:00:00Z", 12345)
    assert base != UpgradeEvent("testnet", "v1.1", "2026-11-02T12:00:00Z", 12345)
    assert len({base, UpgradeEvent("testnet", "v1.1", "2026-11-01T12:00:00Z", 12345)}) == 1


def test_export_key_omits_upgrade_time() -> None:
    first = UpgradeEvent("testnet", "v1.1", "2026-11-01T12:00:00Z", 12345)
    second = UpgradeEvent("testnet", "v1.1", "2026-11-02T12:00:00Z", 12345)

    assert first.export_key() == second.export_key()
    assert first.export_key() == ExportKey("testnet", "v1.1", "12345")
    assert first.export_key().labels() == {
        "network": "testnet",
        "node_version": "v1.1",
        "block": "12345",
    }

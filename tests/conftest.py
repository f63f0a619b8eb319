from __future__ import annotations

from datetime import UTC, datetime

import pytest
from prometheus_client import CollectorRegistry

from tests.support.metrics import RecordingGaugeRegistry


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 18, 12, 0, tzinfo=UTC)


@pytest.fixture
def gauges() -> RecordingGaugeRegistry:
    return RecordingGaugeRegistry()


@pytest.fixture
def collector_registry() -> CollectorRegistry:
    return CollectorRegistry()

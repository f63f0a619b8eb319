"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from prometheus_client import REGISTRY, CollectorRegistry

from chain_upgrade_exporter.adapters.prometheus import PrometheusGaugeRegistry, start_scrape_server
from chain_upgrade_exporter.adapters.upgrades import build_http_upgrade_fetcher
from chain_upgrade_exporter.domain.reconciler import Reconciler
from chain_upgrade_exporter.domain.upgrade_sync import refresh_upgrades
from chain_upgrade_exporter.scheduler import Scheduler

if TYPE_CHECKING:
    from chain_upgrade_exporter.config import ExporterConfig
    from chain_upgrade_exporter.domain.ports.fetching import UpgradeEventFetcher
    from chain_upgrade_exporter.domain.upgrade_sync import Clock


log = getLogger(__name__)


def run_exporter(
    config: ExporterConfig,
    *,
    registry: CollectorRegistry = REGISTRY,
    source: UpgradeEventFetcher | None = None,
    clock: Clock | None = None,
    serve: bool = True,
    max_ticks: int | None = None,
) -> Reconciler:
    """Serve the scrape endpoint and keep ``chain_upgrade`` gauges up to date.

    Runs until interrupted unless ``max_ticks`` bounds the refresh loop.
    """

    return asyncio.run(
        _run_exporter_async(
            config,
            registry=registry,
            source=source,
            clock=clock,
            serve=serve,
            max_ticks=max_ticks,
        )
    )


async def _run_exporter_async(
    config: ExporterConfig,
    *,
    registry: CollectorRegistry,
    source: UpgradeEventFetcher | None,
    clock: Clock | None,
    serve: bool,
    max_ticks: int | None,
) -> Reconciler:
    log.info("Watching the following chains: %s", ", ".join(sorted(config.chain.watch_list)))

    reconciler = Reconciler(
        watch_list=config.chain.watch_list,
        registry=PrometheusGaugeRegistry(registry=registry),
    )
    effective_source = source or build_http_upgrade_fetcher(config.chain)
    tick = partial(refresh_upgrades, fetcher=effective_source, reconciler=reconciler)
    if clock is not None:
        tick = partial(tick, clock=clock)

    server = (
        start_scrape_server(
            host=config.prometheus.host,
            port=config.prometheus.port,
            registry=registry,
        )[0]
        if serve
        else None
    )
    try:
        await Scheduler(tick=tick, interval=config.chain.refresh).run(max_ticks=max_ticks)
    finally:
        if server is not None:
            server.shutdown()
            server.server_close()
    return reconciler

"""Prometheus projection of the active upgrade set."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from prometheus_client import REGISTRY, CollectorRegistry, Gauge, start_http_server

from chain_upgrade_exporter.domain.ports.metrics import GaugeRegistry

if TYPE_CHECKING:
    from threading import Thread
    from wsgiref.simple_server import WSGIServer

    from chain_upgrade_exporter.domain.model import ExportKey

log = getLogger(__name__)

METRIC_NAME: Final[str] = "chain_upgrade"
METRIC_DOCUMENTATION: Final[str] = "Chain upgrade information"
LABEL_NAMES: Final[tuple[str, ...]] = ("network", "node_version", "block")


class PrometheusGaugeRegistry:
    """``GaugeRegistry`` backed by a labelled ``prometheus_client`` gauge."""

    def __init__(
        self,
        *,
        registry: CollectorRegistry = REGISTRY,
        name: str = METRIC_NAME,
        documentation: str = METRIC_DOCUMENTATION,
    ) -> None:
        self.registry = registry
        self._gauge = Gauge(name, documentation, LABEL_NAMES, registry=registry)

    def set_gauge(self, key: ExportKey, value: int) -> None:
        self._gauge.labels(**key.labels()).set(value)

    def remove_series(self, key: ExportKey) -> None:
        try:
            self._gauge.remove(key.network, key.node_version, key.block)
        except KeyError:
            log.debug("No series to remove for %s", key)


def start_scrape_server(
    *,
    host: str,
    port: int,
    registry: CollectorRegistry = REGISTRY,
) -> tuple[WSGIServer, Thread]:
    """Serve ``registry`` in the text exposition format from a daemon thread."""

    server, thread = start_http_server(port, addr=host, registry=registry)
    log.info("Serving metrics on http://%s:%s/metrics", host, port)
    return server, thread


if TYPE_CHECKING:
    _registry_check: GaugeRegistry = PrometheusGaugeRegistry()

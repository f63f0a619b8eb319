"""HTTP client for the upgrade announcement source."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from chain_upgrade_exporter.adapters.http_client import HttpClient
from chain_upgrade_exporter.config.http_client import HttpClientConfig
from chain_upgrade_exporter.domain.ports.fetching import UpgradeEventFetcher, UpgradeSourceError

from .schema import UpgradeListAdapter, UpgradePayload
from .translator import parse_upgrade_event

if TYPE_CHECKING:
    from collections.abc import Callable

    from chain_upgrade_exporter.config.exporter import ChainConfig
    from chain_upgrade_exporter.domain.model import UpgradeEvent

log = getLogger(__name__)


def _default_http_config() -> HttpClientConfig:
    return HttpClientConfig()


def _default_client_factory(config: HttpClientConfig) -> HttpClient:
    return HttpClient(config)


@dataclass(slots=True)
class HttpUpgradeEventFetcher:
    """Fetch the full list of announced upgrades with a single GET request."""

    endpoint: str
    http: HttpClientConfig = field(default_factory=_default_http_config)
    client_factory: Callable[[HttpClientConfig], HttpClient] = field(
        default=_default_client_factory
    )

    async def __call__(self) -> list[UpgradeEvent]:
        async with self.client_factory(self.http) as client:
            payloads = await self._perform_request(client=client)
        log.debug("Fetched %s upgrade announcements from %s", len(payloads), self.endpoint)
        return [parse_upgrade_event(payload) for payload in payloads]

    async def _perform_request(self, *, client: HttpClient) -> list[UpgradePayload]:
        try:
            response = await client.get(self.endpoint)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise UpgradeSourceError(f"Request to {self.endpoint} failed: {exc}") from exc

        try:
            return UpgradeListAdapter.validate_json(response.content)
        except ValidationError as exc:
            raise UpgradeSourceError(
                f"Unexpected upgrade payload from {self.endpoint}: {exc.error_count()} error(s)"
            ) from exc


def build_http_upgrade_fetcher(chain: ChainConfig) -> HttpUpgradeEventFetcher:
    return HttpUpgradeEventFetcher(endpoint=chain.endpoint, http=chain.http_client_config())


if TYPE_CHECKING:
    _fetcher_check: UpgradeEventFetcher = HttpUpgradeEventFetcher(endpoint="http://localhost/")

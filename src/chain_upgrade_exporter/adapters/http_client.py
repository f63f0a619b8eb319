"""Thin async HTTP client shared by the source adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

import httpx

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import HeaderTypes, TimeoutTypes, URLTypes

    from chain_upgrade_exporter.config.http_client import HttpClientConfig


class AsyncClientOptions(TypedDict, total=False):
    timeout: TimeoutTypes
    headers: HeaderTypes
    follow_redirects: bool
    transport: httpx.AsyncBaseTransport


class HttpClient:
    def __init__(
        self,
        config: HttpClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config

        client_kwargs: AsyncClientOptions = {
            "timeout": config.timeout_seconds,
            "follow_redirects": True,
        }
        if config.default_headers is not None:
            client_kwargs["headers"] = dict(config.default_headers)
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: URLTypes) -> httpx.Response:
        return await self._client.get(url)

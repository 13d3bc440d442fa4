"""Async httpx client with retry transport and an optional shared rate limiter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import httpx
from httpx_retries import RetryTransport

from dashsync.config.http_resilience import NO_RETRY, RateLimit, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from types import TracebackType

    from aiolimiter import AsyncLimiter

__all__ = [
    "NO_RETRY",
    "ClientFactory",
    "RateLimit",
    "ResilienceConfig",
    "ResilientClient",
    "RetryPolicy",
]


class ResilientClient:
    """One ``httpx.AsyncClient`` whose requests pass through ``limiter`` when given.

    Callers that open several clients over time pass the same limiter to each of
    them so the rate limit holds across clients, not only within one.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        limiter: AsyncLimiter | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        if limiter is None and config.ratelimit is not None:
            limiter = config.ratelimit.build()
        self._limiter = limiter
        self._client = httpx.AsyncClient(
            base_url=config.base_url or "",
            timeout=config.timeout_seconds,
            headers=dict(config.default_headers),
            transport=RetryTransport(transport=transport, retry=config.retry.build()),
        )

    async def __aenter__(self) -> ResilientClient:
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

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        json: object = None,
    ) -> httpx.Response:
        if self._limiter is None:
            return await self._client.request(method, url, params=params, json=json)
        async with self._limiter:
            return await self._client.request(method, url, params=params, json=json)


class ClientFactory(Protocol):
    def __call__(
        self,
        config: ResilienceConfig,
        *,
        limiter: AsyncLimiter | None = None,
    ) -> ResilientClient: ...

from __future__ import annotations

import asyncio
import time

import httpx
from aiolimiter import AsyncLimiter

from dashsync.adapters.http_resilience import (
    NO_RETRY,
    RateLimit,
    ResilienceConfig,
    ResilientClient,
    RetryPolicy,
)


def _run(
    config: ResilienceConfig, method: str, path: str
) -> tuple[httpx.Response, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(503 if len(seen) == 1 else 200)

    async def go() -> httpx.Response:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return await client.request(method, path)

    return asyncio.run(go()), seen


def test_no_retry_policy_surfaces_first_failure() -> None:
    config = ResilienceConfig(name="test", base_url="http://svc.test", retry=NO_RETRY)

    response, seen = _run(config, "DELETE", "/items/1")

    assert response.status_code == 503
    assert len(seen) == 1
    assert seen[0].url == httpx.URL("http://svc.test/items/1")


def test_retry_policy_retries_forced_status() -> None:
    config = ResilienceConfig(
        name="test",
        base_url="http://svc.test",
        retry=RetryPolicy(total=2, backoff_factor=0.0, backoff_jitter=0.0),
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        default_headers={"X-Client": "dashsync"},
    )

    response, seen = _run(config, "PUT", "/items/1")

    assert response.status_code == 200
    assert len(seen) == 2
    assert all(request.headers["X-Client"] == "dashsync" for request in seen)


def test_clients_sharing_a_limiter_are_throttled_together() -> None:
    config = ResilienceConfig(name="test", base_url="http://svc.test")
    limiter = AsyncLimiter(1, 1.0)

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200)

    async def go() -> None:
        async with ResilientClient(
            config, limiter=limiter, transport=httpx.MockTransport(handler)
        ) as client:
            await client.request("GET", "/items")

    started = time.monotonic()
    asyncio.run(go())
    asyncio.run(go())

    assert time.monotonic() - started >= 0.9

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from dashsync.adapters.http_resilience import ResilientClient
from dashsync.config import DashboardConfig, build_dashboard_resilience

if TYPE_CHECKING:
    from collections.abc import Callable

    from aiolimiter import AsyncLimiter

    from dashsync.adapters.http_resilience import ClientFactory
    from dashsync.config import ResilienceConfig

DASHBOARD_URL = "http://dashboard.test:3000"
DASHBOARD_SECRET = "s3cr3t"


@pytest.fixture
def dashboard_config() -> DashboardConfig:
    return DashboardConfig(
        url=DASHBOARD_URL,
        secret=DASHBOARD_SECRET,
        resilience=build_dashboard_resilience(DASHBOARD_URL),
    )


@pytest.fixture
def make_client_factory() -> Callable[
    [Callable[[httpx.Request], httpx.Response]],
    ClientFactory,
]:
    def build(handler: Callable[[httpx.Request], httpx.Response]) -> ClientFactory:
        def factory(
            resilience: ResilienceConfig, *, limiter: AsyncLimiter | None = None
        ) -> ResilientClient:
            return ResilientClient(
                resilience, limiter=limiter, transport=httpx.MockTransport(handler)
            )

        return factory

    return build

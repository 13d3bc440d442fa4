"""HTTP transport settings shared by the dashboard client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from aiolimiter import AsyncLimiter
from httpx_retries import Retry

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Retries applied by the transport; ``total=0`` surfaces every failure at once."""

    total: int = 0
    backoff_factor: float = 0.5
    backoff_jitter: float = 1.0
    status_forcelist: frozenset[int] = field(
        default_factory=lambda: frozenset({429, 502, 503, 504})
    )

    def build(self) -> Retry:
        return Retry(
            total=self.total,
            backoff_factor=self.backoff_factor,
            backoff_jitter=self.backoff_jitter,
            status_forcelist=tuple(self.status_forcelist),
        )


NO_RETRY = RetryPolicy()


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float

    def build(self) -> AsyncLimiter:
        return AsyncLimiter(self.max_calls, self.per_seconds)


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    retry: RetryPolicy = NO_RETRY
    ratelimit: RateLimit | None = None
    default_headers: Mapping[str, str] = field(default_factory=dict[str, str], repr=False)

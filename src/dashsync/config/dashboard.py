"""Dashboard connection settings."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .env import optional_float_env, optional_int_env, require_env_vars
from .http_resilience import NO_RETRY, RateLimit, ResilienceConfig

DASHBOARD_TIMEOUT_SECONDS = 30.0
AUTH_HEADER = "Authorization"


@dataclass(frozen=True, slots=True)
class DashboardConfig:
    """Where the dashboard lives and the shared secret used to talk to it."""

    url: str
    secret: str = field(repr=False)
    resilience: ResilienceConfig

    def authenticated_resilience(self) -> ResilienceConfig:
        """Transport settings with the shared secret added to every request."""

        headers = {**self.resilience.default_headers, AUTH_HEADER: self.secret}
        return replace(self.resilience, default_headers=headers)


def build_dashboard_resilience(
    url: str,
    *,
    timeout_seconds: float = DASHBOARD_TIMEOUT_SECONDS,
    max_calls_per_second: int | None = None,
) -> ResilienceConfig:
    ratelimit = (
        RateLimit(max_calls=max_calls_per_second, per_seconds=1.0)
        if max_calls_per_second
        else None
    )
    return ResilienceConfig(
        name="dashboard",
        base_url=url,
        timeout_seconds=timeout_seconds,
        retry=NO_RETRY,
        ratelimit=ratelimit,
    )


def get_dashboard_config(*, resilience: ResilienceConfig | None = None) -> DashboardConfig:
    values = require_env_vars(("TYK_DASHBOARD_URL", "TYK_DASHBOARD_SECRET"))
    url = values["TYK_DASHBOARD_URL"]
    if resilience is None:
        resilience = build_dashboard_resilience(
            url,
            timeout_seconds=optional_float_env("TYK_DASHBOARD_TIMEOUT")
            or DASHBOARD_TIMEOUT_SECONDS,
            max_calls_per_second=optional_int_env("TYK_DASHBOARD_MAX_CALLS_PER_SECOND"),
        )
    return DashboardConfig(
        url=url,
        secret=values["TYK_DASHBOARD_SECRET"],
        resilience=resilience,
    )

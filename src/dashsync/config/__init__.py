"""Application configuration helpers."""

from __future__ import annotations

from .dashboard import (
    AUTH_HEADER,
    DASHBOARD_TIMEOUT_SECONDS,
    DashboardConfig,
    build_dashboard_resilience,
    get_dashboard_config,
)
from .env import require_env_vars
from .errors import ConfigurationError, InvalidConfigurationError, MissingConfigurationError
from .http_resilience import NO_RETRY, RateLimit, ResilienceConfig, RetryPolicy

__all__ = [
    "AUTH_HEADER",
    "DASHBOARD_TIMEOUT_SECONDS",
    "NO_RETRY",
    "ConfigurationError",
    "DashboardConfig",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "build_dashboard_resilience",
    "get_dashboard_config",
    "require_env_vars",
]

"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import InvalidConfigurationError, MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank."""

    values = {name: (os.getenv(name) or "").strip() for name in names}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise MissingConfigurationError(missing)
    return values


def _optional_positive[T: (int, float)](
    name: str, parse: Callable[[str], T], expected: str
) -> T | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = parse(raw.strip())
    except ValueError as exc:
        raise InvalidConfigurationError(name, raw, expected) from exc
    if value <= 0:
        raise InvalidConfigurationError(name, raw, expected)
    return value


def optional_float_env(name: str) -> float | None:
    return _optional_positive(name, float, "a positive number")


def optional_int_env(name: str) -> int | None:
    return _optional_positive(name, int, "a positive integer")

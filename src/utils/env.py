"""Environment helpers for runtime configuration."""

import os
from functools import lru_cache

_TRUTHY = {"dev", "development", "1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Return the boolean value of environment variable ``name``."""
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


@lru_cache
def is_dev_mode() -> bool:
    """Return True when the app runs in development mode."""
    value = os.environ.get("NESTGRID_ENV") or os.environ.get("NESTGRID_DEV_MODE")
    if not value:
        return False
    return value.strip().lower() in _TRUTHY


__all__ = ["env_flag", "is_dev_mode"]

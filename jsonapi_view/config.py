"""Environment backed settings."""

import os
from functools import lru_cache

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


@lru_cache(maxsize=None)
def _load_env() -> None:
    # Loaded on first settings read, never on import.
    load_dotenv()


def _read_bool(name: str, default: bool = False) -> bool:
    _load_env()
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def is_debug() -> bool:
    """Return the application debug switch (``JSONAPI_VIEW_DEBUG``)."""
    return _read_bool("JSONAPI_VIEW_DEBUG")


def default_url_prefix() -> str | None:
    """Return the url prefix used when a view does not configure one."""
    _load_env()
    return os.getenv("JSONAPI_VIEW_URL_PREFIX") or None

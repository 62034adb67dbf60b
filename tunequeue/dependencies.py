"""FastAPI dependency providers."""

from __future__ import annotations

from functools import lru_cache
from threading import Lock

from tunequeue.config import AppConfig, load_config
from tunequeue.logging import get_logger
from tunequeue.playback.lookups import MediaLookups
from tunequeue.playback.resolver import MediaResolver
from tunequeue.stores.memory import MemoryMediaStore

_lookups_override: MediaLookups | None = None
_default_lookups: MediaLookups | None = None
_lookups_lock = Lock()

logger = get_logger(__name__)


@lru_cache()
def get_app_config() -> AppConfig:
    return load_config()


def set_media_lookups_override(lookups: MediaLookups | None) -> None:
    """Install ``lookups`` for every request until cleared with ``None``."""

    global _lookups_override
    _lookups_override = lookups


def get_media_lookups() -> MediaLookups:
    global _default_lookups
    if _lookups_override is not None:
        return _lookups_override
    with _lookups_lock:
        if _default_lookups is None:
            config = get_app_config()
            logger.info("No media lookups configured, using an empty in-memory store")
            _default_lookups = MemoryMediaStore(page_size=config.search.page_size).as_lookups()
        return _default_lookups


def get_media_resolver() -> MediaResolver:
    return MediaResolver(get_media_lookups())


def reset_dependencies_for_tests() -> None:
    global _default_lookups, _lookups_override
    _default_lookups = None
    _lookups_override = None
    get_app_config.cache_clear()


__all__ = [
    "get_app_config",
    "get_media_lookups",
    "get_media_resolver",
    "reset_dependencies_for_tests",
    "set_media_lookups_override",
]

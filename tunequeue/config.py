"""Application configuration utilities for tunequeue."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any

from tunequeue.logging import get_logger
from tunequeue.search.params import BackendType

logger = get_logger(__name__)

DEFAULT_SEARCH_PAGE_SIZE = 50
MAX_SEARCH_PAGE_SIZE = 500
DEFAULT_API_BASE_PATH = "/api/v1"

_RUNTIME_ENV_CACHE: dict[str, str] | None = None


def _load_env_file(path: Path) -> dict[str, str]:
    try:
        contents = path.read_text(encoding="utf-8")
    except OSError:
        return {}
    env_values: dict[str, str] = {}
    for line in contents.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        key, sep, value = stripped.partition("=")
        if not sep:
            continue
        env_values[key.strip()] = value.strip().strip('"').strip("'")
    return env_values


def load_runtime_env(
    *,
    env_file: str | os.PathLike[str] | None = None,
    base_env: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Load runtime environment values applying .env before explicit environment."""

    env: dict[str, str] = {}
    source = dict(base_env if base_env is not None else os.environ)

    path = Path(env_file) if env_file is not None else Path(".env")
    if path.exists() and path.is_file():
        env.update(_load_env_file(path))

    env.update({key: str(value) for key, value in source.items() if value is not None})
    return env


def get_runtime_env() -> Mapping[str, str]:
    """Return the cached runtime environment mapping."""

    global _RUNTIME_ENV_CACHE
    if _RUNTIME_ENV_CACHE is None:
        _RUNTIME_ENV_CACHE = load_runtime_env()
    return _RUNTIME_ENV_CACHE


def override_runtime_env(runtime_env: Mapping[str, str] | None) -> None:
    """Override the cached runtime environment (primarily for testing)."""

    global _RUNTIME_ENV_CACHE
    if runtime_env is None:
        _RUNTIME_ENV_CACHE = None
    else:
        _RUNTIME_ENV_CACHE = dict(runtime_env)


def get_env(name: str, default: str | None = None) -> str | None:
    """Return an environment variable honoring ENV > .env > defaults."""

    env = get_runtime_env()
    return env.get(name, default)


@dataclass(slots=True, frozen=True)
class LoggingConfig:
    level: str


@dataclass(slots=True, frozen=True)
class SearchConfig:
    default_backends: frozenset[BackendType]
    page_size: int


@dataclass(slots=True, frozen=True)
class ApiConfig:
    base_path: str


@dataclass(slots=True, frozen=True)
class AppConfig:
    logging: LoggingConfig
    search: SearchConfig
    api: ApiConfig


def _coerce_int(value: Any, *, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _bounded_int(
    value: Any,
    *,
    default: int,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    resolved = _coerce_int(value, default=default)
    if minimum is not None:
        resolved = max(minimum, resolved)
    if maximum is not None:
        resolved = min(maximum, resolved)
    return resolved


def _parse_list(value: str | None) -> list[str]:
    if value is None:
        return []
    candidates = value.replace("\n", ",").split(",")
    return [item.strip() for item in candidates if item.strip()]


def _parse_backends(value: str | None) -> frozenset[BackendType]:
    names = _parse_list(value)
    if not names:
        return frozenset(BackendType)
    backends: set[BackendType] = set()
    for name in names:
        try:
            backends.add(BackendType(name.lower()))
        except ValueError:
            logger.warning("Ignoring unknown search backend %r", name)
    return frozenset(backends) or frozenset(BackendType)


def _normalise_base_path(value: str | None) -> str:
    if value is None:
        return DEFAULT_API_BASE_PATH
    stripped = value.strip().rstrip("/")
    if not stripped:
        return ""
    if not stripped.startswith("/"):
        stripped = f"/{stripped}"
    return stripped


def load_config(env: Mapping[str, Any] | None = None) -> AppConfig:
    """Build the typed application configuration from the runtime environment."""

    source = env if env is not None else get_runtime_env()
    level = str(source.get("LOG_LEVEL") or "INFO").strip().upper() or "INFO"
    return AppConfig(
        logging=LoggingConfig(level=level),
        search=SearchConfig(
            default_backends=_parse_backends(source.get("SEARCH_DEFAULT_BACKENDS")),
            page_size=_bounded_int(
                source.get("SEARCH_PAGE_SIZE"),
                default=DEFAULT_SEARCH_PAGE_SIZE,
                minimum=1,
                maximum=MAX_SEARCH_PAGE_SIZE,
            ),
        ),
        api=ApiConfig(base_path=_normalise_base_path(source.get("API_BASE_PATH"))),
    )


__all__ = [
    "ApiConfig",
    "AppConfig",
    "LoggingConfig",
    "SearchConfig",
    "get_env",
    "get_runtime_env",
    "load_config",
    "load_runtime_env",
    "override_runtime_env",
]

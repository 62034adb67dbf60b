"""Structured log events with flat, JSON-compatible payloads."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
import logging
from typing import Any

_JSON_PRIMITIVES = (str, int, float, bool, type(None))


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _check_nested(value: Any, *, path: str) -> Any:
    value = _plain(value)
    if isinstance(value, _JSON_PRIMITIVES):
        return value
    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for key, nested in value.items():
            if not isinstance(key, str):
                raise TypeError(f"Keys in '{path}' must be strings")
            result[key] = _check_nested(nested, path=f"{path}.{key}")
        return result
    if isinstance(value, (list, tuple)):
        return [_check_nested(item, path=f"{path}[{i}]") for i, item in enumerate(value)]
    raise TypeError(f"Unsupported value in '{path}': {type(value).__name__}")


def log_event(
    logger: Any, event: str, /, *, level: int = logging.INFO, **fields: Any
) -> None:
    """Log ``event`` with ``fields`` attached as record attributes.

    Fields must be flat JSON values (enum members are logged by value); nested
    data goes under ``meta``.
    """

    if not isinstance(event, str) or not event.strip():
        raise ValueError("event must be a non-empty string")

    meta = fields.pop("meta", None)
    extra: dict[str, Any] = {"event": event}
    for name, value in fields.items():
        value = _plain(value)
        if not isinstance(value, _JSON_PRIMITIVES):
            raise TypeError(f"Field '{name}' must be a flat JSON-compatible value")
        extra[name] = value
    if meta is not None:
        if not isinstance(meta, Mapping):
            raise TypeError("meta must be a mapping if provided")
        extra["meta"] = _check_nested(meta, path="meta")

    logger.log(level, event, extra=extra)

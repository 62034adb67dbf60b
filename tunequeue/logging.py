"""Logging setup shared by the library and the HTTP app."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER_NAME = "tunequeue"


def resolve_level(level: str | int) -> int:
    """Map a level name or number to a :mod:`logging` level, defaulting to INFO."""

    if isinstance(level, int):
        return level
    candidate = level.strip().upper()
    if candidate.isdigit():
        return int(candidate)
    resolved = logging.getLevelName(candidate)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: str | int = "INFO",
    log_file: Optional[str] = None,
    *,
    stream: TextIO | None = None,
) -> None:
    """Install stream (and optional file) handlers on the root logger."""
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)

import io
import logging

import pytest

from tunequeue.logging import configure_logging, get_logger, resolve_level


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("15", 15),
        (logging.ERROR, logging.ERROR),
        ("chatty", logging.INFO),
    ],
)
def test_resolve_level(level: str | int, expected: int) -> None:
    assert resolve_level(level) == expected


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger("tunequeue.playback").name == "tunequeue.playback"
    assert get_logger("tunequeue").name == "tunequeue"
    assert get_logger("host").name == "tunequeue.host"


def test_configure_logging_writes_to_stream() -> None:
    root = logging.getLogger()
    previous_handlers = list(root.handlers)
    previous_level = root.level
    buffer = io.StringIO()
    try:
        configure_logging("warning", stream=buffer)
        get_logger("tunequeue.tests.setup").warning("queue empty")
        get_logger("tunequeue.tests.setup").info("hidden")
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)

    output = buffer.getvalue()
    assert "[WARNING] tunequeue.tests.setup: queue empty" in output
    assert "hidden" not in output

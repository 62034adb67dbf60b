import logging

import pytest

from tunequeue.logging_events import log_event
from tunequeue.playback.media_id import Caller, MediaType


def test_log_event_emits_flat_extra_payload(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tunequeue.tests.events")
    caplog.set_level(logging.INFO, logger=logger.name)

    log_event(logger, "media.resolved", type="Media.Audio", count=1, meta={"source": "memory"})

    record = caplog.records[-1]
    assert record.getMessage() == "media.resolved"
    assert record.event == "media.resolved"
    assert record.count == 1
    assert record.meta == {"source": "memory"}
    assert record.levelno == logging.INFO


def test_log_event_honours_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tunequeue.tests.levels")
    caplog.set_level(logging.DEBUG, logger=logger.name)

    log_event(logger, "media.rejected", level=logging.WARNING, reason="unknown_type")

    assert caplog.records[-1].levelno == logging.WARNING


def test_log_event_rejects_nested_fields() -> None:
    with pytest.raises(TypeError):
        log_event(logging.getLogger("x"), "bad", payload={"nested": True})


def test_log_event_requires_event_name() -> None:
    with pytest.raises(ValueError):
        log_event(logging.getLogger("x"), "  ")


def test_enum_fields_are_logged_by_value(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tunequeue.tests.enums")
    caplog.set_level(logging.INFO, logger=logger.name)

    log_event(logger, "media.typed", type=MediaType.ALBUM, meta={"caller": Caller.OTHER})

    record = caplog.records[-1]
    assert record.type == "Media.Album"
    assert record.meta == {"caller": "other"}

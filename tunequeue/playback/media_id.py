"""Typed references to playable content and their flat string token.

A token joins four fields with ``" | "``::

    Media.Playlist | 42 | 3 | self

in the order type, value, index, caller. Decoding is total: anything that is
not a valid token falls back to :data:`DEFAULT_MEDIA_ID` and is logged.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
import logging

from tunequeue.logging import get_logger
from tunequeue.logging_events import log_event

logger = get_logger(__name__)

MEDIA_ID_SEPARATOR = " | "


class MediaType(str, Enum):
    """Content categories a reference can point at."""

    AUDIO = "Media.Audio"
    ARTIST = "Media.Artist"
    ALBUM = "Media.Album"
    PLAYLIST = "Media.Playlist"
    AUDIO_QUERY = "Media.AudioQuery"
    AUDIO_MINERVA_QUERY = "Media.AudioMinervaQuery"
    AUDIO_FLACS_QUERY = "Media.AudioFlacsQuery"

    @property
    def is_query(self) -> bool:
        return self in QUERY_MEDIA_TYPES


QUERY_MEDIA_TYPES: frozenset[MediaType] = frozenset(
    {
        MediaType.AUDIO_QUERY,
        MediaType.AUDIO_MINERVA_QUERY,
        MediaType.AUDIO_FLACS_QUERY,
    }
)


class Caller(str, Enum):
    """Which component produced the reference."""

    SELF = "self"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class MediaId:
    type: MediaType = MediaType.AUDIO
    value: str = "0"
    index: int = -1
    caller: Caller = Caller.SELF

    @property
    def has_index(self) -> bool:
        return self.index >= 0

    def with_index(self, index: int) -> "MediaId":
        return replace(self, index=index)

    def with_caller(self, caller: Caller) -> "MediaId":
        return replace(self, caller=caller)

    def to_token(self) -> str:
        return MEDIA_ID_SEPARATOR.join(
            (self.type.value, self.value, str(self.index), self.caller.value)
        )

    def __str__(self) -> str:
        return self.to_token()


DEFAULT_MEDIA_ID = MediaId()


def encode_media_id(
    type: MediaType,
    value: str,
    index: int = -1,
    caller: Caller = Caller.SELF,
) -> str:
    """Encode the four reference fields into a token."""

    return MediaId(type, value, index, caller).to_token()


def _reject(token: str, reason: str) -> None:
    log_event(
        logger,
        "media_id.decode_failed",
        level=logging.WARNING,
        reason=reason,
        token=token,
    )


def parse_media_id(token: str | None) -> MediaId | None:
    """Decode ``token``, returning ``None`` when it is not a valid reference.

    The value field is everything between the type and the trailing index and
    caller fields, so values that contain the separator survive a round trip.
    """

    if not token:
        return None

    type_token, separator, rest = token.partition(MEDIA_ID_SEPARATOR)
    try:
        media_type = MediaType(type_token)
    except ValueError:
        _reject(token, "unknown_type")
        return None

    if not separator:
        _reject(token, "missing_fields")
        return None
    fields = rest.rsplit(MEDIA_ID_SEPARATOR, 2)
    if len(fields) < 3:
        _reject(token, "truncated")
        return None

    value, raw_index, raw_caller = fields
    try:
        index = int(raw_index)
    except ValueError:
        _reject(token, "invalid_index")
        return None
    try:
        caller = Caller(raw_caller)
    except ValueError:
        _reject(token, "unknown_caller")
        return None
    return MediaId(media_type, value, index, caller)


def to_media_id(token: str | None) -> MediaId:
    """Decode ``token``, degrading to :data:`DEFAULT_MEDIA_ID` on bad input."""

    media_id = parse_media_id(token)
    if media_id is None:
        return DEFAULT_MEDIA_ID
    return media_id


__all__ = [
    "Caller",
    "DEFAULT_MEDIA_ID",
    "MEDIA_ID_SEPARATOR",
    "MediaId",
    "MediaType",
    "QUERY_MEDIA_TYPES",
    "encode_media_id",
    "parse_media_id",
    "to_media_id",
]

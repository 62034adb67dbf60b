"""Display-oriented projection of a resolved media reference."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tunequeue.playback.media_id import DEFAULT_MEDIA_ID, MediaId


class QueueTitleType(str, Enum):
    AUDIO = "audio"
    ARTIST = "artist"
    ALBUM = "album"
    PLAYLIST = "playlist"
    SEARCH = "search"
    NONE = "none"


@dataclass(slots=True, frozen=True)
class QueueTitle:
    media_id: MediaId = DEFAULT_MEDIA_ID
    type: QueueTitleType = QueueTitleType.NONE
    title: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.type is QueueTitleType.NONE


__all__ = ["QueueTitle", "QueueTitleType"]

"""Pydantic payloads for the media HTTP surface."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tunequeue.entities import Audio
from tunequeue.playback.media_id import Caller, MediaId, MediaType
from tunequeue.playback.queue_title import QueueTitle, QueueTitleType


class MediaIdPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: MediaType = MediaType.AUDIO
    value: str = "0"
    index: int = -1
    caller: Caller = Caller.SELF

    @classmethod
    def from_media_id(cls, media_id: MediaId) -> "MediaIdPayload":
        return cls(
            type=media_id.type,
            value=media_id.value,
            index=media_id.index,
            caller=media_id.caller,
        )

    def to_media_id(self) -> MediaId:
        return MediaId(self.type, self.value, self.index, self.caller)


class DecodedMediaId(BaseModel):
    media_id: MediaIdPayload
    valid: bool
    has_index: bool


class EncodedMediaId(BaseModel):
    token: str


class AudioPayload(BaseModel):
    id: str
    title: str
    artist: str = ""
    album: str | None = None
    duration: int = Field(default=0, ge=0)

    @classmethod
    def from_audio(cls, audio: Audio) -> "AudioPayload":
        return cls(
            id=audio.id,
            title=audio.title,
            artist=audio.artist,
            album=audio.album,
            duration=audio.duration,
        )


class MediaItemsResponse(BaseModel):
    media_id: MediaIdPayload
    items: list[AudioPayload] | None


class QueueTitleResponse(BaseModel):
    media_id: MediaIdPayload
    type: QueueTitleType
    title: str | None = None

    @classmethod
    def from_queue_title(cls, queue_title: QueueTitle) -> "QueueTitleResponse":
        return cls(
            media_id=MediaIdPayload.from_media_id(queue_title.media_id),
            type=queue_title.type,
            title=queue_title.title,
        )


__all__ = [
    "AudioPayload",
    "DecodedMediaId",
    "EncodedMediaId",
    "MediaIdPayload",
    "MediaItemsResponse",
    "QueueTitleResponse",
]

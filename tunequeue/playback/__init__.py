"""Media references used by the playback queue."""

from tunequeue.playback.lookups import (
    AlbumLookup,
    ArtistLookup,
    AudioLookup,
    AudioSearch,
    MediaLookups,
    PlaylistLookup,
)
from tunequeue.playback.media_id import (
    DEFAULT_MEDIA_ID,
    MEDIA_ID_SEPARATOR,
    Caller,
    MediaId,
    MediaType,
    encode_media_id,
    parse_media_id,
    to_media_id,
)
from tunequeue.playback.queue_title import QueueTitle, QueueTitleType
from tunequeue.playback.resolver import MediaResolver, resolve_items, resolve_title

__all__ = [
    "AlbumLookup",
    "ArtistLookup",
    "AudioLookup",
    "AudioSearch",
    "Caller",
    "DEFAULT_MEDIA_ID",
    "MEDIA_ID_SEPARATOR",
    "MediaId",
    "MediaLookups",
    "MediaResolver",
    "MediaType",
    "PlaylistLookup",
    "QueueTitle",
    "QueueTitleType",
    "encode_media_id",
    "parse_media_id",
    "resolve_items",
    "resolve_title",
    "to_media_id",
]

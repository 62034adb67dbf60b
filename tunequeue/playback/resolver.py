"""Resolve media references into playable audios or queue titles."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Iterable, Mapping, Sequence
import logging
from typing import TypeVar

from tunequeue.entities import Audio
from tunequeue.errors import ApiNotFoundError
from tunequeue.logging import get_logger
from tunequeue.logging_events import log_event
from tunequeue.playback.lookups import MediaLookups
from tunequeue.playback.media_id import (
    QUERY_MEDIA_TYPES,
    MediaId,
    MediaType,
    to_media_id,
)
from tunequeue.playback.queue_title import QueueTitle, QueueTitleType
from tunequeue.search.params import BackendType, SearchParams

logger = get_logger(__name__)

T = TypeVar("T")

ItemsResolver = Callable[[MediaId, MediaLookups], Awaitable[list[Audio] | None]]
TitleResolver = Callable[[MediaId, MediaLookups], Awaitable[QueueTitle]]

_QUERY_BACKENDS: Mapping[MediaType, tuple[BackendType, ...]] = {
    MediaType.AUDIO_QUERY: (),
    MediaType.AUDIO_MINERVA_QUERY: (BackendType.MINERVA,),
    MediaType.AUDIO_FLACS_QUERY: (BackendType.FLACS,),
}


async def _found(lookup: Awaitable[T]) -> T | None:
    """Await ``lookup``, mapping a not-found API error to ``None``."""

    try:
        return await lookup
    except ApiNotFoundError:
        return None


def _playlist_id(media_id: MediaId) -> int | None:
    try:
        return int(media_id.value)
    except ValueError:
        log_event(
            logger,
            "media_id.invalid_playlist_id",
            level=logging.WARNING,
            value=media_id.value,
        )
        return None


def search_params_for(media_id: MediaId) -> SearchParams:
    """Return the search params encoded by a query reference."""

    params = SearchParams.from_value(media_id.value)
    backends = _QUERY_BACKENDS[media_id.type]
    if backends:
        return params.with_types(*backends)
    return params


async def _first_batch(
    open_stream: Callable[[], AsyncIterator[Sequence[Audio]]],
) -> list[Audio]:
    stream = open_stream()
    try:
        async for batch in stream:
            return list(batch)
        return []
    finally:
        aclose = getattr(stream, "aclose", None)
        if aclose is not None:
            await aclose()


async def _audio_items(media_id: MediaId, lookups: MediaLookups) -> list[Audio] | None:
    audio = await _found(lookups.audios.audio(media_id.value))
    return [audio] if audio is not None else []


async def _album_items(media_id: MediaId, lookups: MediaLookups) -> list[Audio] | None:
    album = await _found(lookups.albums.album_with_audios(media_id.value))
    return list(album.audios) if album is not None else None


async def _artist_items(media_id: MediaId, lookups: MediaLookups) -> list[Audio] | None:
    artist = await _found(lookups.artists.artist_with_audios(media_id.value))
    return list(artist.audios) if artist is not None else None


async def _playlist_items(media_id: MediaId, lookups: MediaLookups) -> list[Audio] | None:
    playlist_id = _playlist_id(media_id)
    if playlist_id is None:
        return None
    playlist = await _found(lookups.playlists.playlist_with_audios(playlist_id))
    return list(playlist.audios) if playlist is not None else None


async def _query_items(media_id: MediaId, lookups: MediaLookups) -> list[Audio] | None:
    params = search_params_for(media_id)
    batch = await _found(_first_batch(lambda: lookups.search.search_audios(params)))
    return batch if batch is not None else []


async def _audio_title(media_id: MediaId, lookups: MediaLookups) -> QueueTitle:
    audio = await _found(lookups.audios.audio(media_id.value))
    return QueueTitle(media_id, QueueTitleType.AUDIO, audio.title if audio else None)


async def _artist_title(media_id: MediaId, lookups: MediaLookups) -> QueueTitle:
    artist = await _found(lookups.artists.artist_with_audios(media_id.value))
    return QueueTitle(media_id, QueueTitleType.ARTIST, artist.artist.name if artist else None)


async def _album_title(media_id: MediaId, lookups: MediaLookups) -> QueueTitle:
    album = await _found(lookups.albums.album_with_audios(media_id.value))
    return QueueTitle(media_id, QueueTitleType.ALBUM, album.album.title if album else None)


async def _playlist_title(media_id: MediaId, lookups: MediaLookups) -> QueueTitle:
    playlist_id = _playlist_id(media_id)
    playlist = None
    if playlist_id is not None:
        playlist = await _found(lookups.playlists.playlist_with_audios(playlist_id))
    return QueueTitle(
        media_id,
        QueueTitleType.PLAYLIST,
        playlist.playlist.name if playlist else None,
    )


async def _query_title(media_id: MediaId, lookups: MediaLookups) -> QueueTitle:
    return QueueTitle(media_id, QueueTitleType.SEARCH, media_id.value)


_ITEM_RESOLVERS: Mapping[MediaType, ItemsResolver] = {
    MediaType.AUDIO: _audio_items,
    MediaType.ALBUM: _album_items,
    MediaType.ARTIST: _artist_items,
    MediaType.PLAYLIST: _playlist_items,
    MediaType.AUDIO_QUERY: _query_items,
    MediaType.AUDIO_MINERVA_QUERY: _query_items,
    MediaType.AUDIO_FLACS_QUERY: _query_items,
}

_TITLE_RESOLVERS: Mapping[MediaType, TitleResolver] = {
    MediaType.AUDIO: _audio_title,
    MediaType.ARTIST: _artist_title,
    MediaType.ALBUM: _album_title,
    MediaType.PLAYLIST: _playlist_title,
    MediaType.AUDIO_QUERY: _query_title,
    MediaType.AUDIO_MINERVA_QUERY: _query_title,
    MediaType.AUDIO_FLACS_QUERY: _query_title,
}


def _ensure_exhaustive(table: Mapping[MediaType, object], expected: Iterable[MediaType]) -> None:
    missing = sorted(media_type.value for media_type in expected if media_type not in table)
    if missing:
        raise RuntimeError(f"Resolver table is missing media types: {missing}")


_ensure_exhaustive(_ITEM_RESOLVERS, MediaType)
_ensure_exhaustive(_TITLE_RESOLVERS, MediaType)
_ensure_exhaustive(_QUERY_BACKENDS, QUERY_MEDIA_TYPES)


async def resolve_items(media_id: MediaId, lookups: MediaLookups) -> list[Audio] | None:
    """Return the audios ``media_id`` points at.

    Single audios resolve to a one-element list or ``[]``. Containers resolve
    to their audios or ``None`` when the container itself is missing. Query
    references resolve to the first batch the search emits.
    """

    resolver = _ITEM_RESOLVERS.get(media_id.type)
    if resolver is None:
        return []
    items = await resolver(media_id, lookups)
    log_event(
        logger,
        "media_id.resolve_items",
        level=logging.DEBUG,
        type=media_id.type,
        count=None if items is None else len(items),
    )
    return items


async def resolve_title(media_id: MediaId, lookups: MediaLookups) -> QueueTitle:
    """Return the queue title for ``media_id``."""

    resolver = _TITLE_RESOLVERS.get(media_id.type)
    if resolver is None:
        return QueueTitle()
    return await resolver(media_id, lookups)


class MediaResolver:
    """Resolve references against a fixed set of lookups."""

    def __init__(self, lookups: MediaLookups) -> None:
        self._lookups = lookups

    @property
    def lookups(self) -> MediaLookups:
        return self._lookups

    @staticmethod
    def _coerce(reference: MediaId | str | None) -> MediaId:
        if isinstance(reference, MediaId):
            return reference
        return to_media_id(reference)

    async def items(self, reference: MediaId | str | None) -> list[Audio] | None:
        return await resolve_items(self._coerce(reference), self._lookups)

    async def title(self, reference: MediaId | str | None) -> QueueTitle:
        return await resolve_title(self._coerce(reference), self._lookups)


__all__ = [
    "MediaResolver",
    "resolve_items",
    "resolve_title",
    "search_params_for",
]

"""Lookup capabilities the host application supplies to the resolver."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from dataclasses import dataclass
from typing import Protocol

from tunequeue.entities import (
    AlbumWithAudios,
    ArtistWithAudios,
    Audio,
    PlaylistWithAudios,
)
from tunequeue.search.params import SearchParams


class AudioLookup(Protocol):
    async def audio(self, audio_id: str) -> Audio | None:
        """Return the audio with ``audio_id`` or ``None``."""


class AlbumLookup(Protocol):
    async def album_with_audios(self, album_id: str) -> AlbumWithAudios | None:
        """Return the album and its audios or ``None``."""


class ArtistLookup(Protocol):
    async def artist_with_audios(self, artist_id: str) -> ArtistWithAudios | None:
        """Return the artist and its audios or ``None``."""


class PlaylistLookup(Protocol):
    async def playlist_with_audios(self, playlist_id: int) -> PlaylistWithAudios | None:
        """Return the playlist and its audios or ``None``."""


class AudioSearch(Protocol):
    def search_audios(self, params: SearchParams) -> AsyncIterator[Sequence[Audio]]:
        """Stream result batches for ``params``."""


@dataclass(slots=True, frozen=True)
class MediaLookups:
    """Bundle of lookups consumed by :mod:`tunequeue.playback.resolver`."""

    audios: AudioLookup
    albums: AlbumLookup
    artists: ArtistLookup
    playlists: PlaylistLookup
    search: AudioSearch


__all__ = [
    "AlbumLookup",
    "ArtistLookup",
    "AudioLookup",
    "AudioSearch",
    "MediaLookups",
    "PlaylistLookup",
]

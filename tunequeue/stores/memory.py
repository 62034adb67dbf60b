"""In-memory lookup providers for single-process hosts and tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable, Sequence
from threading import Lock

from tunequeue.entities import (
    Album,
    AlbumWithAudios,
    Artist,
    ArtistWithAudios,
    Audio,
    Playlist,
    PlaylistWithAudios,
)
from tunequeue.playback.lookups import MediaLookups
from tunequeue.search.params import BackendType, SearchParams

__all__ = ["MemoryMediaStore"]

DEFAULT_PAGE_SIZE = 50


class MemoryMediaStore:
    """Thread-safe dictionary backed implementation of every media lookup."""

    def __init__(self, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._page_size = page_size
        self._audios: dict[str, Audio] = {}
        self._audio_backends: dict[str, frozenset[BackendType]] = {}
        self._albums: dict[str, AlbumWithAudios] = {}
        self._artists: dict[str, ArtistWithAudios] = {}
        self._playlists: dict[int, PlaylistWithAudios] = {}
        self._lock = Lock()

    @property
    def page_size(self) -> int:
        return self._page_size

    def as_lookups(self) -> MediaLookups:
        return MediaLookups(
            audios=self,
            albums=self,
            artists=self,
            playlists=self,
            search=self,
        )

    def add_audio(
        self,
        audio: Audio,
        *,
        backends: Iterable[BackendType] = (BackendType.AUDIOS,),
    ) -> Audio:
        with self._lock:
            self._audios[audio.id] = audio
            self._audio_backends[audio.id] = frozenset(backends)
        return audio

    def add_album(self, album: Album, audios: Sequence[Audio] = ()) -> AlbumWithAudios:
        entry = AlbumWithAudios(album=album, audios=tuple(audios))
        with self._lock:
            self._albums[album.id] = entry
        return entry

    def add_artist(self, artist: Artist, audios: Sequence[Audio] = ()) -> ArtistWithAudios:
        entry = ArtistWithAudios(artist=artist, audios=tuple(audios))
        with self._lock:
            self._artists[artist.id] = entry
        return entry

    def add_playlist(
        self, playlist: Playlist, audios: Sequence[Audio] = ()
    ) -> PlaylistWithAudios:
        entry = PlaylistWithAudios(playlist=playlist, audios=tuple(audios))
        with self._lock:
            self._playlists[playlist.id] = entry
        return entry

    async def audio(self, audio_id: str) -> Audio | None:
        with self._lock:
            return self._audios.get(audio_id)

    async def album_with_audios(self, album_id: str) -> AlbumWithAudios | None:
        with self._lock:
            return self._albums.get(album_id)

    async def artist_with_audios(self, artist_id: str) -> ArtistWithAudios | None:
        with self._lock:
            return self._artists.get(artist_id)

    async def playlist_with_audios(self, playlist_id: int) -> PlaylistWithAudios | None:
        with self._lock:
            return self._playlists.get(playlist_id)

    def _matching_audios(self, params: SearchParams) -> list[Audio]:
        needle = params.query.casefold()
        with self._lock:
            candidates = list(self._audios.values())
            backends = dict(self._audio_backends)
        matches: list[Audio] = []
        for audio in candidates:
            if needle and needle not in f"{audio.artist} {audio.title}".casefold():
                continue
            if params.is_restricted and not any(
                params.matches(backend) for backend in backends.get(audio.id, ())
            ):
                continue
            matches.append(audio)
        return matches

    async def search_audios(self, params: SearchParams) -> AsyncIterator[Sequence[Audio]]:
        matches = self._matching_audios(params)
        start = params.page * self._page_size
        for offset in range(start, len(matches), self._page_size):
            yield tuple(matches[offset : offset + self._page_size])

"""Domain entities handed out by the lookup providers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Audio:
    """A single playable audio."""

    id: str
    title: str
    artist: str = ""
    album: str | None = None
    duration: int = 0


@dataclass(slots=True, frozen=True)
class Artist:
    id: str
    name: str


@dataclass(slots=True, frozen=True)
class Album:
    id: str
    title: str
    artists: tuple[Artist, ...] = ()


@dataclass(slots=True, frozen=True)
class Playlist:
    id: int
    name: str


@dataclass(slots=True, frozen=True)
class AlbumWithAudios:
    album: Album
    audios: tuple[Audio, ...] = ()


@dataclass(slots=True, frozen=True)
class ArtistWithAudios:
    artist: Artist
    audios: tuple[Audio, ...] = ()


@dataclass(slots=True, frozen=True)
class PlaylistWithAudios:
    playlist: Playlist
    audios: tuple[Audio, ...] = ()


__all__ = [
    "Album",
    "AlbumWithAudios",
    "Artist",
    "ArtistWithAudios",
    "Audio",
    "Playlist",
    "PlaylistWithAudios",
]

"""Search query parameters and the backend selector enumeration."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class BackendType(str, Enum):
    """Upstream search backends a query can be restricted to."""

    AUDIOS = "audios"
    ARTISTS = "artists"
    ALBUMS = "albums"
    MINERVA = "minerva"
    FLACS = "flacs"


@dataclass(slots=True, frozen=True)
class SearchParams:
    """Normalised search query.

    An empty ``backends`` set leaves the query unrestricted.
    """

    query: str
    page: int = 0
    backends: frozenset[BackendType] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("page must not be negative")

    @classmethod
    def from_value(cls, value: str) -> "SearchParams":
        """Build unrestricted params from a raw query value."""

        return cls(query=value.strip())

    @property
    def is_restricted(self) -> bool:
        return bool(self.backends)

    def with_types(self, *types: BackendType) -> "SearchParams":
        """Return a copy restricted to ``types``."""

        return replace(self, backends=frozenset(types))

    def matches(self, backend: BackendType) -> bool:
        return not self.backends or backend in self.backends

    def to_query_params(self) -> dict[str, object]:
        params: dict[str, object] = {"query": self.query, "page": self.page}
        if self.backends:
            params["types[]"] = sorted(backend.value for backend in self.backends)
        return params


__all__ = ["BackendType", "SearchParams"]

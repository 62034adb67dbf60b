"""Immutable view-state records for the search screen."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from tunequeue.search.params import BackendType, SearchParams

if TYPE_CHECKING:
    from tunequeue.config import SearchConfig

DEFAULT_BACKENDS: frozenset[BackendType] = frozenset(BackendType)


@dataclass(slots=True, frozen=True)
class SearchFilter:
    backends: frozenset[BackendType] = DEFAULT_BACKENDS

    @classmethod
    def from_config(cls, config: "SearchConfig") -> "SearchFilter":
        return cls(backends=config.default_backends)

    @property
    def has_default_backends(self) -> bool:
        return self.backends == DEFAULT_BACKENDS

    def to_params(self, query: str, *, page: int = 0) -> SearchParams:
        """Build search params for ``query`` limited to the selected backends."""

        params = SearchParams(query=query.strip(), page=page)
        if self.has_default_backends:
            return params
        return params.with_types(*self.backends)


@dataclass(slots=True, frozen=True)
class SearchViewState:
    query: str = ""
    search_filter: SearchFilter = field(default_factory=SearchFilter)
    error: BaseException | None = None

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def with_query(self, query: str) -> "SearchViewState":
        return replace(self, query=query, error=None)

    def with_error(self, error: BaseException | None) -> "SearchViewState":
        return replace(self, error=error)


EMPTY_SEARCH_VIEW_STATE = SearchViewState()


@dataclass(slots=True, frozen=True)
class SearchTrigger:
    query: str = ""


class SearchAction:
    """Actions dispatched from the search screen."""

    @dataclass(slots=True, frozen=True)
    class Search:
        query: str = ""


__all__ = [
    "DEFAULT_BACKENDS",
    "EMPTY_SEARCH_VIEW_STATE",
    "SearchAction",
    "SearchFilter",
    "SearchTrigger",
    "SearchViewState",
]

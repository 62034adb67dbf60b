"""Search parameters and search screen state."""

from tunequeue.search.params import BackendType, SearchParams
from tunequeue.search.state import (
    DEFAULT_BACKENDS,
    EMPTY_SEARCH_VIEW_STATE,
    SearchAction,
    SearchFilter,
    SearchTrigger,
    SearchViewState,
)

__all__ = [
    "BackendType",
    "DEFAULT_BACKENDS",
    "EMPTY_SEARCH_VIEW_STATE",
    "SearchAction",
    "SearchFilter",
    "SearchParams",
    "SearchTrigger",
    "SearchViewState",
]

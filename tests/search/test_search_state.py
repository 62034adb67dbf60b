from tunequeue.config import load_config
from tunequeue.errors import api_error
from tunequeue.search.params import BackendType, SearchParams
from tunequeue.search.state import (
    DEFAULT_BACKENDS,
    EMPTY_SEARCH_VIEW_STATE,
    SearchAction,
    SearchFilter,
    SearchTrigger,
    SearchViewState,
)


def test_default_filter_selects_every_backend() -> None:
    search_filter = SearchFilter()

    assert search_filter.backends == frozenset(BackendType)
    assert search_filter.backends == DEFAULT_BACKENDS
    assert search_filter.has_default_backends


def test_default_filter_builds_unrestricted_params() -> None:
    assert SearchFilter().to_params(" query ") == SearchParams(query="query")


def test_narrowed_filter_restricts_params() -> None:
    search_filter = SearchFilter(backends=frozenset({BackendType.FLACS}))

    params = search_filter.to_params("query", page=1)

    assert params.page == 1
    assert params.backends == frozenset({BackendType.FLACS})


def test_empty_view_state() -> None:
    assert EMPTY_SEARCH_VIEW_STATE == SearchViewState()
    assert EMPTY_SEARCH_VIEW_STATE.query == ""
    assert EMPTY_SEARCH_VIEW_STATE.search_filter == SearchFilter()
    assert EMPTY_SEARCH_VIEW_STATE.has_error is False


def test_view_state_updates_produce_new_values() -> None:
    failure = api_error("serverError")

    failed = EMPTY_SEARCH_VIEW_STATE.with_error(failure)
    retried = failed.with_query("again")

    assert failed.has_error and failed.error is failure
    assert retried.query == "again"
    assert retried.has_error is False
    assert EMPTY_SEARCH_VIEW_STATE.has_error is False


def test_trigger_and_action_defaults() -> None:
    assert SearchTrigger().query == ""
    assert SearchAction.Search().query == ""
    assert SearchAction.Search("x") == SearchAction.Search(query="x")


def test_filter_from_config_uses_configured_backends() -> None:
    config = load_config({"SEARCH_DEFAULT_BACKENDS": "minerva"})

    search_filter = SearchFilter.from_config(config.search)

    assert search_filter.backends == frozenset({BackendType.MINERVA})
    assert search_filter.has_default_backends is False

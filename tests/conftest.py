import asyncio
import inspect
from pathlib import Path
import sys
from collections.abc import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tunequeue.config import override_runtime_env  # noqa: E402
from tunequeue.dependencies import reset_dependencies_for_tests  # noqa: E402
from tunequeue.entities import Album, Artist, Audio, Playlist  # noqa: E402
from tunequeue.search.params import BackendType  # noqa: E402
from tunequeue.stores.memory import MemoryMediaStore  # noqa: E402


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    marker = pyfuncitem.get_closest_marker("asyncio")
    if marker is None:
        return None
    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None
    fixtureinfo = getattr(pyfuncitem, "_fixtureinfo", None)
    if fixtureinfo is None:
        return None
    kwargs = {name: pyfuncitem.funcargs[name] for name in fixtureinfo.argnames}
    asyncio.run(test_func(**kwargs))
    return True


@pytest.fixture(autouse=True)
def _test_environment() -> Iterator[None]:
    override_runtime_env({})
    reset_dependencies_for_tests()
    try:
        yield
    finally:
        reset_dependencies_for_tests()
        override_runtime_env(None)


@pytest.fixture()
def store() -> MemoryMediaStore:
    media = MemoryMediaStore(page_size=2)
    one = media.add_audio(Audio(id="a1", title="Blue Monday", artist="New Order"))
    two = media.add_audio(Audio(id="a2", title="Bizarre Love Triangle", artist="New Order"))
    three = media.add_audio(
        Audio(id="a3", title="Blue Train", artist="John Coltrane"),
        backends=(BackendType.MINERVA,),
    )
    four = media.add_audio(
        Audio(id="a4", title="Blue in Green", artist="Miles Davis"),
        backends=(BackendType.FLACS,),
    )
    new_order = Artist(id="ar1", name="New Order")
    media.add_artist(new_order, [one, two])
    media.add_album(Album(id="al1", title="Substance", artists=(new_order,)), [one, two])
    media.add_album(Album(id="al2", title="Empty Sessions"))
    media.add_playlist(Playlist(id=42, name="Late Night"), [three, four])
    return media

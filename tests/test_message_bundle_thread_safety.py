"""Concurrent read tests for MessageBundle.

Bundles are immutable, so any number of threads may call resolve() on a
shared bundle and must see the same answers as a single thread.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from msgbundle import MessageBundle
from msgbundle.sources import MapMessageSource

_KEYS = [f"key.{i}" for i in range(200)]


def _bundle() -> MessageBundle:
    even = MapMessageSource({k: f"even {k}" for i, k in enumerate(_KEYS) if i % 2 == 0})
    thirds = MapMessageSource({k: f"third {k}" for i, k in enumerate(_KEYS) if i % 3 == 0})
    return MessageBundle.builder().append_source(even).append_source(thirds).build()


def _expected(index: int, key: str) -> str:
    if index % 2 == 0:
        return f"even {key}"
    if index % 3 == 0:
        return f"third {key}"
    return key


class TestConcurrentResolve:
    """Test resolve() from many threads."""

    def test_concurrent_resolve_matches_sequential(self) -> None:
        """All threads observe the same resolution results."""
        bundle = _bundle()
        expected = [_expected(i, k) for i, k in enumerate(_KEYS)]

        def worker(_: int) -> list[str]:
            return [bundle.resolve(k) for k in _KEYS]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(worker, range(32)))

        assert all(result == expected for result in results)

    def test_concurrent_resolve_while_deriving(self) -> None:
        """Deriving new bundles in other threads does not disturb readers."""
        bundle = _bundle()
        override = MapMessageSource({k: "override" for k in _KEYS})

        def derive(_: int) -> MessageBundle:
            return bundle.modify().prepend_source(override).build()

        def read(_: int) -> list[str]:
            return [bundle.resolve(k) for k in _KEYS]

        with ThreadPoolExecutor(max_workers=8) as executor:
            derived = list(executor.map(derive, range(16)))
            reads = list(executor.map(read, range(16)))

        expected = [_expected(i, k) for i, k in enumerate(_KEYS)]
        assert all(result == expected for result in reads)
        assert all(d.resolve(_KEYS[1]) == "override" for d in derived)
        assert len(bundle) == 2

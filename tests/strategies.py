"""Hypothesis strategies for message bundle tests.

Provides message keys, message tables, and lists of map-backed sources for
property-based testing of resolution order and builder snapshots.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import composite

from msgbundle.sources import MapMessageSource

# Small key alphabet so generated tables overlap and exercise precedence.
KEY_ALPHABET = string.ascii_lowercase[:6] + "._-"


def message_keys() -> st.SearchStrategy[str]:
    """Generate message keys, including the empty key."""
    return st.text(alphabet=KEY_ALPHABET, max_size=6)


def messages() -> st.SearchStrategy[str]:
    """Generate message texts, including empty and non-ASCII strings."""
    return st.text(max_size=20)


def message_tables() -> st.SearchStrategy[dict[str, str]]:
    """Generate key to message dicts."""
    return st.dictionaries(message_keys(), messages(), max_size=8)


@composite
def map_sources(draw: st.DrawFn) -> MapMessageSource:
    """Generate a MapMessageSource over a random table."""
    return MapMessageSource(draw(message_tables()))


@composite
def source_lists(draw: st.DrawFn, *, min_size: int = 0, max_size: int = 5) -> list[MapMessageSource]:
    """Generate ordered lists of map-backed sources."""
    return draw(st.lists(map_sources(), min_size=min_size, max_size=max_size))


def expected_resolution(sources: list[MapMessageSource], key: str) -> str:
    """Reference first-match-wins resolution used as a test oracle."""
    for source in sources:
        if key in source.entries:
            return source.entries[key]
    return key

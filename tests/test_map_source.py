"""Tests for MapMessageSource."""

from __future__ import annotations

import pytest

from msgbundle import InvalidArgumentError, MessageSource
from msgbundle.diagnostics import DiagnosticCode
from msgbundle.sources import MapMessageSource


class TestLookup:
    """Test MapMessageSource.lookup()."""

    def test_known_key(self) -> None:
        """Known key returns its message."""
        assert MapMessageSource({"greeting": "Hello"}).lookup("greeting") == "Hello"

    def test_unknown_key_returns_none(self) -> None:
        """Unknown key returns None."""
        assert MapMessageSource({"greeting": "Hello"}).lookup("farewell") is None

    def test_none_key_raises(self) -> None:
        """lookup(None) is an argument error."""
        with pytest.raises(InvalidArgumentError, match="cannot query null key"):
            MapMessageSource({}).lookup(None)  # type: ignore[arg-type]

    def test_from_pairs(self) -> None:
        """Keyword arguments become entries."""
        source = MapMessageSource.from_pairs(hello="Hello", bye="Bye")
        assert source.lookup("hello") == "Hello"
        assert len(source) == 2

    def test_satisfies_protocol(self) -> None:
        """MapMessageSource is a MessageSource."""
        assert isinstance(MapMessageSource({}), MessageSource)


class TestSnapshot:
    """Test that the source copies and freezes its entries."""

    def test_caller_mutation_not_seen(self) -> None:
        """Changing the original dict does not change the source."""
        table = {"a": "Apple"}
        source = MapMessageSource(table)
        table["a"] = "Avocado"
        table["b"] = "Banana"
        assert source.lookup("a") == "Apple"
        assert source.lookup("b") is None

    def test_entries_read_only(self) -> None:
        """The exposed mapping rejects item assignment."""
        source = MapMessageSource({"a": "Apple"})
        with pytest.raises(TypeError):
            source.entries["a"] = "Avocado"  # type: ignore[index]

    def test_mapping_helpers(self) -> None:
        """keys(), in, iteration and len() reflect the entries."""
        source = MapMessageSource({"a": "Apple", "b": "Banana"})
        assert set(source.keys()) == {"a", "b"}
        assert "a" in source
        assert "c" not in source
        assert sorted(source) == ["a", "b"]
        assert len(source) == 2


class TestValidation:
    """Test rejection of invalid entries."""

    def test_none_mapping_rejected(self) -> None:
        """A None mapping is an argument error."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            MapMessageSource(None)  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NULL_ARGUMENT
        assert "null mapping" in str(exc_info.value)

    @pytest.mark.parametrize(
        "entries",
        [{"a": None}, {"a": 1}, {1: "one"}, {None: "none"}],
    )
    def test_non_string_entries_rejected(self, entries: dict[object, object]) -> None:
        """Keys and values must both be strings."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            MapMessageSource(entries)  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_ENTRY

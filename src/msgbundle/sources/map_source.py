"""Map-backed message source.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, KeysView, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from msgbundle.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = ["MapMessageSource", "freeze_entries"]


def freeze_entries(entries: Mapping[str, str]) -> MappingProxyType[str, str]:
    """Copy entries into a read-only mapping, validating every pair.

    Raises:
        InvalidArgumentError: If entries is None or a key/value is not a str
    """
    if entries is None:
        raise InvalidArgumentError(ErrorTemplate.null_argument("mapping"))
    copied: dict[str, str] = {}
    for key, value in entries.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise InvalidArgumentError(ErrorTemplate.invalid_entry(key, value))
        copied[key] = value
    return MappingProxyType(copied)


@dataclass(frozen=True, slots=True, eq=False)
class MapMessageSource:
    """Message source backed by an immutable snapshot of a mapping.

    The mapping is copied at construction; later changes to the caller's
    dict are not seen by the source.

    Example:
        >>> source = MapMessageSource({"greeting": "Hello"})
        >>> source.lookup("greeting")
        'Hello'
        >>> source.lookup("farewell") is None
        True

    Attributes:
        entries: Read-only key to message mapping
    """

    entries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Replace entries with a validated read-only copy."""
        object.__setattr__(self, "entries", freeze_entries(self.entries))

    @classmethod
    def from_pairs(cls, **messages: str) -> MapMessageSource:
        """Build a source from keyword arguments (keys must be identifiers)."""
        return cls(messages)

    def lookup(self, key: str) -> str | None:
        """Return the message for key, or None if absent.

        Raises:
            InvalidArgumentError: If key is None
        """
        if key is None:
            raise InvalidArgumentError(ErrorTemplate.null_key())
        return self.entries.get(key)

    def keys(self) -> KeysView[str]:
        """Return a view of all message keys."""
        return self.entries.keys()

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

"""MessageBundle - immutable key-to-message resolution over ordered sources.

A bundle holds an ordered, private tuple of message sources and resolves a
key by asking each source in turn. A key no source knows resolves to
itself, so resolution never fails for missing messages.

Bundles are created through a MessageBundleBuilder and never change after
construction. To derive a different bundle, call modify() to obtain a
builder seeded with the bundle's sources; the original stays intact.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

from msgbundle.bundle.protocol import MessageSource, is_message_source
from msgbundle.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = ["MessageBundle", "MessageBundleBuilder"]

logger = logging.getLogger(__name__)


def _check_source(source: object, operation: str) -> MessageSource:
    """Validate a candidate source before it enters a sequence.

    Raises:
        InvalidArgumentError: If source is None or has no callable lookup()
    """
    if source is None:
        raise InvalidArgumentError(ErrorTemplate.null_source(operation))
    if not is_message_source(source):
        raise InvalidArgumentError(ErrorTemplate.invalid_source(operation, source))
    return source  # type: ignore[return-value]


@dataclass(frozen=True, slots=True, eq=False)
class MessageBundle:
    """Immutable, non-localized message bundle.

    Building a bundle:
        1. create one or more message sources;
        2. obtain a builder with MessageBundle.builder();
        3. register sources with append_source() / prepend_source();
        4. call build().

    Resolution order is the source order at build time: the first source
    returning a message wins.

    Thread Safety:
        Bundles are immutable and safe for concurrent resolve() calls from
        any number of threads. Thread safety of the sources themselves is
        the sources' responsibility.

    Example:
        >>> from msgbundle.sources import MapMessageSource
        >>> bundle = (
        ...     MessageBundle.builder()
        ...     .append_source(MapMessageSource({"a": "Apple"}))
        ...     .append_source(MapMessageSource({"a": "Avocado", "b": "Banana"}))
        ...     .build()
        ... )
        >>> bundle.resolve("a"), bundle.resolve("b"), bundle.resolve("c")
        ('Apple', 'Banana', 'c')

    Attributes:
        sources: Registered sources in priority order (immutable tuple)
    """

    sources: tuple[MessageSource, ...] = ()

    def __post_init__(self) -> None:
        """Take a private tuple copy of the given sources.

        Raises:
            InvalidArgumentError: If sources is None, or any source is None or
                not a message source
        """
        if self.sources is None:
            raise InvalidArgumentError(ErrorTemplate.null_argument("source sequence", "register"))
        checked = tuple(_check_source(source, "register") for source in self.sources)
        object.__setattr__(self, "sources", checked)

    @staticmethod
    def builder() -> MessageBundleBuilder:
        """Create a new, empty bundle builder."""
        return MessageBundleBuilder()

    def resolve(self, key: str) -> str:
        """Get the message matching key.

        Each registered source is queried in order; the first message found
        is returned and no further sources are consulted. If no source has
        the key, the key itself is returned, so this method never returns
        None and never raises for a missing message.

        Args:
            key: Message key

        Returns:
            The first matching message, or key when no source matches

        Raises:
            InvalidArgumentError: If key is None
        """
        if key is None:
            raise InvalidArgumentError(ErrorTemplate.null_key())

        for source in self.sources:
            message = source.lookup(key)
            if message is not None:
                return message

        return key

    def modify(self) -> MessageBundleBuilder:
        """Return a builder pre-loaded with this bundle's sources.

        Building that builder yields a new bundle; this one is left intact.
        """
        return MessageBundleBuilder(self.sources)

    def __len__(self) -> int:
        """Return the number of registered sources."""
        return len(self.sources)

    def __repr__(self) -> str:
        """Return compact representation with the source count."""
        return f"MessageBundle(sources={len(self.sources)})"


class MessageBundleBuilder:
    """Mutable accumulator of message sources producing MessageBundle snapshots.

    Obtain one through MessageBundle.builder() or MessageBundle.modify().
    Methods that change the sequence return the builder for chaining.

    build() may be called any number of times. Each call captures the
    sequence as it is at that moment; later appends and prepends never
    reach bundles that were already built.

    Thread Safety:
        Builders are NOT thread-safe. A builder is meant for single-owner,
        sequential use. Concurrent append_source/prepend_source/build calls
        on one builder need external synchronization.
    """

    __slots__ = ("_sources",)

    def __init__(self, sources: Iterable[MessageSource] = ()) -> None:
        """Initialize builder.

        Args:
            sources: Initial sources in priority order; copied, never aliased

        Raises:
            InvalidArgumentError: If sources is None, or any source is None or
                not a message source
        """
        if sources is None:
            raise InvalidArgumentError(ErrorTemplate.null_argument("source sequence", "register"))
        self._sources: list[MessageSource] = [
            _check_source(source, "register") for source in sources
        ]

    def append_source(self, source: MessageSource) -> Self:
        """Append one message source after the already registered sources.

        Args:
            source: Source with the lowest priority so far

        Returns:
            This builder

        Raises:
            InvalidArgumentError: If source is None or not a message source
        """
        self._sources.append(_check_source(source, "append"))
        return self

    def prepend_source(self, source: MessageSource) -> Self:
        """Prepend one message source before the already registered sources.

        Args:
            source: Source with the highest priority so far

        Returns:
            This builder

        Raises:
            InvalidArgumentError: If source is None or not a message source
        """
        self._sources.insert(0, _check_source(source, "prepend"))
        return self

    def build(self) -> MessageBundle:
        """Build a bundle from a snapshot of the current sources."""
        logger.debug("Building MessageBundle with %d source(s)", len(self._sources))
        return MessageBundle(tuple(self._sources))

    def __repr__(self) -> str:
        """Return compact representation with the source count."""
        return f"MessageBundleBuilder(sources={len(self._sources)})"

"""MessageSource protocol: the single capability a bundle depends on.

Python 3.13+. Zero external dependencies.
"""

from typing import Protocol, runtime_checkable

__all__ = ["MessageSource", "is_message_source"]


@runtime_checkable
class MessageSource(Protocol):
    """Protocol for anything that can map a message key to a message.

    This is a Protocol (structural typing) rather than ABC so that any
    object with a matching lookup() method can be registered on a bundle:
    map-backed, file-backed, database-backed, or a small adapter class.

    Implementations should be deterministic and side-effect free per call.
    Bundles share source references and never copy them, so a source must
    live at least as long as every bundle that references it.

    Example:
        >>> class UpperSource:
        ...     def lookup(self, key: str) -> str | None:
        ...         return key.upper() if key.startswith("shout.") else None
        ...
        >>> bundle = MessageBundle.builder().append_source(UpperSource()).build()
        >>> bundle.resolve("shout.hi")
        'SHOUT.HI'
    """

    def lookup(self, key: str) -> str | None:
        """Return the message for key, or None if this source has no entry.

        Args:
            key: Message key (never None when called by a bundle)

        Returns:
            The message text, or None when the key is unknown to this source
        """
        ...


def is_message_source(obj: object) -> bool:
    """Check whether obj can be registered as a message source.

    Stricter than isinstance(obj, MessageSource), which only checks that a
    lookup attribute exists: the attribute must also be callable.
    """
    return callable(getattr(obj, "lookup", None))

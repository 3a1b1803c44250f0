"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel so that the
bundle core never triggers a Babel import and catalog-backed sources get a
consistent, helpful error message when Babel is missing.

Design Rationale:
    msgbundle supports two installation modes:
    - Core only: `pip install msgbundle` (no external dependencies)
    - Catalog sources: `pip install msgbundle[babel]` (gettext .po/.mo support)

Usage Pattern:
    # At module top-level (for type hints only):
    from typing import TYPE_CHECKING
    if TYPE_CHECKING:
        from babel.messages.catalog import Catalog

    # At function call site (for runtime use):
    from msgbundle.core.babel_compat import get_babel_pofile

    def load(path: str) -> Catalog:
        pofile = get_babel_pofile()  # Raises BabelImportError if Babel missing
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import IO, TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from babel.messages.catalog import Catalog


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelPoFileProtocol(Protocol):
    """Protocol for the babel.messages.pofile interface used by msgbundle."""

    PoFileError: type[Exception]

    def read_po(
        self,
        fileobj: IO[Any],
        locale: str | None = None,
        domain: str | None = None,
        ignore_obsolete: bool = False,
        charset: str | None = None,
        abort_invalid: bool = False,
    ) -> Catalog:
        """Read a gettext PO catalog from a file object."""
        ...


class BabelMoFileProtocol(Protocol):
    """Protocol for the babel.messages.mofile interface used by msgbundle."""

    def read_mo(self, fileobj: IO[bytes]) -> Catalog:
        """Read a compiled gettext MO catalog from a binary file object."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelMoFileProtocol",
    "BabelPoFileProtocol",
    "get_babel_mofile",
    "get_babel_pofile",
    "get_catalog_class",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel extra.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for gettext catalog support. "
            "Install with: pip install msgbundle[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_catalog_class() -> type[Catalog]:
    """Get the Babel Catalog class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_catalog_class")
    from babel.messages.catalog import Catalog  # noqa: PLC0415

    return Catalog


def get_babel_pofile() -> BabelPoFileProtocol:
    """Get the babel.messages.pofile module.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_pofile")
    from babel.messages import pofile  # noqa: PLC0415

    return pofile


def get_babel_mofile() -> BabelMoFileProtocol:
    """Get the babel.messages.mofile module.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_mofile")
    from babel.messages import mofile  # noqa: PLC0415

    return mofile

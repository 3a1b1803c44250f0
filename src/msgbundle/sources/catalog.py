"""Gettext catalog message source (requires the optional Babel extra).

Snapshots the translated entries of a babel.messages Catalog into an
immutable key to message table. Catalogs are read from .po files with
babel.messages.pofile and from compiled .mo files with babel.messages.mofile.

Python 3.13+. External dependency: Babel (optional extra).
"""

from __future__ import annotations

import io
import logging
import struct
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from msgbundle.core.babel_compat import get_babel_mofile, get_babel_pofile, get_catalog_class
from msgbundle.diagnostics import ErrorTemplate, InvalidArgumentError, SourceLoadError
from msgbundle.sources.loading import read_source_bytes
from msgbundle.sources.map_source import freeze_entries

if TYPE_CHECKING:
    from pathlib import Path

    from babel.messages.catalog import Catalog

__all__ = ["CatalogMessageSource", "catalog_entries"]

logger = logging.getLogger(__name__)


def catalog_entries(catalog: Catalog) -> dict[str, str]:
    """Extract msgid to msgstr pairs usable for key lookup.

    Skipped entries:
        - the header entry (empty msgid)
        - entries with a msgctxt (keys carry no context)
        - fuzzy entries
        - untranslated entries (empty msgstr)

    Plural entries are keyed by their singular msgid and resolve to their
    first translated form.
    """
    entries: dict[str, str] = {}
    for message in catalog:
        msgid = message.id[0] if isinstance(message.id, tuple | list) else message.id
        if not msgid or message.context:
            continue
        if message.fuzzy:
            logger.debug("Skipping fuzzy catalog entry: %s", msgid)
            continue
        string = message.string
        if isinstance(string, tuple | list):
            string = string[0] if string else ""
        if string:
            entries[msgid] = string
    return entries


@dataclass(frozen=True, slots=True, eq=False)
class CatalogMessageSource:
    """Message source backed by the translated entries of a gettext catalog.

    The catalog is read once; later changes to a Catalog object are not
    seen by a source built from it.

    Example:
        >>> source = CatalogMessageSource.from_po("locales/de/messages.po")
        >>> source.lookup("Hello")
        'Hallo'

    Attributes:
        entries: Read-only msgid to msgstr mapping
        locale: Catalog locale as a string, if the catalog declares one
        source_path: File the catalog was loaded from, if any
    """

    entries: Mapping[str, str] = field(default_factory=dict)
    locale: str | None = None
    source_path: str | None = None

    def __post_init__(self) -> None:
        """Replace entries with a validated read-only copy."""
        object.__setattr__(self, "entries", freeze_entries(self.entries))

    @classmethod
    def from_catalog(
        cls,
        catalog: Catalog,
        *,
        source_path: str | None = None,
    ) -> CatalogMessageSource:
        """Snapshot a Babel Catalog.

        Raises:
            BabelImportError: If Babel is not installed
            InvalidArgumentError: If catalog is None or not a Catalog
        """
        catalog_class = get_catalog_class()
        if catalog is None:
            raise InvalidArgumentError(ErrorTemplate.null_argument("catalog"))
        if not isinstance(catalog, catalog_class):
            raise InvalidArgumentError(ErrorTemplate.invalid_catalog(catalog))
        locale = str(catalog.locale) if catalog.locale is not None else None
        return cls(catalog_entries(catalog), locale, source_path)

    @classmethod
    def from_po(cls, path: str | Path, *, locale: str | None = None) -> CatalogMessageSource:
        """Load a gettext .po file.

        Args:
            path: PO file to read
            locale: Locale to assign when the file header does not declare one

        Raises:
            BabelImportError: If Babel is not installed
            SourceLoadError: If the file cannot be read or parsed
        """
        pofile = get_babel_pofile()
        source_path, data = read_source_bytes(path)
        try:
            catalog = pofile.read_po(io.BytesIO(data), locale=locale, abort_invalid=True)
        except (pofile.PoFileError, UnicodeDecodeError, ValueError) as e:
            raise SourceLoadError(ErrorTemplate.catalog_malformed(source_path, str(e))) from e

        source = cls.from_catalog(catalog, source_path=source_path)
        logger.info("Loaded %d message(s) from %s", len(source.entries), source_path)
        return source

    @classmethod
    def from_mo(cls, path: str | Path) -> CatalogMessageSource:
        """Load a compiled gettext .mo file.

        Raises:
            BabelImportError: If Babel is not installed
            SourceLoadError: If the file cannot be read or parsed
        """
        mofile = get_babel_mofile()
        source_path, data = read_source_bytes(path)
        try:
            catalog = mofile.read_mo(io.BytesIO(data))
        except (OSError, struct.error, UnicodeDecodeError, ValueError) as e:
            raise SourceLoadError(ErrorTemplate.catalog_malformed(source_path, str(e))) from e

        source = cls.from_catalog(catalog, source_path=source_path)
        logger.info("Loaded %d message(s) from %s", len(source.entries), source_path)
        return source

    def lookup(self, key: str) -> str | None:
        """Return the translation for key, or None if absent or untranslated.

        Raises:
            InvalidArgumentError: If key is None
        """
        if key is None:
            raise InvalidArgumentError(ErrorTemplate.null_key())
        return self.entries.get(key)

    def __len__(self) -> int:
        return len(self.entries)

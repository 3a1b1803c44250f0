"""Concrete message sources.

Optional collaborators for MessageBundle. The bundle core imports none of
them; any object with lookup(key) -> str | None works as a source.

Submodules:
    map_source - MapMessageSource (in-memory mapping)
    properties - PropertiesMessageSource (Java .properties text/files)
    catalog    - CatalogMessageSource (gettext .po/.mo via the Babel extra)
    loading    - Size-limited file reading shared by file-backed sources

Python 3.13+. CatalogMessageSource requires Babel.
"""

from .catalog import CatalogMessageSource
from .map_source import MapMessageSource
from .properties import PropertiesMessageSource, parse_properties

__all__ = [
    "CatalogMessageSource",
    "MapMessageSource",
    "PropertiesMessageSource",
    "parse_properties",
]

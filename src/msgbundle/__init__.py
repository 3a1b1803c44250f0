"""msgbundle - immutable message bundles over pluggable message sources.

Resolves a message key by asking an ordered list of message sources and
falls back to the key itself when none has a match. No locale negotiation,
no formatting, no caching.

Public API:
    MessageBundle - Immutable bundle; resolve(key) -> message or key
    MessageBundleBuilder - Accumulates sources, builds bundle snapshots
    MessageSource - Protocol with a single lookup(key) -> str | None method

Exceptions:
    MessageBundleError - Base exception class
    InvalidArgumentError - None passed where a key or source is required
    SourceLoadError - File-backed source could not be read or parsed

Submodules:
    msgbundle.sources - MapMessageSource, PropertiesMessageSource,
                        CatalogMessageSource (Babel extra)
    msgbundle.diagnostics - Diagnostic codes and error templates
"""

# Essential Public API - Minimal exports for clean namespace
from .bundle import MessageBundle, MessageBundleBuilder, MessageSource
from .diagnostics import InvalidArgumentError, MessageBundleError, SourceLoadError

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("msgbundle")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidArgumentError",
    "MessageBundle",
    "MessageBundleBuilder",
    "MessageBundleError",
    "MessageSource",
    "SourceLoadError",
    "__version__",
]

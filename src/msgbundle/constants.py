"""Shared constants for msgbundle.

Centralized configuration constants used by the bundle core and the
file-backed message sources. Placing them here avoids circular imports
and keeps a single source of truth.

Constants are grouped by domain:
- Input limits: size bounds for file-backed sources
- Properties syntax: comment and separator characters

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    "DEFAULT_ENCODING",
    # Properties syntax
    "PROPERTIES_COMMENT_PREFIXES",
    "PROPERTIES_SEPARATORS",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum size in bytes of a file read by a file-backed source (10 MB).
# Message tables beyond this size are almost certainly not message tables.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# Encoding used when reading properties files unless the caller overrides it.
DEFAULT_ENCODING: str = "utf-8"

# ============================================================================
# PROPERTIES SYNTAX
# ============================================================================

# A logical line whose first non-blank character is one of these is a comment.
PROPERTIES_COMMENT_PREFIXES: tuple[str, ...] = ("#", "!")

# Explicit key/value separators. Unescaped whitespace also separates.
PROPERTIES_SEPARATORS: str = "=:"

"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
msgbundle exception.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (absent keys, sources, or entries)
        2000-2999: Source loading errors (unreadable or malformed files)
    """

    # Argument errors (1000-1999)
    NULL_KEY = 1001
    NULL_SOURCE = 1002
    INVALID_SOURCE = 1003
    INVALID_ENTRY = 1004
    NULL_ARGUMENT = 1005
    INVALID_CATALOG = 1006

    # Source loading errors (2000-2999)
    SOURCE_UNREADABLE = 2001
    SOURCE_TOO_LARGE = 2002
    PROPERTIES_MALFORMED_ESCAPE = 2003
    CATALOG_MALFORMED = 2004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        source_path: File the error relates to (loading errors only)
        line: 1-indexed line number within source_path
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    source_path: str | None = None
    line: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[PROPERTIES_MALFORMED_ESCAPE]: Malformed \\uXXXX escape
              --> messages.properties:12
              = help: Use exactly four hexadecimal digits after \\u

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.source_path is not None:
            location = self.source_path
            if self.line is not None:
                location = f"{location}:{self.line}"
            lines.append(f"  --> {location}")
        elif self.line is not None:
            lines.append(f"  --> line {self.line}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)

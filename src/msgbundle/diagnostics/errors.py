"""msgbundle exception hierarchy with structured diagnostics.

All exceptions store an optional Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InvalidArgumentError",
    "MessageBundleError",
    "SourceLoadError",
]


class MessageBundleError(Exception):
    """Base exception for all msgbundle errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageBundleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidArgumentError(MessageBundleError, ValueError):
    """An absent (None) or unusable value was passed where a key or source is required.

    Programmer error. Raised synchronously at the offending call and never
    wrapped or retried. Subclasses ValueError so generic argument handling
    still catches it.
    """


class SourceLoadError(MessageBundleError):
    """A file-backed message source could not be read or parsed.

    Attributes:
        source_path: Path of the offending file, if known
    """

    def __init__(self, message: str | Diagnostic, *, source_path: str | None = None) -> None:
        """Initialize SourceLoadError.

        Args:
            message: Error message string OR Diagnostic object
            source_path: Path of the offending file
        """
        super().__init__(message)
        if source_path is None and self.diagnostic is not None:
            source_path = self.diagnostic.source_path
        self.source_path = source_path

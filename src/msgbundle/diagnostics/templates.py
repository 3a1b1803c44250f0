"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    Every diagnostic msgbundle raises is created here, so messages stay
    consistent between call sites and tests can match on them.
    """

    @staticmethod
    def null_key() -> Diagnostic:
        """Lookup key is None.

        Returns:
            Diagnostic for NULL_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.NULL_KEY,
            message="cannot query null key",
            hint="Pass the message key as a string",
        )

    @staticmethod
    def null_source(operation: str) -> Diagnostic:
        """Message source passed to a builder is None.

        Args:
            operation: Builder verb that received the value ("append", "prepend")

        Returns:
            Diagnostic for NULL_SOURCE
        """
        return Diagnostic(
            code=DiagnosticCode.NULL_SOURCE,
            message=f"cannot {operation} null message source",
        )

    @staticmethod
    def null_argument(what: str, operation: str = "build a message source from") -> Diagnostic:
        """Required argument other than a key or source is None.

        Args:
            what: Description of the missing argument ("mapping", "catalog")
            operation: Verb phrase naming what could not be done

        Returns:
            Diagnostic for NULL_ARGUMENT
        """
        return Diagnostic(
            code=DiagnosticCode.NULL_ARGUMENT,
            message=f"cannot {operation} a null {what}",
        )

    @staticmethod
    def invalid_catalog(catalog: object) -> Diagnostic:
        """Object passed as a catalog is not a Babel Catalog.

        Args:
            catalog: The rejected object

        Returns:
            Diagnostic for INVALID_CATALOG
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_CATALOG,
            message=f"expected a babel Catalog, got {type(catalog).__name__}",
            hint="Load catalogs with from_po() or from_mo(), or build a babel.messages Catalog",
        )

    @staticmethod
    def invalid_source(operation: str, source: object) -> Diagnostic:
        """Object passed as a message source has no callable lookup().

        Args:
            operation: Builder verb that received the value
            source: The rejected object

        Returns:
            Diagnostic for INVALID_SOURCE
        """
        type_name = type(source).__name__
        return Diagnostic(
            code=DiagnosticCode.INVALID_SOURCE,
            message=f"cannot {operation} {type_name}: not a message source",
            hint="Message sources must define lookup(key) -> str | None",
        )

    @staticmethod
    def invalid_entry(key: object, value: object) -> Diagnostic:
        """Map entry whose key or value is not a string.

        Args:
            key: Offending key
            value: Offending value

        Returns:
            Diagnostic for INVALID_ENTRY
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_ENTRY,
            message=(
                f"message entries must map str to str, got "
                f"{type(key).__name__} -> {type(value).__name__} for key {key!r}"
            ),
            hint="Convert keys and messages to strings before building the source",
        )

    @staticmethod
    def source_unreadable(source_path: str, reason: str) -> Diagnostic:
        """File-backed source could not be read.

        Args:
            source_path: Path of the file
            reason: Underlying OS or decoding error text

        Returns:
            Diagnostic for SOURCE_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_UNREADABLE,
            message=f"cannot read message source: {reason}",
            source_path=source_path,
        )

    @staticmethod
    def source_too_large(source_path: str, size: int, limit: int) -> Diagnostic:
        """File-backed source exceeds MAX_SOURCE_SIZE.

        Args:
            source_path: Path of the file
            size: Actual size in bytes
            limit: Configured limit in bytes

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=f"message source is {size} bytes, limit is {limit} bytes",
            hint="Split the message table into several sources",
            source_path=source_path,
        )

    @staticmethod
    def malformed_unicode_escape(source_path: str | None, line: int) -> Diagnostic:
        """Properties value contains a bad \\uXXXX escape.

        Args:
            source_path: Path of the file, if any
            line: 1-indexed physical line where the logical line starts

        Returns:
            Diagnostic for PROPERTIES_MALFORMED_ESCAPE
        """
        return Diagnostic(
            code=DiagnosticCode.PROPERTIES_MALFORMED_ESCAPE,
            message="Malformed \\uXXXX escape",
            hint="Use exactly four hexadecimal digits after \\u",
            source_path=source_path,
            line=line,
        )

    @staticmethod
    def catalog_malformed(source_path: str, reason: str) -> Diagnostic:
        """Gettext catalog could not be parsed.

        Args:
            source_path: Path of the catalog file
            reason: Parser error text

        Returns:
            Diagnostic for CATALOG_MALFORMED
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_MALFORMED,
            message=f"cannot parse message catalog: {reason}",
            source_path=source_path,
        )

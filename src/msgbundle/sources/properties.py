"""Properties-file message source.

Parses the line-oriented key/value format of Java .properties files:

    # comment
    ! also a comment
    greeting = Hello
    farewell: Goodbye
    multi.line = first part \\
                 second part
    unicode = caf\\u00e9

Key and value are separated by the first unescaped '=', ':' or whitespace.
A line ending in an odd number of backslashes continues on the next line.
The last definition of a duplicated key wins.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
import string
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from msgbundle.constants import (
    DEFAULT_ENCODING,
    PROPERTIES_COMMENT_PREFIXES,
    PROPERTIES_SEPARATORS,
)
from msgbundle.diagnostics import ErrorTemplate, InvalidArgumentError, SourceLoadError
from msgbundle.sources.loading import read_source_bytes
from msgbundle.sources.map_source import freeze_entries

__all__ = ["PropertiesMessageSource", "parse_properties"]

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Whitespace as defined by the properties format (not str.isspace()).
_WHITESPACE = " \t\f"

_ESCAPES: dict[str, str] = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "f": "\f",
}


def _continues(line: str) -> bool:
    """Check whether line ends in an odd number of backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (first physical line number, logical line) for every entry line.

    Blank lines and comment lines are skipped. Continuation lines are joined
    with their leading whitespace removed.
    """
    physical = _LINE_BREAK.split(text)
    index = 0
    while index < len(physical):
        line_no = index + 1
        line = physical[index].lstrip(_WHITESPACE)
        index += 1
        if not line or line.startswith(PROPERTIES_COMMENT_PREFIXES):
            continue

        parts: list[str] = []
        while _continues(line):
            parts.append(line[:-1])
            if index >= len(physical):
                line = ""
                break
            line = physical[index].lstrip(_WHITESPACE)
            index += 1
        parts.append(line)
        yield line_no, "".join(parts)


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    end = 0
    length = len(line)
    while end < length:
        char = line[end]
        if char == "\\":
            end += 2
            continue
        if char in PROPERTIES_SEPARATORS or char in _WHITESPACE:
            break
        end += 1

    rest = line[end:].lstrip(_WHITESPACE)
    if rest and rest[0] in PROPERTIES_SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return line[:end], rest


def _unescape(raw: str, source_path: str | None, line_no: int) -> str:
    """Decode backslash escapes in a key or value.

    Raises:
        SourceLoadError: If a \\u escape is not followed by four hex digits
    """
    if "\\" not in raw:
        return raw

    out: list[str] = []
    index = 0
    length = len(raw)
    while index < length:
        char = raw[index]
        index += 1
        if char != "\\":
            out.append(char)
            continue
        if index >= length:
            break
        char = raw[index]
        index += 1
        if char == "u":
            digits = raw[index : index + 4]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise SourceLoadError(
                    ErrorTemplate.malformed_unicode_escape(source_path, line_no)
                )
            out.append(chr(int(digits, 16)))
            index += 4
        else:
            out.append(_ESCAPES.get(char, char))

    # \uXXXX escapes encode UTF-16 code units; join surrogate pairs.
    return "".join(out).encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def parse_properties(text: str, *, source_path: str | None = None) -> dict[str, str]:
    """Parse properties text into a key to message dict.

    Args:
        text: Properties source text
        source_path: Path used in diagnostics and log messages

    Returns:
        Entries in file order; duplicated keys keep their last value

    Raises:
        SourceLoadError: If an escape sequence is malformed
    """
    entries: dict[str, str] = {}
    for line_no, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key, source_path, line_no)
        if key in entries:
            logger.warning(
                "Duplicate key '%s' in %s (line %d); last value wins",
                key,
                source_path or "<text>",
                line_no,
            )
        entries[key] = _unescape(raw_value, source_path, line_no)
    return entries


@dataclass(frozen=True, slots=True, eq=False)
class PropertiesMessageSource:
    """Message source backed by a parsed .properties table.

    Example:
        >>> source = PropertiesMessageSource.from_text("greeting = Hello\\n")
        >>> source.lookup("greeting")
        'Hello'

    Attributes:
        entries: Read-only key to message mapping
        source_path: File the entries were loaded from (None for text input)
    """

    entries: Mapping[str, str] = field(default_factory=dict)
    source_path: str | None = None

    def __post_init__(self) -> None:
        """Replace entries with a validated read-only copy."""
        object.__setattr__(self, "entries", freeze_entries(self.entries))

    @classmethod
    def from_text(cls, text: str, *, source_path: str | None = None) -> PropertiesMessageSource:
        """Parse properties text.

        Raises:
            InvalidArgumentError: If text is None
            SourceLoadError: If the text contains a malformed escape
        """
        if text is None:
            raise InvalidArgumentError(ErrorTemplate.null_argument("properties text", "parse"))
        return cls(parse_properties(text, source_path=source_path), source_path)

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> PropertiesMessageSource:
        """Load and parse a properties file.

        Args:
            path: File to read
            encoding: Text encoding of the file

        Raises:
            SourceLoadError: If the file is missing, unreadable, not decodable,
                larger than MAX_SOURCE_SIZE, or contains a malformed escape
        """
        source_path, data = read_source_bytes(path)
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError as e:
            raise SourceLoadError(ErrorTemplate.source_unreadable(source_path, str(e))) from e

        source = cls.from_text(text, source_path=source_path)
        logger.info("Loaded %d message(s) from %s", len(source.entries), source_path)
        return source

    def lookup(self, key: str) -> str | None:
        """Return the message for key, or None if absent.

        Raises:
            InvalidArgumentError: If key is None
        """
        if key is None:
            raise InvalidArgumentError(ErrorTemplate.null_key())
        return self.entries.get(key)

    def __len__(self) -> int:
        return len(self.entries)

"""Shared file reading for file-backed message sources.

Python 3.13+. Zero external dependencies.
"""

from pathlib import Path

from msgbundle.constants import MAX_SOURCE_SIZE
from msgbundle.diagnostics import ErrorTemplate, SourceLoadError

__all__ = ["read_source_bytes"]


def read_source_bytes(path: str | Path) -> tuple[str, bytes]:
    """Read a message file, enforcing MAX_SOURCE_SIZE.

    Args:
        path: File to read

    Returns:
        (path as string, file contents)

    Raises:
        SourceLoadError: If the file is missing, unreadable, or too large
    """
    file_path = Path(path)
    source_path = str(file_path)
    try:
        size = file_path.stat().st_size
        if size > MAX_SOURCE_SIZE:
            raise SourceLoadError(
                ErrorTemplate.source_too_large(source_path, size, MAX_SOURCE_SIZE)
            )
        return source_path, file_path.read_bytes()
    except OSError as e:
        raise SourceLoadError(ErrorTemplate.source_unreadable(source_path, str(e))) from e

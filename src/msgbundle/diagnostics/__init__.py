"""Diagnostic system for msgbundle errors.

Provides structured error diagnostics with codes, hints, and file locations.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import InvalidArgumentError, MessageBundleError, SourceLoadError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InvalidArgumentError",
    "MessageBundleError",
    "SourceLoadError",
]

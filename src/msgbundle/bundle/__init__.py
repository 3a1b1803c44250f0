"""Immutable message bundle and its builder.

Submodules:
    protocol       - MessageSource protocol (the one collaborator contract)
    message_bundle - MessageBundle and MessageBundleBuilder

Python 3.13+. Zero external dependencies.
"""

from .message_bundle import MessageBundle, MessageBundleBuilder
from .protocol import MessageSource, is_message_source

__all__ = [
    "MessageBundle",
    "MessageBundleBuilder",
    "MessageSource",
    "is_message_source",
]

"""Filesystem provider bindings for the path feature."""

from .local_provider import LocalFilesystemProvider
from .memory_provider import InMemoryFilesystemProvider
from .session_provider import SessionDirectoryProvider

__all__ = [
    "InMemoryFilesystemProvider",
    "LocalFilesystemProvider",
    "SessionDirectoryProvider",
]

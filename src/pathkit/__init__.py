"""Immutable path values, their algebra, and a provider-backed path service."""

from pathkit.features.path import (
    SEPARATOR,
    FilesystemProvider,
    PathService,
    PathValue,
    components,
    is_absolute,
    is_relative,
    join,
    normalize,
)
from pathkit.features.path.adapters import (
    InMemoryFilesystemProvider,
    LocalFilesystemProvider,
    SessionDirectoryProvider,
)

__all__ = [
    "SEPARATOR",
    "FilesystemProvider",
    "InMemoryFilesystemProvider",
    "LocalFilesystemProvider",
    "PathService",
    "PathValue",
    "SessionDirectoryProvider",
    "components",
    "is_absolute",
    "is_relative",
    "join",
    "normalize",
]

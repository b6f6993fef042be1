"""Ports for path use cases.

Where: features/path/usecases.
What: The filesystem capability the path service consumes.
Why: Keep process and disk state behind one protocol so the service can run against local, in-memory or session-scoped backends.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FilesystemProvider(Protocol):
    """Operating-system primitives addressed by plain path text.

    Expected failures are reported through ``False`` or ``None`` results;
    implementations do not raise for missing files or denied access.
    """

    def get_current_directory(self) -> str:
        """Return the current working directory."""
        ...

    def set_current_directory(self, path: str) -> None:
        """Change the current working directory; failures surface as ``OSError``."""
        ...

    def file_exists(self, path: str) -> bool:
        """Return True if a file or directory exists at ``path``."""
        ...

    def is_directory(self, path: str) -> bool:
        """Return True if ``path`` exists and is a directory."""
        ...

    def remove_item(self, path: str) -> bool:
        """Delete a file or a whole directory tree; returns True on success."""
        ...

    def move_item(self, source: str, destination: str) -> bool:
        """Move ``source`` to ``destination``; returns True on success."""
        ...

    def read_bytes(self, path: str) -> bytes | None:
        """Return the file contents, or None when they cannot be read."""
        ...

    def write_bytes(self, path: str, data: bytes) -> bool:
        """Replace the file contents with ``data``; returns True on success."""
        ...

    def list_directory(self, path: str) -> list[str] | None:
        """Return entry names inside ``path``, or None when it cannot be listed."""
        ...

    def canonicalize(self, path: str) -> str:
        """Return the canonical spelling of ``path``."""
        ...


__all__ = ["FilesystemProvider"]

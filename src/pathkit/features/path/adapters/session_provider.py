"""Session-scoped current directory on top of another provider."""

from __future__ import annotations

from pathkit.features.path.domain import PathValue, join
from pathkit.features.path.usecases.ports import FilesystemProvider


class SessionDirectoryProvider(FilesystemProvider):
    """Track the current directory per instance instead of per process.

    Relative paths given to any operation are resolved against the tracked
    directory before being handed to ``inner``, so two sessions sharing one
    inner provider never observe each other's directory changes.
    """

    _inner: FilesystemProvider
    _current: str

    def __init__(self, inner: FilesystemProvider, *, initial: str | None = None) -> None:
        self._inner = inner
        start = initial if initial is not None else inner.get_current_directory()
        self._current = inner.canonicalize(start)
        if PathValue(self._current).is_relative():
            self._current = self._resolve(inner.get_current_directory(), self._current)

    @property
    def inner(self) -> FilesystemProvider:
        return self._inner

    def get_current_directory(self) -> str:
        return self._current

    def set_current_directory(self, path: str) -> None:
        target = self._absolute(path)
        if not self._inner.file_exists(target):
            raise FileNotFoundError(path)
        if not self._inner.is_directory(target):
            raise NotADirectoryError(path)
        self._current = target

    def file_exists(self, path: str) -> bool:
        return self._inner.file_exists(self._absolute(path))

    def is_directory(self, path: str) -> bool:
        return self._inner.is_directory(self._absolute(path))

    def remove_item(self, path: str) -> bool:
        return self._inner.remove_item(self._absolute(path))

    def move_item(self, source: str, destination: str) -> bool:
        return self._inner.move_item(self._absolute(source), self._absolute(destination))

    def read_bytes(self, path: str) -> bytes | None:
        return self._inner.read_bytes(self._absolute(path))

    def write_bytes(self, path: str, data: bytes) -> bool:
        return self._inner.write_bytes(self._absolute(path), data)

    def list_directory(self, path: str) -> list[str] | None:
        return self._inner.list_directory(self._absolute(path))

    def canonicalize(self, path: str) -> str:
        return self._inner.canonicalize(path)

    def _absolute(self, path: str) -> str:
        # The empty path stays empty so the inner provider reports it as missing.
        if not path or PathValue(path).is_absolute():
            return path
        return self._resolve(self._current, path)

    def _resolve(self, base: str, path: str) -> str:
        return self._inner.canonicalize(join(PathValue(base), PathValue(path)).text)


__all__ = ["SessionDirectoryProvider"]

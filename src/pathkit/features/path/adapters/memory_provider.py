"""In-memory filesystem provider.

Where: features/path/adapters.
What: A dict-backed directory tree with its own current directory.
Why: Let tests and embedders run the path service without touching process or disk state.
"""

from __future__ import annotations

import posixpath

from pathkit.features.path.domain import SEPARATOR, PathValue, join, normalize
from pathkit.features.path.usecases.ports import FilesystemProvider

_ROOT = SEPARATOR


class InMemoryFilesystemProvider(FilesystemProvider):
    """Filesystem provider that keeps files and directories in dictionaries.

    Paths are resolved against the provider's own current directory, which
    starts at the root. Directory listings are returned in name order.
    """

    _files: dict[str, bytes]
    _directories: set[str]
    _current: str

    def __init__(self, *, current_directory: str = _ROOT) -> None:
        self._files = {}
        self._directories = {_ROOT}
        self._current = _ROOT
        if current_directory != _ROOT:
            self.make_directory(current_directory)
            self.set_current_directory(current_directory)

    # --- seeding helpers ---

    def make_directory(self, path: str, *, parents: bool = True) -> None:
        """Create ``path`` (and missing parents unless ``parents`` is False).

        Raises:
            FileExistsError: A file already occupies ``path`` or one of its parents.
            FileNotFoundError: The parent is missing and ``parents`` is False.
        """
        resolved = self._resolve(path)
        if resolved is None:
            raise FileNotFoundError(path)
        if resolved in self._files:
            raise FileExistsError(path)
        parent = posixpath.dirname(resolved)
        if parent not in self._directories:
            if not parents:
                raise FileNotFoundError(parent)
            self.make_directory(parent, parents=True)
        self._directories.add(resolved)

    # --- FilesystemProvider ---

    def get_current_directory(self) -> str:
        return self._current

    def set_current_directory(self, path: str) -> None:
        resolved = self._resolve(path)
        if resolved is None or not self._exists(resolved):
            raise FileNotFoundError(path)
        if resolved not in self._directories:
            raise NotADirectoryError(path)
        self._current = resolved

    def file_exists(self, path: str) -> bool:
        resolved = self._resolve(path)
        return resolved is not None and self._exists(resolved)

    def is_directory(self, path: str) -> bool:
        resolved = self._resolve(path)
        return resolved is not None and resolved in self._directories

    def remove_item(self, path: str) -> bool:
        resolved = self._resolve(path)
        if resolved is None or resolved == _ROOT:
            return False
        if resolved in self._files:
            del self._files[resolved]
            return True
        if resolved not in self._directories:
            return False
        for key in self._subtree(resolved, self._files):
            del self._files[key]
        for key in self._subtree(resolved, self._directories):
            self._directories.discard(key)
        self._directories.discard(resolved)
        return True

    def move_item(self, source: str, destination: str) -> bool:
        src = self._resolve(source)
        dst = self._resolve(destination)
        if src is None or dst is None or src == _ROOT:
            return False
        if not self._exists(src) or self._exists(dst):
            return False
        if posixpath.dirname(dst) not in self._directories:
            return False
        if src in self._files:
            self._files[dst] = self._files.pop(src)
            return True
        if dst.startswith(src + SEPARATOR):
            return False
        for key in self._subtree(src, self._files):
            self._files[dst + key[len(src):]] = self._files.pop(key)
        for key in self._subtree(src, self._directories):
            self._directories.discard(key)
            self._directories.add(dst + key[len(src):])
        self._directories.discard(src)
        self._directories.add(dst)
        return True

    def read_bytes(self, path: str) -> bytes | None:
        resolved = self._resolve(path)
        if resolved is None:
            return None
        return self._files.get(resolved)

    def write_bytes(self, path: str, data: bytes) -> bool:
        resolved = self._resolve(path)
        if resolved is None or resolved in self._directories:
            return False
        if posixpath.dirname(resolved) not in self._directories:
            return False
        self._files[resolved] = bytes(data)
        return True

    def list_directory(self, path: str) -> list[str] | None:
        resolved = self._resolve(path)
        if resolved is None or resolved not in self._directories:
            return None
        names = {
            posixpath.basename(entry)
            for entry in (*self._files, *self._directories)
            if entry != _ROOT and posixpath.dirname(entry) == resolved
        }
        return sorted(names)

    def canonicalize(self, path: str) -> str:
        return normalize(PathValue(path)).text

    # --- internals ---

    def _resolve(self, path: str) -> str | None:
        if not path:
            return None
        candidate = PathValue(path)
        if candidate.is_relative():
            candidate = join(PathValue(self._current), candidate)
        return normalize(candidate).text

    def _exists(self, resolved: str) -> bool:
        return resolved in self._files or resolved in self._directories

    @staticmethod
    def _subtree(root: str, entries: dict[str, bytes] | set[str]) -> list[str]:
        prefix = root.rstrip(SEPARATOR) + SEPARATOR
        return [entry for entry in entries if entry.startswith(prefix)]


__all__ = ["InMemoryFilesystemProvider"]

"""
Summary: Resolve, inspect and mutate paths through a filesystem provider.
Why: Couple the pure path algebra to current-directory state in one place.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import final

from pathkit.config.settings import TEXT_ENCODING
from pathkit.features.path.domain import PathValue, as_path, is_absolute, join
from pathkit.features.path.usecases.ports import FilesystemProvider
from pathkit.platform.logging import get_logger

logger = get_logger(__name__)


@final
class PathService:
    """Filesystem-aware operations on :class:`PathValue`.

    Relative paths are resolved against the provider's current directory at
    call time, so the same value may resolve differently after a directory
    change. The service adds no locking; callers sharing a process-wide
    provider across threads must serialize directory changes themselves.
    """

    _provider: FilesystemProvider
    _encoding: str

    def __init__(
        self,
        provider: FilesystemProvider | None = None,
        *,
        encoding: str | None = None,
    ) -> None:
        if provider is None:
            from pathkit.features.path.adapters.local_provider import LocalFilesystemProvider

            provider = LocalFilesystemProvider()
        self._provider = provider
        self._encoding = encoding or TEXT_ENCODING

    @property
    def provider(self) -> FilesystemProvider:
        return self._provider

    # --- current directory ---

    def current_directory(self) -> PathValue:
        return PathValue(self._provider.get_current_directory())

    def set_current_directory(self, path: PathValue | str) -> None:
        """Change the current directory; provider errors propagate unchanged."""

        self._provider.set_current_directory(as_path(path).text)

    @contextmanager
    def change_directory(self, target: PathValue | str) -> Iterator[PathValue]:
        """Temporarily switch to ``target`` for the duration of a ``with`` block.

        The previous directory is restored on exit, including when the block
        raises; the exception is re-raised after restoration. If restoring
        fails (for example because the previous directory was removed), the
        ``OSError`` from the restore is raised with the block's exception as
        its ``__cause__``.
        """
        previous = self.current_directory()
        destination = as_path(target)
        self.set_current_directory(destination)
        logger.debug(
            "Changed directory to %s",
            destination,
            extra={"path_event": "fs.chdir.enter", "path": destination.text},
        )
        try:
            yield self.current_directory()
        except BaseException as exc:
            self._restore_directory(previous, cause=exc)
            raise
        else:
            self._restore_directory(previous)

    def _restore_directory(
        self, previous: PathValue, *, cause: BaseException | None = None
    ) -> None:
        try:
            self.set_current_directory(previous)
        except OSError as exc:
            logger.debug(
                "Could not restore directory %s: %s",
                previous,
                exc,
                extra={
                    "path_event": "fs.chdir.restore",
                    "path": previous.text,
                    "error_message": exc.strerror or str(exc),
                },
            )
            if cause is not None:
                raise exc from cause
            raise
        logger.debug(
            "Restored directory %s",
            previous,
            extra={"path_event": "fs.chdir.restore", "path": previous.text},
        )

    def scoped_change_directory(
        self, target: PathValue | str, operation: Callable[[], object]
    ) -> None:
        """Run ``operation`` with ``target`` as the current directory."""

        with self.change_directory(target):
            _ = operation()

    # --- resolution ---

    def normalize(self, path: PathValue | str) -> PathValue:
        """Canonicalize ``path`` with the provider's routine."""

        value = as_path(path)
        if not value.text:
            return value
        return PathValue(self._provider.canonicalize(value.text))

    def absolute(self, path: PathValue | str) -> PathValue:
        """Return ``path`` as a normalized absolute path.

        Args:
            path: Path to resolve.

        Returns:
            PathValue: ``normalize(path)`` when already absolute, otherwise the
            normalized join of the current directory and ``path``.
        """
        value = as_path(path)
        if is_absolute(value):
            return self.normalize(value)
        return self.normalize(join(self.current_directory(), value))

    # --- queries ---

    def exists(self, path: PathValue | str) -> bool:
        return self._provider.file_exists(as_path(path).text)

    def is_directory(self, path: PathValue | str) -> bool:
        return self._provider.is_directory(as_path(path).text)

    def delete(self, path: PathValue | str) -> bool:
        return self._provider.remove_item(as_path(path).text)

    def move(self, source: PathValue | str, destination: PathValue | str) -> bool:
        return self._provider.move_item(as_path(source).text, as_path(destination).text)

    def read_bytes(self, path: PathValue | str) -> bytes | None:
        return self._provider.read_bytes(as_path(path).text)

    def read_text(self, path: PathValue | str) -> str | None:
        """Return the decoded file contents, or None if unreadable or undecodable."""

        data = self.read_bytes(path)
        if data is None:
            return None
        try:
            return data.decode(self._encoding)
        except UnicodeDecodeError:
            return None

    def write_bytes(self, path: PathValue | str, data: bytes) -> bool:
        return self._provider.write_bytes(as_path(path).text, data)

    def write_text(self, path: PathValue | str, text: str) -> bool:
        """Encode ``text`` (replacing unencodable characters) and write it."""

        return self.write_bytes(path, text.encode(self._encoding, errors="replace"))

    def write(self, path: PathValue | str, content: bytes | str) -> bool:
        if isinstance(content, str):
            return self.write_text(path, content)
        return self.write_bytes(path, bytes(content))

    def children(
        self, path: PathValue | str, *, include_directories: bool = True
    ) -> list[PathValue]:
        """List the immediate entries of ``path`` as joined paths.

        Missing paths, regular files and unreadable directories all yield an
        empty list, indistinguishable from an empty directory. Entry order is
        the provider's.
        """
        parent = as_path(path)
        names = self._provider.list_directory(parent.text)
        if not names:
            return []

        entries = [join(parent, PathValue(name)) for name in names]
        if include_directories:
            return entries
        return [entry for entry in entries if not self.is_directory(entry)]


__all__ = ["PathService"]

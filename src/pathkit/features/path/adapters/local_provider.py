"""src/pathkit/features/path/adapters/local_provider.py
What: FilesystemProvider bound to the host operating system.
Why: Keep process and disk access in adapters while the service targets the port."""

from __future__ import annotations

import os
import posixpath
import shutil
import tempfile

from pathkit.config.settings import ATOMIC_WRITES
from pathkit.features.path.domain import PathValue, normalize
from pathkit.features.path.usecases.ports import FilesystemProvider
from pathkit.platform.logging import get_logger

logger = get_logger(__name__)


def _current_umask() -> int:
    """Return the process umask (``os.umask`` only reads it by replacing it)."""

    mask = os.umask(0)
    _ = os.umask(mask)
    return mask


class LocalFilesystemProvider(FilesystemProvider):
    """Thin wrapper around ``os`` and ``shutil``.

    ``OSError`` from queries and mutations is logged at DEBUG and reported as
    ``False``/``None``. Changing the current directory is the exception: the
    error propagates so callers notice a failed ``chdir``.
    """

    _atomic_writes: bool

    def __init__(self, *, atomic_writes: bool | None = None) -> None:
        self._atomic_writes = ATOMIC_WRITES if atomic_writes is None else atomic_writes

    def get_current_directory(self) -> str:
        return os.getcwd()

    def set_current_directory(self, path: str) -> None:
        os.chdir(path)

    def file_exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def remove_item(self, path: str) -> bool:
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except OSError as exc:
            self._log_failure("fs.remove.failed", exc, path=path)
            return False
        return True

    def move_item(self, source: str, destination: str) -> bool:
        if os.path.lexists(destination):
            self._log_failure(
                "fs.move.failed",
                FileExistsError(f"Destination exists: {destination}"),
                path=source,
                destination=destination,
            )
            return False
        try:
            _ = shutil.move(source, destination)
        except OSError as exc:
            self._log_failure("fs.move.failed", exc, path=source, destination=destination)
            return False
        return True

    def read_bytes(self, path: str) -> bytes | None:
        try:
            with open(path, "rb") as handle:
                return handle.read()
        except OSError as exc:
            self._log_failure("fs.read.failed", exc, path=path)
            return None

    def write_bytes(self, path: str, data: bytes) -> bool:
        try:
            if self._atomic_writes:
                self._write_atomically(path, data)
            else:
                with open(path, "wb") as handle:
                    _ = handle.write(data)
        except OSError as exc:
            self._log_failure("fs.write.failed", exc, path=path)
            return False
        return True

    def list_directory(self, path: str) -> list[str] | None:
        try:
            return os.listdir(path)
        except OSError as exc:
            self._log_failure("fs.list.failed", exc, path=path)
            return None

    def canonicalize(self, path: str) -> str:
        return normalize(PathValue(path)).text

    @staticmethod
    def _write_atomically(path: str, data: bytes) -> None:
        """Write ``data`` to a temporary sibling and rename it over ``path``."""

        directory = posixpath.dirname(path) or "."
        fd, temp_path = tempfile.mkstemp(
            prefix=f".{posixpath.basename(path)}.", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                _ = handle.write(data)
            # mkstemp creates 0o600 files; match what a plain open() would give.
            if os.path.exists(path):
                shutil.copymode(path, temp_path)
            else:
                os.chmod(temp_path, 0o666 & ~_current_umask())
            os.replace(temp_path, path)
        except BaseException:
            try:
                os.unlink(temp_path)
            except FileNotFoundError:
                pass
            raise

    @staticmethod
    def _log_failure(event: str, exc: OSError, **paths: str) -> None:
        logger.debug(
            "%s failed: %s",
            event,
            exc,
            extra={"path_event": event, "error_message": exc.strerror or str(exc), **paths},
        )


__all__ = ["LocalFilesystemProvider"]

"""Use cases for the path feature."""

from .path_service import PathService
from .ports import FilesystemProvider

__all__ = ["FilesystemProvider", "PathService"]

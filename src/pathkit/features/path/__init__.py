# Path: `src/pathkit/features/path/__init__.py`
# Summary: Export path feature domain, port and service symbols.
# Why: Provide a stable import surface for adapters and tests.

from .domain import (
    SEPARATOR,
    PathValue,
    as_path,
    components,
    is_absolute,
    is_relative,
    join,
    normalize,
)
from .usecases.path_service import PathService
from .usecases.ports import FilesystemProvider

__all__ = [
    "SEPARATOR",
    "FilesystemProvider",
    "PathService",
    "PathValue",
    "as_path",
    "components",
    "is_absolute",
    "is_relative",
    "join",
    "normalize",
]

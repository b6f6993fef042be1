# Path: `src/pathkit/features/path/domain/__init__.py`
# Summary: Export the path value object and its algebra.
# Why: Let the service and adapters import domain symbols from one place.

from .algebra import as_path, components, is_absolute, is_relative, join, normalize
from .path_value import SEPARATOR, PathValue

__all__ = [
    "SEPARATOR",
    "PathValue",
    "as_path",
    "components",
    "is_absolute",
    "is_relative",
    "join",
    "normalize",
]

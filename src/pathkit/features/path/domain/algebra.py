"""
Summary: Pure functions classifying, composing and normalizing path values.
Why: Keep separator-collision and canonicalization rules free of filesystem access.
"""

from __future__ import annotations

import posixpath

from .path_value import SEPARATOR, PathValue


def as_path(value: PathValue | str) -> PathValue:
    """Accept a path value or plain text; anything else is a programmer error."""

    if isinstance(value, PathValue):
        return value
    if isinstance(value, str):
        return PathValue(value)
    msg = f"Expected PathValue or str, got {type(value).__name__}"
    raise TypeError(msg)


def is_absolute(path: PathValue) -> bool:
    """Return True when the path text begins with the separator."""

    return path.text.startswith(SEPARATOR)


def is_relative(path: PathValue) -> bool:
    return not is_absolute(path)


def join(lhs: PathValue | str, rhs: PathValue | str) -> PathValue:
    """Compose two paths textually.

    Exactly one separator ends up between the operands: a doubled separator is
    collapsed, a missing one is inserted, and a single existing one is kept.
    An empty operand yields the other operand unchanged.

    Args:
        lhs: Leading path.
        rhs: Trailing path.

    Returns:
        PathValue: The composed path.
    """

    left = as_path(lhs)
    right = as_path(rhs)
    if not right.text:
        return left
    if not left.text:
        return right

    left_sep = left.text.endswith(SEPARATOR)
    right_sep = right.text.startswith(SEPARATOR)
    if left_sep and right_sep:
        return PathValue(left.text + right.text[len(SEPARATOR):])
    if not left_sep and not right_sep:
        return PathValue(left.text + SEPARATOR + right.text)
    return PathValue(left.text + right.text)


def normalize(path: PathValue) -> PathValue:
    """Collapse ``.``, ``..`` and repeated separators without touching the disk.

    Relative paths stay relative and keep any leading ``..`` segments. The
    empty path is returned as is.
    """

    if not path.text:
        return path
    normalized = posixpath.normpath(path.text)
    # POSIX keeps a leading "//" as implementation-defined; fold it to one.
    if normalized.startswith(SEPARATOR * 2):
        normalized = SEPARATOR + normalized.lstrip(SEPARATOR)
    return PathValue(normalized)


def components(path: PathValue) -> tuple[str, ...]:
    """Split the path on the separator, dropping empty segments.

    An absolute path reports the separator itself as its first component.
    """

    segments = tuple(segment for segment in path.text.split(SEPARATOR) if segment)
    if is_absolute(path):
        return (SEPARATOR, *segments)
    return segments


__all__ = ["as_path", "components", "is_absolute", "is_relative", "join", "normalize"]

"""
Summary: Immutable string-backed value object describing a filesystem path.
Why: Give every layer one hashable path type whose identity is its spelling.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

SEPARATOR: Final[str] = "/"


@dataclass(slots=True, frozen=True)
class PathValue:
    """A filesystem location expressed as text.

    The text is stored verbatim. Equality and hashing compare the text only,
    so ``PathValue("a/b")`` and ``PathValue("a/./b")`` are different values
    until one of them is normalized.
    """

    text: str = ""

    @classmethod
    def from_components(cls, segments: Iterable[str]) -> PathValue:
        """Build a path by joining ``segments`` with the separator."""

        return cls(SEPARATOR.join(segments))

    def __str__(self) -> str:
        return self.text

    def __bool__(self) -> bool:
        return self.text != ""

    def is_absolute(self) -> bool:
        from .algebra import is_absolute

        return is_absolute(self)

    def is_relative(self) -> bool:
        from .algebra import is_relative

        return is_relative(self)

    def join(self, other: PathValue | str) -> PathValue:
        """Compose this path with ``other`` (see :func:`algebra.join`)."""

        from .algebra import join

        return join(self, other)

    def normalize(self) -> PathValue:
        from .algebra import normalize

        return normalize(self)

    def components(self) -> tuple[str, ...]:
        from .algebra import components

        return components(self)


__all__ = ["SEPARATOR", "PathValue"]

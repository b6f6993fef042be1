"""
Summary: Validate classification, composition and normalization of path values.
Why: Pin the separator-collision table and the empty-operand rule of ``join``.
"""

from __future__ import annotations

import pytest

from pathkit.features.path import (
    PathValue,
    components,
    is_absolute,
    is_relative,
    join,
    normalize,
)


@pytest.mark.parametrize(
    ("text", "absolute"),
    [("/", True), ("/usr", True), ("usr", False), ("", False), ("./x", False), ("~/x", False)],
)
def test_absolute_and_relative_are_exclusive(text: str, absolute: bool) -> None:
    path = PathValue(text)
    assert is_absolute(path) is absolute
    assert is_relative(path) is (not absolute)


@pytest.mark.parametrize(
    ("lhs", "rhs", "expected"),
    [
        ("a/", "/b", "a/b"),
        ("a", "b", "a/b"),
        ("a/", "b", "a/b"),
        ("a", "/b", "a/b"),
        ("/", "/", "/"),
        ("/usr/", "/local/bin", "/usr/local/bin"),
        ("/", "etc", "/etc"),
    ],
)
def test_join_separator_policy(lhs: str, rhs: str, expected: str) -> None:
    assert join(PathValue(lhs), PathValue(rhs)).text == expected


@pytest.mark.parametrize(
    ("lhs", "rhs", "expected"),
    [
        ("a/", "", "a/"),
        ("a", "", "a"),
        ("", "b", "b"),
        ("", "/b", "/b"),
        ("", "", ""),
    ],
)
def test_join_with_empty_operand_returns_other_side(lhs: str, rhs: str, expected: str) -> None:
    """An empty operand short-circuits instead of inserting a separator."""

    assert join(PathValue(lhs), PathValue(rhs)).text == expected


def test_join_accepts_plain_strings() -> None:
    assert join("/srv", "www") == PathValue("/srv/www")


def test_join_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        _ = join(PathValue("/srv"), 42)  # type: ignore[arg-type]


def test_join_returns_new_value() -> None:
    lhs = PathValue("a")
    result = join(lhs, PathValue("b"))
    assert lhs == PathValue("a")
    assert result is not lhs


_SAMPLES = ["/usr", "usr/", "usr", "/usr/"]
_MIDDLES = ["local", "/local/", "local/", "./local/../share"]
_TAILS = ["bin", "/bin", "bin/"]


@pytest.mark.parametrize("a", _SAMPLES)
@pytest.mark.parametrize("b", _MIDDLES)
@pytest.mark.parametrize("c", _TAILS)
def test_join_is_associative_under_normalization(a: str, b: str, c: str) -> None:
    pa, pb, pc = PathValue(a), PathValue(b), PathValue(c)
    assert normalize(join(join(pa, pb), pc)) == normalize(join(pa, join(pb, pc)))


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a/./b", "a/b"),
        ("/a/../b", "/b"),
        ("a//b/", "a/b"),
        ("//a//b", "/a/b"),
        ("///", "/"),
        ("../a/./b/..", "../a"),
        ("/..", "/"),
        ("a/..", "."),
        ("", ""),
    ],
)
def test_normalize_collapses_redundant_segments(text: str, expected: str) -> None:
    assert normalize(PathValue(text)).text == expected


def test_normalize_keeps_relative_paths_relative() -> None:
    assert is_relative(normalize(PathValue("docs/../src/./main.py")))


@pytest.mark.parametrize(
    "text",
    ["", ".", "/", "//", "a/b/../../..", "/x/./y//z/", "../../up", "trailing/", "~/home/./me"],
)
def test_normalize_is_idempotent(text: str) -> None:
    once = normalize(PathValue(text))
    assert normalize(once) == once


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("/a//b/", ("/", "a", "b")),
        ("a/b", ("a", "b")),
        ("/", ("/",)),
        ("", ()),
        ("./x", (".", "x")),
    ],
)
def test_components_split_on_separator(text: str, expected: tuple[str, ...]) -> None:
    assert components(PathValue(text)) == expected

"""
Summary: Check that core path modules open with a Summary/Why header docstring.
Why: Keep the header convention from drifting as modules are edited.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT: Path = Path(__file__).resolve().parents[1]
QUOTES: str = '"""'

TARGET_MODULES: tuple[str, ...] = (
    "src/pathkit/features/path/domain/path_value.py",
    "src/pathkit/features/path/domain/algebra.py",
    "src/pathkit/features/path/usecases/path_service.py",
    "tests/features/path/test_algebra.py",
    "tests/features/path/test_path_service.py",
)


def _header_lines(relative: str) -> list[str]:
    lines = [line.rstrip() for line in (REPO_ROOT / relative).read_text(encoding="utf-8").splitlines()]
    while lines and not lines[0]:
        _ = lines.pop(0)
    return lines[:4]


@pytest.mark.parametrize("relative", TARGET_MODULES)
def test_module_header_has_summary_and_why(relative: str) -> None:
    header = _header_lines(relative)

    assert len(header) == 4, f"{relative} header is too short"
    opening, summary, why, closing = header
    assert opening == QUOTES and closing == QUOTES, f"{relative} header must be a bare docstring"
    assert summary.startswith("Summary: ") and summary.removeprefix("Summary: ").strip()
    assert why.startswith("Why: ") and why.removeprefix("Why: ").strip()

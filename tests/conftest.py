"""Shared test fixtures for commentlint.

Fixtures defined here are available to all tests in the suite without
needing an explicit import.
"""
from __future__ import annotations

from collections.abc import Callable

import pytest

from commentlint.ast.nodes import Comment, CommentKind, Position


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "commentlint"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string."""
    return "0.1.0"


@pytest.fixture()
def make_comments() -> Callable[..., list[Comment]]:
    """Build line comments from ``//``-prefixed source lines, one per line."""

    def _make(*lines: str) -> list[Comment]:
        return [
            Comment(
                text=line[2:] if line.startswith("//") else line,
                location=Position(line=index + 1, column=0),
                kind=CommentKind.LINE,
            )
            for index, line in enumerate(lines)
        ]

    return _make

"""commentlint — comment style linter with textblock-aware capitalization.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import commentlint

    comments = commentlint.load_comments("app.comments.json")
    findings = commentlint.lint(comments, {"requireCapitalizedComments": True})

    commentlint.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from commentlint.ast.nodes import Comment
    from commentlint.linter.diagnostics import Diagnostic


def load_comments(path: str | Path) -> list["Comment"]:
    """Read a JSON or YAML comment dump into ``Comment`` records.

    Raises
    ------
    commentlint.ast.CommentFormatError
        If the dump is malformed.
    """
    from commentlint.ast.serializer import load_comments as _load_comments

    return _load_comments(path)


def lint(
    comments: Sequence["Comment"],
    options: Mapping[str, object] | None = None,
) -> list["Diagnostic"]:
    """Lint one file's comments.

    Parameters
    ----------
    comments:
        The file's comments, in source order.
    options:
        Rule options; ``None`` enables every built-in rule.

    Raises
    ------
    commentlint.linter.ConfigurationError
        If ``options`` is invalid.
    """
    from commentlint.linter.linter import lint as _lint

    return _lint(comments, options)


__all__ = ["__version__", "load_comments", "lint"]

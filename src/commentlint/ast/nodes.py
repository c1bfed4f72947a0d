"""Comment records consumed by commentlint rules.

Comments are produced by an external parser and handed to the linter
already extracted.  Every record is a frozen dataclass so that rules can
never mutate their input.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Source location
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Position:
    """Start position of a comment within its source file.

    Parameters
    ----------
    line:
        1-based line number.
    column:
        0-based column number.
    """

    line: int
    column: int

    def __repr__(self) -> str:
        return f"Position({self.line}:{self.column})"

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"

    @classmethod
    def unknown(cls) -> "Position":
        """Return a sentinel position used when location info is unavailable."""
        return cls(line=0, column=0)


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class CommentKind(Enum):
    """Syntactic form of a comment, as reported by the parser."""

    LINE = "Line"
    BLOCK = "Block"


@dataclass(frozen=True, slots=True)
class Comment:
    """A single comment token.

    Parameters
    ----------
    text:
        Raw comment body without the comment delimiters, but with any
        decoration (``*`` continuation markers, newlines) left intact.
    location:
        Where the comment starts.
    kind:
        Line or block comment.
    """

    text: str
    location: Position = field(default_factory=Position.unknown)
    kind: CommentKind = CommentKind.LINE

"""Capitalized-comment rule with textblock exemption.

Requires the first letter of a comment to be uppercase, unless the
comment continues a textblock.

Option: ``requireCapitalizedComments: true`` (no other value is valid).

Valid::

    // Valid
    //Valid

    /**
     * Valid
     */

    // A textblock is a set of lines
    // that starts with a capitalized letter
    // and has one or more non-capitalized lines
    // afterwards

    // 123 or any non-alphabetical starting character
    // @are also valid anywhere

Invalid::

    // invalid
    /** invalid */

A textblock is a run of letter-starting comments opened by an
uppercase-first comment.  Any comment whose first meaningful character
is not a letter closes it.

Rule codes:
    CMT001  Comment starts with a lowercase letter outside a textblock
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto

from commentlint.ast.nodes import Comment, Position
from commentlint.linter.charclass import CharClass, classify
from commentlint.linter.diagnostics import ErrorCollector
from commentlint.linter.rules.base import ConfigurationError, Rule

MESSAGE = "Comments must start with an uppercase letter, unless it is part of a textblock"

# ECMAScript \s (WhiteSpace and LineTerminator), plus the asterisk.
_DECORATION = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff*]"
)


class TextblockState(Enum):
    """Whether the previous comments left a textblock open."""

    UNKNOWN = auto()
    OPEN = auto()
    CLOSED = auto()


@dataclass(frozen=True)
class Violation:
    """A comment that failed the capitalization check."""

    message: str
    location: Position


def strip_decoration(text: str) -> str:
    """Remove every ECMAScript whitespace and ``*`` character from ``text``.

    The byte-order mark counts as whitespace; the ASCII separators
    U+001C..U+001F and U+0085 do not.

    Asterisks are removed wherever they occur, including ones that are
    real content.
    """
    return _DECORATION.sub("", text)


def first_char_class(text: str) -> CharClass:
    """Classify the first meaningful character of a comment body."""
    return classify(strip_decoration(text)[:1])


def step(state: TextblockState, comment: Comment) -> tuple[TextblockState, Violation | None]:
    """Advance the textblock state machine by one comment.

    Returns the state to carry into the next comment and the violation
    for this comment, if any.
    """
    char_class = first_char_class(comment.text)
    if char_class is CharClass.NOT_LETTER:
        return TextblockState.CLOSED, None

    is_upper = char_class is CharClass.UPPERCASE_LETTER
    in_textblock = state is TextblockState.OPEN

    violation = None
    if not (is_upper or in_textblock):
        violation = Violation(message=MESSAGE, location=comment.location)

    # An open textblock stays open for any letter; otherwise only an
    # uppercase letter opens one.
    if in_textblock or is_upper:
        return TextblockState.OPEN, violation
    return TextblockState.CLOSED, violation


def scan(comments: Iterable[Comment]) -> Iterator[Violation]:
    """Yield the violations of one file's comments, in comment order."""
    state = TextblockState.UNKNOWN
    for comment in comments:
        state, violation = step(state, comment)
        if violation is not None:
            yield violation


class RequireCapitalizedComments(Rule):
    """Comments must start with an uppercase letter unless inside a textblock."""

    option_name = "requireCapitalizedComments"
    code = "CMT001"
    description = "Require comments to start with an uppercase letter, except inside textblocks"

    def configure(self, value: object) -> None:
        if value is not True:
            raise ConfigurationError(
                f"{self.option_name} option requires a value of true or should be removed"
            )

    def check(self, comments: Sequence[Comment], errors: ErrorCollector) -> None:
        for violation in scan(comments):
            errors.add(violation.message, violation.location)

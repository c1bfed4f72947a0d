"""Unicode letter classification for comment rules.

Classification uses the general category table shipped with the
interpreter (``unicodedata``), so non-Latin scripts are handled the same
way as ASCII.

Categories counted as letters:
    Lu  Uppercase Letter
    Ll  Lowercase Letter
    Lt  Titlecase Letter
    Lm  Modifier Letter
    Lo  Other Letter

Only ``Lu`` counts as uppercase; the other four are "letter but not
uppercase" for rule purposes.
"""
from __future__ import annotations

import unicodedata
from enum import Enum, auto

_LETTER_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo"})
_UPPERCASE_CATEGORY = "Lu"


class CharClass(Enum):
    """How a single character is treated by capitalization rules."""

    NOT_LETTER = auto()
    LOWERCASE_LETTER = auto()
    UPPERCASE_LETTER = auto()


def _category(char: object) -> str | None:
    if not isinstance(char, str) or len(char) != 1:
        return None
    return unicodedata.category(char)


def is_letter(char: object) -> bool:
    """Return True if ``char`` is a single code point in any letter category."""
    return _category(char) in _LETTER_CATEGORIES


def is_uppercase(char: object) -> bool:
    """Return True if ``char`` is a single code point in category ``Lu``."""
    return _category(char) == _UPPERCASE_CATEGORY


def classify(char: object) -> CharClass:
    """Classify ``char``; anything but exactly one code point is NOT_LETTER."""
    category = _category(char)
    if category not in _LETTER_CATEGORIES:
        return CharClass.NOT_LETTER
    if category == _UPPERCASE_CATEGORY:
        return CharClass.UPPERCASE_LETTER
    return CharClass.LOWERCASE_LETTER

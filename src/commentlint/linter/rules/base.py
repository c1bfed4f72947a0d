"""Base class shared by all commentlint rules.

A rule has two phases:

``configure(value)``
    Called once at linter setup with the rule's option value.  Invalid
    values raise ``ConfigurationError``; nothing is raised later.
``check(comments, errors)``
    Called once per file.  Violations are reported through
    ``errors.add(message, location)`` and never raised.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar

from commentlint.ast.nodes import Comment
from commentlint.linter.diagnostics import DiagnosticSeverity, ErrorCollector


class ConfigurationError(ValueError):
    """Raised at setup time when a rule option or config file is invalid."""


class Rule(ABC):
    """Abstract comment rule.

    Subclasses set ``option_name`` (the key used in config files) and
    ``code`` (the diagnostic code of their findings).
    """

    option_name: ClassVar[str]
    code: ClassVar[str]
    severity: ClassVar[DiagnosticSeverity] = DiagnosticSeverity.ERROR
    description: ClassVar[str] = ""

    @abstractmethod
    def configure(self, value: object) -> None:
        """Validate and apply the rule's option value."""

    @abstractmethod
    def check(self, comments: Sequence[Comment], errors: ErrorCollector) -> None:
        """Report every violation in ``comments`` through ``errors``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(option_name={self.option_name!r})"

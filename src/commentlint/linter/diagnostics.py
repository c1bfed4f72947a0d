"""Diagnostic types for the commentlint linter.

Rules report violations through an ``ErrorCollector`` (the
``errors.add(message, location)`` capability); the linter turns the
collected entries into ``Diagnostic`` objects.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from commentlint.ast.nodes import Position


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostics, aligned with LSP conventions."""

    ERROR = auto()
    WARNING = auto()
    INFORMATION = auto()
    HINT = auto()


@dataclass(frozen=True)
class Diagnostic:
    """A single lint finding.

    Parameters
    ----------
    severity:
        How serious this finding is.
    code:
        A short machine-readable identifier, e.g. ``"CMT001"``.
    message:
        Human-readable description of the problem.
    location:
        Start position of the offending comment.
    rule:
        Option name of the rule that produced this diagnostic.
    """

    severity: DiagnosticSeverity
    code: str
    message: str
    location: Position
    rule: str = field(default="")

    def __str__(self) -> str:
        return f"[{self.code}] {self.severity.name} at {self.location}: {self.message}"

    @property
    def is_error(self) -> bool:
        """Return True if this diagnostic should fail a lint run."""
        return self.severity == DiagnosticSeverity.ERROR

    def to_dict(self) -> dict[str, object]:
        return {
            "severity": self.severity.name,
            "code": self.code,
            "message": self.message,
            "line": self.location.line,
            "column": self.location.column,
            "rule": self.rule,
        }


class ErrorCollector:
    """Ordered sink for the violations reported by one rule.

    Parameters
    ----------
    rule:
        Option name of the rule the collector is handed to.
    code:
        Diagnostic code stamped on every collected entry.
    severity:
        Severity stamped on every collected entry.
    """

    def __init__(
        self,
        rule: str,
        code: str,
        severity: DiagnosticSeverity = DiagnosticSeverity.ERROR,
    ) -> None:
        self._rule = rule
        self._code = code
        self._severity = severity
        self._diagnostics: list[Diagnostic] = []

    def add(self, message: str, location: Position) -> None:
        """Record one violation at ``location``."""
        self._diagnostics.append(
            Diagnostic(
                severity=self._severity,
                code=self._code,
                message=message,
                location=location,
                rule=self._rule,
            )
        )

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Return the collected diagnostics in report order."""
        return list(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

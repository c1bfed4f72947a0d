"""commentlint linter module.

Exports the ``CommentLinter`` class and the ``lint`` convenience function.
"""
from __future__ import annotations

from commentlint.linter.diagnostics import Diagnostic, DiagnosticSeverity, ErrorCollector
from commentlint.linter.linter import CommentLinter, lint
from commentlint.linter.rules import RULES, ConfigurationError

__all__ = [
    "CommentLinter",
    "lint",
    "RULES",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticSeverity",
    "ErrorCollector",
]

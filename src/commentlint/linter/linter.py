"""commentlint linter: runs configured comment rules over one file.

Rules are configured once, when the ``CommentLinter`` is constructed;
configuration errors surface there and never during ``lint``.

Usage
-----
::

    from commentlint.ast import load_comments
    from commentlint.linter import CommentLinter

    linter = CommentLinter({"requireCapitalizedComments": True})
    diagnostics = linter.lint(load_comments("app.comments.json"))
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from commentlint.ast.nodes import Comment, Position
from commentlint.linter.diagnostics import Diagnostic, DiagnosticSeverity, ErrorCollector
from commentlint.linter.rules import RULES
from commentlint.linter.rules.base import ConfigurationError, Rule
from commentlint.plugins.registry import RuleRegistry

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "CMT999"


class CommentLinter:
    """Configurable comment linter.

    Parameters
    ----------
    options:
        Mapping of rule option names to option values.  ``None`` enables
        every registered rule with the value ``True``.  An option whose
        value is ``None`` is left unconfigured.
    registry:
        Where option names are looked up.  Defaults to the built-in rules.

    Raises
    ------
    ConfigurationError
        If an option names no registered rule or a rule rejects its value.
    """

    def __init__(
        self,
        options: Mapping[str, object] | None = None,
        registry: RuleRegistry | None = None,
    ) -> None:
        self._registry = registry if registry is not None else RULES
        if options is None:
            options = {name: True for name in self._registry.list_rules()}
        self._rules: list[Rule] = []
        for name, value in options.items():
            if value is None:
                logger.debug("Rule %r removed by configuration", name)
                continue
            self.add_rule(self._configure(name, value))

    def _configure(self, name: str, value: object) -> Rule:
        if name not in self._registry:
            raise ConfigurationError(f"Unsupported rule: {name}")
        rule = self._registry.get(name)()
        rule.configure(value)
        logger.debug("Configured rule %r with %r", name, value)
        return rule

    def lint(self, comments: Sequence[Comment]) -> list[Diagnostic]:
        """Run all configured rules against one file's comments.

        Parameters
        ----------
        comments:
            The file's comments, in source order.

        Returns
        -------
        list[Diagnostic]
            All findings, sorted by line then column.  Findings at the
            same position keep their report order.
        """
        all_diagnostics: list[Diagnostic] = []
        for rule in self._rules:
            errors = ErrorCollector(rule.option_name, rule.code, rule.severity)
            try:
                rule.check(comments, errors)
            except Exception as exc:  # noqa: BLE001
                logger.exception("Rule %r failed", rule.option_name)
                all_diagnostics.append(
                    Diagnostic(
                        severity=DiagnosticSeverity.ERROR,
                        code=INTERNAL_ERROR_CODE,
                        message=f"Internal linter error in rule {rule.option_name!r}: {exc}",
                        location=Position.unknown(),
                        rule=rule.option_name,
                    )
                )
                continue
            all_diagnostics.extend(errors.diagnostics)

        all_diagnostics.sort(key=lambda d: (d.location.line, d.location.column))
        logger.debug(
            "Linted %d comment(s): %d finding(s)", len(comments), len(all_diagnostics)
        )
        return all_diagnostics

    def add_rule(self, rule: Rule) -> None:
        """Add an already-configured rule instance."""
        self._rules.append(rule)

    @property
    def rule_names(self) -> list[str]:
        """Return the option names of the configured rules, in run order."""
        return [rule.option_name for rule in self._rules]

    @property
    def rule_count(self) -> int:
        """Return the number of rules currently configured."""
        return len(self._rules)


def lint(
    comments: Sequence[Comment],
    options: Mapping[str, object] | None = None,
) -> list[Diagnostic]:
    """Convenience function: lint one file's comments.

    Parameters
    ----------
    comments:
        The file's comments, in source order.
    options:
        Rule options; ``None`` enables every built-in rule.

    Returns
    -------
    list[Diagnostic]
        Sorted list of all findings.
    """
    return CommentLinter(options).lint(comments)

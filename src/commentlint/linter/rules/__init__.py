"""commentlint rules sub-package.

``RULES`` is the registry of built-in rules, keyed by option name.
"""
from __future__ import annotations

from commentlint.linter.rules.base import ConfigurationError, Rule
from commentlint.linter.rules.capitalized_comments import RequireCapitalizedComments
from commentlint.plugins.registry import RuleRegistry

RULES = RuleRegistry(Rule, "builtin")
RULES.register(RequireCapitalizedComments)

__all__ = [
    "RULES",
    "Rule",
    "ConfigurationError",
    "RequireCapitalizedComments",
]

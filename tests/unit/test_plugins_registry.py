"""Unit tests for commentlint.plugins.registry — RuleRegistry, error types,
and entry-point loading.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import ClassVar
from unittest.mock import MagicMock, patch

import pytest

from commentlint.ast.nodes import Comment
from commentlint.linter.diagnostics import ErrorCollector
from commentlint.linter.rules import RULES, RequireCapitalizedComments
from commentlint.linter.rules.base import Rule
from commentlint.plugins.registry import (
    ENTRYPOINT_GROUP,
    RuleAlreadyRegisteredError,
    RuleNotFoundError,
    RuleRegistry,
)

_ENTRY_POINTS = "commentlint.plugins.registry.importlib.metadata.entry_points"


# ---------------------------------------------------------------------------
# Test fixtures — concrete rules
# ---------------------------------------------------------------------------


class _NoopRule(Rule):
    code: ClassVar[str] = "TEST000"

    def configure(self, value: object) -> None:
        pass

    def check(self, comments: Sequence[Comment], errors: ErrorCollector) -> None:
        pass


class RuleA(_NoopRule):
    option_name: ClassVar[str] = "ruleA"


class RuleB(_NoopRule):
    option_name: ClassVar[str] = "ruleB"


class NotARule:
    """Does NOT subclass Rule — used for error path testing."""


def _fresh_registry(name: str = "test") -> RuleRegistry:
    return RuleRegistry(Rule, name)


# ===========================================================================
# Error types
# ===========================================================================


class TestErrors:
    def test_not_found_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise RuleNotFoundError("ruleA", "builtin")

    def test_not_found_attributes(self) -> None:
        error = RuleNotFoundError("ruleA", "builtin")
        assert error.rule_name == "ruleA"
        assert error.registry_name == "builtin"
        assert "ruleA" in str(error)

    def test_already_registered_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise RuleAlreadyRegisteredError("ruleA", "builtin")

    def test_already_registered_message(self) -> None:
        assert "ruleA" in str(RuleAlreadyRegisteredError("ruleA", "builtin"))


# ===========================================================================
# Built-in registry
# ===========================================================================


class TestBuiltinRegistry:
    def test_capitalized_comments_registered(self) -> None:
        assert RULES.get("requireCapitalizedComments") is RequireCapitalizedComments

    def test_repr(self) -> None:
        assert "requireCapitalizedComments" in repr(RULES)


# ===========================================================================
# Registration
# ===========================================================================


class TestRegister:
    def test_decorator_uses_option_name(self) -> None:
        registry = _fresh_registry()

        @registry.register
        class LocalRule(_NoopRule):
            option_name: ClassVar[str] = "localRule"

        assert registry.get("localRule") is LocalRule

    def test_decorator_without_option_name_raises_type_error(self) -> None:
        registry = _fresh_registry()
        with pytest.raises(TypeError):
            registry.register(_NoopRule)

    def test_duplicate_raises_already_registered(self) -> None:
        registry = _fresh_registry()
        registry.register(RuleA)
        with pytest.raises(RuleAlreadyRegisteredError):
            registry.register_class("ruleA", RuleB)

    def test_wrong_type_raises_type_error(self) -> None:
        registry = _fresh_registry()
        with pytest.raises(TypeError):
            registry.register_class("bad", NotARule)  # type: ignore[arg-type]

    def test_non_class_raises_type_error(self) -> None:
        registry = _fresh_registry()
        with pytest.raises(TypeError):
            registry.register_class("bad", "not_a_class")  # type: ignore[arg-type]

    def test_logs_debug_message(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        with caplog.at_level(logging.DEBUG, logger="commentlint.plugins.registry"):
            registry.register(RuleA)
        assert "ruleA" in caplog.text


# ===========================================================================
# Deregistration and lookup
# ===========================================================================


class TestLookup:
    def test_deregister_removes_rule(self) -> None:
        registry = _fresh_registry()
        registry.register(RuleA)
        registry.deregister("ruleA")
        assert "ruleA" not in registry
        assert len(registry) == 0

    def test_deregister_missing_raises_not_found(self) -> None:
        with pytest.raises(RuleNotFoundError):
            _fresh_registry().deregister("ghost")

    def test_get_missing_raises_not_found(self) -> None:
        with pytest.raises(RuleNotFoundError):
            _fresh_registry().get("ghost")

    def test_list_rules_sorted(self) -> None:
        registry = _fresh_registry()
        registry.register(RuleB)
        registry.register(RuleA)
        assert registry.list_rules() == ["ruleA", "ruleB"]

    def test_copy_is_independent(self) -> None:
        registry = _fresh_registry()
        registry.register(RuleA)
        clone = registry.copy()
        clone.register(RuleB)
        assert registry.list_rules() == ["ruleA"]
        assert clone.list_rules() == ["ruleA", "ruleB"]


# ===========================================================================
# load_entrypoints
# ===========================================================================


class TestLoadEntrypoints:
    def test_default_group(self) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[]) as entry_points:
            registry.load_entrypoints()
        entry_points.assert_called_once_with(group=ENTRYPOINT_GROUP)

    def test_registers_valid_rule(self) -> None:
        registry = _fresh_registry()
        mock_ep = MagicMock()
        mock_ep.name = "dynamicRule"
        mock_ep.load.return_value = RuleA

        with patch(_ENTRY_POINTS, return_value=[mock_ep]):
            registry.load_entrypoints()

        assert registry.get("dynamicRule") is RuleA

    def test_skips_already_registered(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        registry.register(RuleA)
        mock_ep = MagicMock()
        mock_ep.name = "ruleA"

        with patch(_ENTRY_POINTS, return_value=[mock_ep]):
            with caplog.at_level(logging.DEBUG, logger="commentlint.plugins.registry"):
                registry.load_entrypoints()

        mock_ep.load.assert_not_called()
        assert len(registry) == 1

    def test_load_failure_is_logged_and_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        mock_ep = MagicMock()
        mock_ep.name = "brokenRule"
        mock_ep.load.side_effect = ImportError("no module named broken")

        with patch(_ENTRY_POINTS, return_value=[mock_ep]):
            with caplog.at_level(logging.ERROR, logger="commentlint.plugins.registry"):
                registry.load_entrypoints()

        assert len(registry) == 0
        assert "brokenRule" in caplog.text

    def test_wrong_type_is_logged_and_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        mock_ep = MagicMock()
        mock_ep.name = "notARule"
        mock_ep.load.return_value = NotARule

        with patch(_ENTRY_POINTS, return_value=[mock_ep]):
            with caplog.at_level(logging.WARNING, logger="commentlint.plugins.registry"):
                registry.load_entrypoints()

        assert len(registry) == 0
        assert "notARule" in caplog.text

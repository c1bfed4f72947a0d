"""Rule registry for commentlint.

Rules are registered under their ``option_name`` (the key users write in
``.commentlintrc``).  Third-party packages contribute rules by declaring
entry-points in the "commentlint.rules" group.

Example
-------
Register a rule with the decorator::

    from commentlint.linter.rules import RULES
    from commentlint.linter.rules.base import Rule

    @RULES.register
    class DisallowTodoComments(Rule):
        option_name = "disallowTodoComments"
        code = "ACME001"
        ...

Declare it in a plugin package's ``pyproject.toml``::

    [project.entry-points."commentlint.rules"]
    disallowTodoComments = "acme_rules.todo:DisallowTodoComments"

Load all installed rules via entry-points::

    RULES.load_entrypoints()
"""
from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from commentlint.linter.rules.base import Rule

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "commentlint.rules"


class RuleNotFoundError(KeyError):
    """Raised when a requested option name has no registered rule."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.rule_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Rule {name!r} is not registered in the {registry_name!r} registry. "
            "Check that the package providing it is installed and its "
            "entry-points are declared."
        )


class RuleAlreadyRegisteredError(ValueError):
    """Raised when attempting to register an option name that already exists."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.rule_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Rule {name!r} is already registered in the {registry_name!r} registry. "
            "Use a unique option name or deregister the existing rule first."
        )


class RuleRegistry:
    """Maps option names to ``Rule`` subclasses.

    Parameters
    ----------
    base_class:
        The class every registered rule must subclass.
    name:
        A human-readable name for this registry (used in error messages).
    """

    def __init__(self, base_class: type[Rule], name: str) -> None:
        self._base_class = base_class
        self._name = name
        self._rules: dict[str, type[Rule]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, cls: type[Rule]) -> type[Rule]:
        """Class decorator registering ``cls`` under its ``option_name``.

        Returns the class unchanged.
        """
        self.register_class(getattr(cls, "option_name", ""), cls)
        return cls

    def register_class(self, name: str, cls: type[Rule]) -> None:
        """Register ``cls`` under ``name``.

        Raises
        ------
        RuleAlreadyRegisteredError
            If ``name`` is already registered.
        TypeError
            If ``cls`` is not a subclass of ``base_class`` or ``name`` is empty.
        """
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                f"it must be a subclass of {self._base_class.__name__}."
            )
        if not name:
            raise TypeError(f"Cannot register {cls.__qualname__}: it has no option name.")
        if name in self._rules:
            raise RuleAlreadyRegisteredError(name, self._name)
        self._rules[name] = cls
        logger.debug(
            "Registered rule %r -> %s in registry %r",
            name,
            cls.__qualname__,
            self._name,
        )

    def deregister(self, name: str) -> None:
        """Remove a rule from the registry.

        Raises
        ------
        RuleNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._rules:
            raise RuleNotFoundError(name, self._name)
        del self._rules[name]
        logger.debug("Deregistered rule %r from registry %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[Rule]:
        """Return the rule class registered under ``name``."""
        try:
            return self._rules[name]
        except KeyError:
            raise RuleNotFoundError(name, self._name) from None

    def list_rules(self) -> list[str]:
        """Return all registered option names in alphabetical order."""
        return sorted(self._rules)

    def copy(self, name: str | None = None) -> "RuleRegistry":
        """Return an independent registry holding the same rules."""
        clone = RuleRegistry(self._base_class, name or self._name)
        clone._rules = dict(self._rules)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry(name={self._name!r}, rules={self.list_rules()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register rules declared as package entry-points.

        Entry-points whose name is already registered are skipped, so
        repeated calls are idempotent.  Entry-points that fail to import
        or register are logged and skipped.
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._rules:
                logger.debug(
                    "Entry-point %r already registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(ep.name, cls)
            except (RuleAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered "
                    "in registry %r; skipping.",
                    ep.name,
                    self._name,
                )

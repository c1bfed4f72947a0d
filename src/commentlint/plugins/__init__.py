"""Plugin subsystem for commentlint.

Third-party rules register via ``importlib.metadata`` entry-points under
the "commentlint.rules" group.

Example
-------
Declare a rule in pyproject.toml:

.. code-block:: toml

    [project.entry-points."commentlint.rules"]
    myRule = "my_package.rules:MyRule"
"""
from __future__ import annotations

from commentlint.plugins.registry import (
    ENTRYPOINT_GROUP,
    RuleAlreadyRegisteredError,
    RuleNotFoundError,
    RuleRegistry,
)

__all__ = [
    "ENTRYPOINT_GROUP",
    "RuleRegistry",
    "RuleNotFoundError",
    "RuleAlreadyRegisteredError",
]

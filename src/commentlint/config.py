"""Locating and loading commentlint configuration files.

A configuration file maps rule option names to values::

    # .commentlintrc.yaml
    requireCapitalizedComments: true

``.commentlintrc.json`` is read as JSON; ``.commentlintrc.yaml``,
``.commentlintrc.yml`` and the suffix-less ``.commentlintrc`` are read
as YAML (which also accepts JSON text).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from commentlint.linter.rules.base import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAMES: tuple[str, ...] = (
    ".commentlintrc",
    ".commentlintrc.json",
    ".commentlintrc.yaml",
    ".commentlintrc.yml",
)


def find_config(start: str | Path | None = None) -> Path | None:
    """Return the nearest config file at or above ``start``, if any.

    ``start`` defaults to the current working directory.  Within one
    directory, names are tried in ``CONFIG_FILENAMES`` order.
    """
    directory = Path(start) if start is not None else Path.cwd()
    directory = directory.resolve()
    for candidate_dir in (directory, *directory.parents):
        for filename in CONFIG_FILENAMES:
            candidate = candidate_dir / filename
            if candidate.is_file():
                logger.debug("Using config file %s", candidate)
                return candidate
    return None


def load_config(path: str | Path) -> dict[str, object]:
    """Read rule options from ``path``.

    Raises
    ------
    ConfigurationError
        If the file cannot be read, cannot be parsed, or its top level is
        not a mapping.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Cannot parse config file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping of rule options, "
            f"got {type(data).__name__}"
        )
    return {str(key): value for key, value in data.items()}

"""Comment-dump serialization for commentlint.

commentlint does not parse source code.  It reads comment dumps: the
``comments`` array an ESTree parser emits (``comment: true, loc: true``)
written out as JSON or YAML.  Each record looks like::

    {"type": "Line", "value": " Valid", "loc": {"start": {"line": 1, "column": 0}}}

Usage
-----
::

    from commentlint.ast.serializer import CommentSerializer

    serializer = CommentSerializer()
    comments = serializer.from_json(text)
    json_text = serializer.to_json(comments)
"""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path

import yaml

from commentlint.ast.nodes import Comment, CommentKind, Position

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class CommentFormatError(ValueError):
    """Raised when a comment dump does not have the expected shape."""


class CommentSerializer:
    """Converts between ``Comment`` lists and plain Python data.

    Both a bare list of records and a mapping with a ``comments`` key
    (a whole ESTree ``Program`` node) are accepted on input.  Output is
    always the bare list.
    """

    # ------------------------------------------------------------------
    # Serialization (comments → data)
    # ------------------------------------------------------------------

    def to_dict(self, comment: Comment) -> dict[str, object]:
        """Serialize one ``Comment`` to an ESTree-style record."""
        return {
            "type": comment.kind.value,
            "value": comment.text,
            "loc": {"start": self._position_to_dict(comment.location)},
        }

    def to_data(self, comments: Sequence[Comment]) -> list[dict[str, object]]:
        return [self.to_dict(c) for c in comments]

    def _position_to_dict(self, position: Position) -> dict[str, int]:
        return {"line": position.line, "column": position.column}

    # ------------------------------------------------------------------
    # Deserialization (data → comments)
    # ------------------------------------------------------------------

    def from_data(self, data: object) -> list[Comment]:
        """Deserialize a list of records, or a mapping holding ``comments``."""
        if isinstance(data, Mapping):
            if "comments" not in data:
                raise CommentFormatError("Comment dump mapping has no 'comments' key")
            data = data["comments"]
        if data is None:
            return []
        if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
            raise CommentFormatError(
                f"Comment dump must be a list of records, got {type(data).__name__}"
            )
        return [self.from_dict(record, index) for index, record in enumerate(data)]

    def from_dict(self, record: object, index: int = 0) -> Comment:
        """Deserialize one ESTree-style record.

        ``text`` is accepted as an alias of ``value``; ``type`` defaults
        to ``Line`` and a missing ``loc`` yields ``Position.unknown()``.
        """
        if not isinstance(record, Mapping):
            raise CommentFormatError(
                f"Comment record {index} must be a mapping, got {type(record).__name__}"
            )
        text = record.get("value", record.get("text"))
        if not isinstance(text, str):
            raise CommentFormatError(f"Comment record {index} has no string 'value'")

        raw_kind = record.get("type", CommentKind.LINE.value)
        try:
            kind = CommentKind(raw_kind)
        except ValueError:
            raise CommentFormatError(
                f"Comment record {index} has unknown type {raw_kind!r}"
            ) from None

        return Comment(text=text, location=self._position_from_record(record, index), kind=kind)

    def _position_from_record(self, record: Mapping[str, object], index: int) -> Position:
        loc = record.get("loc")
        if loc is None:
            return Position.unknown()
        start = loc.get("start") if isinstance(loc, Mapping) else None
        if not isinstance(start, Mapping):
            raise CommentFormatError(f"Comment record {index} has a malformed 'loc'")
        line = start.get("line", 0)
        column = start.get("column", 0)
        if not isinstance(line, int) or not isinstance(column, int):
            raise CommentFormatError(
                f"Comment record {index} has a non-integer line or column"
            )
        return Position(line=line, column=column)

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, comments: Sequence[Comment], indent: int = 2) -> str:
        """Serialize comments to a JSON string."""
        return json.dumps(self.to_data(comments), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> list[Comment]:
        """Deserialize comments from a JSON string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CommentFormatError(f"Invalid JSON comment dump: {exc}") from exc
        return self.from_data(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, comments: Sequence[Comment]) -> str:
        """Serialize comments to a YAML string."""
        return yaml.dump(self.to_data(comments), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> list[Comment]:
        """Deserialize comments from a YAML string."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise CommentFormatError(f"Invalid YAML comment dump: {exc}") from exc
        return self.from_data(data)


def load_comments(path: str | Path) -> list[Comment]:
    """Read a comment dump from ``path``, choosing the format by suffix.

    ``.yaml`` and ``.yml`` files are read as YAML, everything else as JSON.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    serializer = CommentSerializer()
    if path.suffix.lower() in _YAML_SUFFIXES:
        return serializer.from_yaml(text)
    return serializer.from_json(text)

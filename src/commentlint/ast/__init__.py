"""Comment model and comment-dump serialization.

Exports the record types and the ``CommentSerializer`` used to read
comment dumps produced by an external parser.
"""
from __future__ import annotations

from commentlint.ast.nodes import Comment, CommentKind, Position
from commentlint.ast.serializer import CommentFormatError, CommentSerializer, load_comments

__all__ = [
    "Comment",
    "CommentKind",
    "Position",
    "CommentSerializer",
    "CommentFormatError",
    "load_comments",
]

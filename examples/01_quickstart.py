#!/usr/bin/env python3
"""Example: commentlint quickstart

Lints an ESTree-style comment dump and prints the findings, showing
how textblocks exempt continuation lines from the capitalization rule.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install commentlint
"""
from __future__ import annotations

import commentlint
from commentlint.ast import CommentSerializer

COMMENT_DUMP = '''
{
  "comments": [
    {"type": "Line", "value": " A textblock is a set of lines", "loc": {"start": {"line": 1, "column": 0}}},
    {"type": "Line", "value": " that starts with a capitalized letter", "loc": {"start": {"line": 2, "column": 0}}},
    {"type": "Line", "value": " 123 closes the textblock", "loc": {"start": {"line": 4, "column": 0}}},
    {"type": "Line", "value": " so this line is flagged", "loc": {"start": {"line": 5, "column": 0}}},
    {"type": "Block", "value": "*\\n * Block comments are fine too\\n ", "loc": {"start": {"line": 7, "column": 0}}}
  ]
}
'''


def main() -> None:
    print(f"commentlint version: {commentlint.__version__}")

    comments = CommentSerializer().from_json(COMMENT_DUMP)
    findings = commentlint.lint(comments, {"requireCapitalizedComments": True})

    print(f"\n{len(comments)} comment(s), {len(findings)} finding(s):")
    for finding in findings:
        print(f"  {finding}")


if __name__ == "__main__":
    main()

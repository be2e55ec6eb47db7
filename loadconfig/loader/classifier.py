"""
Line classification.
"""

from __future__ import annotations

from enum import Enum


class LineKind(str, Enum):
    BLANK = "blank"
    COMMENT = "comment"
    DIRECTIVE = "directive"
    ASSIGNMENT = "assignment"


def classify(line: str) -> LineKind:
    """Classify an expanded line by its first character."""
    if not line:
        return LineKind.BLANK
    if line[0] == "#":
        return LineKind.COMMENT
    if line[0] == "@":
        return LineKind.DIRECTIVE
    return LineKind.ASSIGNMENT

"""
Line splitting and per-line variable expansion.
"""

from __future__ import annotations

import io
from typing import Iterator, Tuple

from ..api.variables import TemplateEngine
from ..core.errors import ExpansionError


def split_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(line_number, line)`` for every ``\\n``-delimited line.

    Numbering starts at 1. A trailing newline produces a final empty
    line, which the classifier treats as blank.
    """
    for index, line in enumerate(text.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]
        yield index, line


class WorkingBuffer:
    """
    Fixed-capacity text buffer reused for every expanded line.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("working buffer capacity must be positive")
        self.capacity = capacity
        self._buf = io.StringIO()
        self._size = 0

    def clear(self) -> None:
        self._buf.seek(0)
        self._buf.truncate()
        self._size = 0

    def write(self, text: str) -> int:
        if self._size + len(text) > self.capacity:
            raise ExpansionError(
                f"expanded line exceeds working buffer ({self.capacity} characters)"
            )
        self._size += len(text)
        return self._buf.write(text)

    def getvalue(self) -> str:
        return self._buf.getvalue()


class VariableExpander:
    """
    Runs each raw line through the template engine into the working buffer.
    """

    def __init__(self, engine: TemplateEngine, workbuf_size: int) -> None:
        self._engine = engine
        self._buffer = WorkingBuffer(workbuf_size)

    def expand(self, line: str) -> str:
        """
        Raises:
            ExpansionError: If a reference is unresolved or the result
                does not fit in the working buffer.
        """
        self._buffer.clear()
        self._engine.expand(line, self._buffer)
        return self._buffer.getvalue()

"""
Traversal state shared by every step of a load run.

``LoadContext`` owns the active (file, line, required) triple. Entering a
nested file goes through ``LoadContext.enter_file``, which saves the
caller's file, line and required flag and restores them on exit whether or
not the nested file loaded cleanly, so diagnostics always point at the
right place.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
import os
from typing import Iterator, List, Optional, Tuple

from ..core.config import DEFAULT_MAX_INCLUDE_DEPTH
from ..core.dto import BaseDTO
from ..core.errors import IncludeCycleError, IncludeDepthError, LoadError
from ..core.logging import get_logger


logger = get_logger("loadconfig.loader")


@dataclass
class LoadIssue(BaseDTO):
    """A diagnostic attributed to a file and line."""

    file: str
    line: int
    message: str


@dataclass
class LoadResult(BaseDTO):
    """Outcome of a complete load run."""

    success: bool = True
    files: List[str] = field(default_factory=list)
    assignments: List[Tuple[str, str]] = field(default_factory=list)
    descriptions: List[str] = field(default_factory=list)
    issues: List[LoadIssue] = field(default_factory=list)


class LoadContext:
    """
    Mutable state threaded through a load run.
    """

    def __init__(
        self,
        verbose: bool = False,
        max_include_depth: int = DEFAULT_MAX_INCLUDE_DEPTH,
    ) -> None:
        self.current_file: Optional[str] = None
        self.line_number = 0
        self.required = True
        self.verbose = verbose
        self.max_include_depth = max_include_depth
        self.result = LoadResult()
        # Real paths of the files currently open, outermost first.
        self._stack: List[str] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def location(self) -> Tuple[str, int]:
        return (self.current_file or "unknown", self.line_number)

    @contextmanager
    def enter_file(self, path: str, required: bool) -> Iterator[None]:
        """
        Make ``path`` the active file for the duration of the block.

        Raises:
            IncludeCycleError: If ``path`` is already being processed.
            IncludeDepthError: If nesting would exceed ``max_include_depth``.
        """
        key = os.path.realpath(path)
        if key in self._stack:
            raise IncludeCycleError(path)
        if self.depth >= self.max_include_depth:
            raise IncludeDepthError(path)

        saved = (self.current_file, self.line_number, self.required)
        self.required = required
        self.current_file = path
        self.line_number = 1
        self._stack.append(key)
        try:
            yield
        finally:
            self._stack.pop()
            self.current_file, self.line_number, self.required = saved

    def report(self, error: LoadError) -> None:
        """Log ``error`` against the active location and record it."""
        self.log_error(error.message, detail=error.detail)
        error.reported = True

    def log_error(self, message: str, detail: Optional[str] = None) -> None:
        file_name, line = self.location
        if detail:
            logger.error("%s in %s on line %d (%s)", message, file_name, line, detail)
        else:
            logger.error("%s in %s on line %d", message, file_name, line)
        self.result.issues.append(LoadIssue(file=file_name, line=line, message=message))

    def notice(self, fmt: str, *args: object) -> None:
        """Emit a progress notice when running verbose."""
        if self.verbose:
            logger.info(fmt, *args)

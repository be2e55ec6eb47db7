"""
Recursive configuration loader.

``ConfigLoader`` reads a root configuration file, expands variable
references in each line, and then either applies the line as a variable
assignment or dispatches it as a directive. ``@include``, ``@require``
and ``@includedir`` recurse depth-first into further files.

Errors inside a file never stop that file early: each failing line is
logged against its (file, line) location, remembered as the file's last
error, and processing moves on to the next line. Once every line has run
the last error is raised to whoever asked for the file, so a failure in
a nested file also marks the including line as failed.
"""

from __future__ import annotations

import os
from typing import Optional

from ..api.variables import TemplateEngine, VarStore
from ..core.config import LoaderConfig
from ..core.errors import LoadError, NotConfigFileError
from ..core.logging import get_logger
from . import reader
from .assignment import apply_assignment
from .classifier import LineKind, classify
from .context import LoadContext, LoadIssue, LoadResult
from .directives import Directive, DirectiveKind, parse_directive
from .lines import VariableExpander, split_lines


logger = get_logger("loadconfig.loader")


class ConfigLoader:
    """
    Loads configuration files into a variable store.
    """

    def __init__(
        self,
        store: VarStore,
        engine: TemplateEngine,
        config: Optional[LoaderConfig] = None,
    ) -> None:
        self.config = config or LoaderConfig()
        self._store = store
        self._expander = VariableExpander(engine, self.config.workbuf_size)

    def _new_context(self) -> LoadContext:
        return LoadContext(
            verbose=self.config.verbose,
            max_include_depth=self.config.max_include_depth,
        )

    @staticmethod
    def _fail(ctx: LoadContext, name: str, error: LoadError) -> None:
        ctx.result.success = False
        if not error.reported:
            ctx.result.issues.append(LoadIssue(file=name, line=0, message=error.message))

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------
    def load(self, path: str) -> LoadResult:
        """
        Load the root configuration file at ``path``.

        The root file is mandatory. Assignments applied before a failure
        stay applied; ``result.success`` tells whether anything failed.
        """
        ctx = self._new_context()
        try:
            self.process_file(ctx, path, required=True)
        except LoadError as e:
            self._fail(ctx, path, e)
        return ctx.result

    def load_text(self, text: str, name: str = "<string>") -> LoadResult:
        """
        Load a configuration document held in memory.

        The text must start with the ``@config`` tag, like a file would.
        """
        ctx = self._new_context()
        try:
            with ctx.enter_file(name, required=True):
                if not reader.is_config_data(text.encode("utf-8")):
                    raise NotConfigFileError(name)
                ctx.result.files.append(name)
                self.process_text(ctx, text)
        except LoadError as e:
            logger.error("Failed to process %s", name)
            self._fail(ctx, name, e)
        return ctx.result

    # ------------------------------------------------------------------
    # Files and lines
    # ------------------------------------------------------------------
    def process_file(self, ctx: LoadContext, path: str, required: bool) -> None:
        """
        Process one configuration file as a nested unit.

        A missing or non-configuration file is skipped when ``required`` is
        False and raises ``NotConfigFileError`` when it is True.

        Raises:
            LoadError: The file's last error, once all its lines have run.
        """
        logger.debug("ProcessConfigFile: %s", path)
        try:
            with ctx.enter_file(path, required):
                document = reader.load(path)
                if document is None:
                    if ctx.required:
                        raise NotConfigFileError(path)
                    return
                ctx.result.files.append(path)
                self.process_text(ctx, document.text)
        except LoadError:
            logger.error("Failed to process %s", path)
            raise

    def process_text(self, ctx: LoadContext, text: str) -> None:
        """
        Process every line of ``text`` against the active file in ``ctx``.

        Raises:
            LoadError: The last error raised by any line.
        """
        last_error: Optional[LoadError] = None
        for line_number, raw_line in split_lines(text):
            ctx.line_number = line_number
            try:
                line = self._expander.expand(raw_line)
            except LoadError as e:
                ctx.report(e)
                last_error = e
                continue

            try:
                self.process_line(ctx, line)
            except LoadError as e:
                # Already logged inside a nested file.
                if e.reported:
                    ctx.log_error("Config error")
                else:
                    ctx.report(e)
                last_error = e

        if last_error is not None:
            raise last_error

    def process_line(self, ctx: LoadContext, line: str) -> None:
        kind = classify(line)
        if kind in (LineKind.BLANK, LineKind.COMMENT):
            return
        if kind is LineKind.DIRECTIVE:
            self.process_directive(ctx, parse_directive(line))
            return

        name, value = apply_assignment(line, self._store)
        ctx.notice("Setting %s to %s", name, value)
        ctx.result.assignments.append((name, value))

    # ------------------------------------------------------------------
    # Directives
    # ------------------------------------------------------------------
    def process_directive(self, ctx: LoadContext, directive: Directive) -> None:
        if directive.kind is DirectiveKind.CONFIG:
            ctx.notice("Processing %s", directive.argument)
            ctx.result.descriptions.append(directive.argument)
        elif directive.kind is DirectiveKind.INCLUDE:
            ctx.notice("Including %s", directive.argument)
            self.process_file(ctx, directive.argument, required=False)
        elif directive.kind is DirectiveKind.REQUIRE:
            ctx.notice("Including %s", directive.argument)
            self.process_file(ctx, directive.argument, required=True)
        elif directive.kind is DirectiveKind.INCLUDE_DIR:
            self.process_directory(ctx, directive.argument)

    def process_directory(self, ctx: LoadContext, dirname: str) -> None:
        """
        Process every entry of ``dirname`` as an optional include.

        Entries that are not configuration files, or that fail to load, do
        not fail the directive. A missing directory is not an error either.
        """
        ctx.notice("Processing directory: %s", dirname)
        try:
            entries = sorted(os.listdir(dirname))
        except OSError as e:
            logger.debug("Cannot read directory %s: %s", dirname, e)
            return

        for entry in entries:
            try:
                self.process_file(ctx, os.path.join(dirname, entry), required=False)
            except LoadError as e:
                logger.debug("Ignoring %s in %s: %s", entry, dirname, e)

"""
Directive parsing.

A directive line is ``@<keyword>`` followed by whitespace and an argument:

    @config <description>
    @include <file>      optional file
    @require <file>      mandatory file
    @includedir <dir>    every file in <dir>, each optional
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.errors import DirectiveArgumentError, UnsupportedDirectiveError


class DirectiveKind(str, Enum):
    CONFIG = "@config"
    INCLUDE = "@include"
    REQUIRE = "@require"
    INCLUDE_DIR = "@includedir"


@dataclass(frozen=True)
class Directive:
    kind: DirectiveKind
    argument: str


def parse_directive(line: str) -> Directive:
    """
    Parse a directive line into a ``Directive``.

    Raises:
        UnsupportedDirectiveError: If the keyword is not a known directive.
        DirectiveArgumentError: If @require has no argument. An empty
            @include or @includedir argument names a missing target, which
            those directives tolerate.
    """
    parts = line.split(None, 1)
    keyword = parts[0] if parts else line
    argument = parts[1].strip() if len(parts) > 1 else ""

    try:
        kind = DirectiveKind(keyword)
    except ValueError:
        raise UnsupportedDirectiveError(keyword) from None

    if kind is DirectiveKind.REQUIRE and not argument:
        raise DirectiveArgumentError(keyword)

    return Directive(kind=kind, argument=argument)

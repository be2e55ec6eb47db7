"""
Variable assignment lines.

An assignment is either ``name=value`` (split at the first ``=``) or
``name value`` (split at the first run of whitespace). Leading whitespace
before the name is skipped. With ``=`` the whitespace on either side of the
delimiter is dropped, so ``name = value`` and ``name=value`` are the same
assignment.
"""

from __future__ import annotations

import re
from typing import Tuple

from ..api.variables import VarStore
from ..core.errors import InvalidAssignmentError

_WHITESPACE = re.compile(r"\s+")


def parse_assignment(line: str) -> Tuple[str, str]:
    """
    Split an assignment line into ``(name, value)``.

    Raises:
        InvalidAssignmentError: If the name or the value is empty.
    """
    text = line.lstrip()
    if "=" in text:
        name, _, value = text.partition("=")
        name, value = name.rstrip(), value.lstrip()
    else:
        parts = _WHITESPACE.split(text, maxsplit=1)
        name = parts[0]
        value = parts[1] if len(parts) > 1 else ""

    if not name or not value:
        raise InvalidAssignmentError(line)
    return name, value


def apply_assignment(line: str, store: VarStore) -> Tuple[str, str]:
    """
    Parse ``line`` and set the variable in ``store``.

    Returns:
        The ``(name, value)`` pair that was applied.

    Raises:
        InvalidAssignmentError: If the line is malformed.
        StoreError: If the store rejects the assignment.
    """
    name, value = parse_assignment(line)
    store.set_by_name(name, value)
    return name, value

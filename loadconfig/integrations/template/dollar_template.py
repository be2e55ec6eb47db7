"""
``${name}`` template engine.

Replaces each ``${name}`` reference in a line with the named variable's
current value, read from a ``VarStore``. A ``$`` that does not start a
complete ``${...}`` reference is copied through unchanged.
"""

from __future__ import annotations

import re

from ...api.variables import OutputBuffer, VarStore
from ...core.errors import ExpansionError, IntegrationError
from ...core.logging import get_logger


logger = get_logger("loadconfig.integrations.template")

_REFERENCE = re.compile(r"\$\{([^{}]*)\}")


class DollarTemplateEngine:
    """
    ``TemplateEngine`` that resolves references against a variable store.
    """

    def __init__(self, store: VarStore) -> None:
        self._store = store

    def _resolve(self, name: str) -> str:
        if not name:
            raise ExpansionError("empty variable reference")
        try:
            value = self._store.get_by_name(name)
        except IntegrationError as e:
            raise ExpansionError(f"cannot read {name}: {e}") from e
        if value is None:
            raise ExpansionError(f"unresolved reference ${{{name}}}")
        return value

    def expand(self, text: str, out: OutputBuffer) -> None:
        pos = 0
        for match in _REFERENCE.finditer(text):
            out.write(text[pos:match.start()])
            out.write(self._resolve(match.group(1).strip()))
            pos = match.end()
        out.write(text[pos:])

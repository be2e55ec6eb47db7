"""
Variable store and template engine API.

This module defines the ``VarStore`` and ``TemplateEngine`` interfaces the
loader uses to talk to its two external collaborators. The loader depends
only on these protocols, never on a concrete store or engine.
"""

from __future__ import annotations

from typing import Dict, Optional, Protocol


class VarStore(Protocol):
    """
    Interface for variable stores that receive the loader's assignments.
    """

    def get_by_name(self, name: str) -> Optional[str]:
        """
        Look up the current value of a variable.

        Returns:
            The value, or None if the store has no such variable.

        Raises:
            IntegrationError: If the store cannot be reached.
        """

        ...

    def set_by_name(self, name: str, value: str) -> None:
        """
        Set a variable to a new value.

        Raises:
            VariableNotFoundError: If the store has no such variable.
            StoreError: For any other rejection.
        """

        ...

    def snapshot(self) -> Dict[str, str]:
        """
        Return every variable the store holds, keyed by name.
        """

        ...


class OutputBuffer(Protocol):
    """Write target for template expansion."""

    def write(self, text: str) -> int:
        ...


class TemplateEngine(Protocol):
    """
    Interface for engines that substitute ``${name}`` references.
    """

    def expand(self, text: str, out: OutputBuffer) -> None:
        """
        Write ``text`` to ``out`` with every variable reference replaced
        by the variable's current value.

        Raises:
            ExpansionError: If a reference cannot be resolved, or ``out``
                refuses the write because it is full.
        """

        ...

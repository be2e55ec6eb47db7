"""
In-memory variable store.

Used by the CLI when no variable server is configured, by the development
variable server as its backing store, and by the test suite.
"""

from __future__ import annotations

import json
from typing import Dict, Mapping, Optional

from ...core.errors import ConfigError, StoreError, VariableNotFoundError
from ...core.logging import get_logger


logger = get_logger("loadconfig.integrations.varserver.memory")


class InMemoryVarStore:
    """
    Dict-backed ``VarStore``.

    In strict mode only variables that already exist can be set, which is
    how a real variable server behaves: variables are declared first and
    configuration files only assign values.
    """

    def __init__(
        self,
        variables: Optional[Mapping[str, str]] = None,
        strict: bool = False,
    ) -> None:
        self._vars: Dict[str, str] = dict(variables or {})
        self.strict = strict

    @classmethod
    def from_json_file(cls, path: str, strict: bool = False) -> "InMemoryVarStore":
        """
        Seed a store from a JSON object of name -> value.

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in variables file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read variables file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Variables file {path} must contain a JSON object")

        return cls({str(k): str(v) for k, v in data.items()}, strict=strict)

    def get_by_name(self, name: str) -> Optional[str]:
        return self._vars.get(name)

    def set_by_name(self, name: str, value: str) -> None:
        if not name:
            raise StoreError("empty variable name")
        if self.strict and name not in self._vars:
            raise VariableNotFoundError(name)
        logger.debug(f"set {name}={value!r}")
        self._vars[name] = value

    def snapshot(self) -> Dict[str, str]:
        return dict(self._vars)

"""
Common DTO utilities for loadconfig.

Load results, diagnostics and variable records are plain dataclasses. This
module provides a small mixin so they share a consistent serialization API
(``to_dict`` / ``to_json``), which the CLI and the development variable
server rely on.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
import json
from typing import Any, Dict


@dataclass
class BaseDTO:
    """
    Base mixin for DTO dataclasses.
    """

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert this DTO into a plain dict (recursively).
        """

        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

"""
Variable store integrations.

- ``InMemoryVarStore``: process-local store, optionally strict
- ``VarServerStore``: remote variable server over HTTP
"""

from .memory_store import InMemoryVarStore
from .varserver_client import VarServerStore

__all__ = ["InMemoryVarStore", "VarServerStore"]

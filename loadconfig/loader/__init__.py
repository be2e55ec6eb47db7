"""
The configuration loader.

- ``reader``: tag check and file reading
- ``lines``: line splitting, working buffer, variable expansion
- ``classifier``: blank / comment / directive / assignment
- ``directives``: ``@config``, ``@include``, ``@require``, ``@includedir``
- ``assignment``: ``name value`` and ``name=value`` lines
- ``context``: the active (file, line, required) triple and run results
- ``processor``: ``ConfigLoader``, which ties the above together
"""

from .context import LoadContext, LoadIssue, LoadResult
from .processor import ConfigLoader

__all__ = ["ConfigLoader", "LoadContext", "LoadIssue", "LoadResult"]

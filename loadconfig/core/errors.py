"""
Core error types for loadconfig.

These exceptions provide a common base for all raised errors across the
project so that callers (the loader, the CLI and the development variable
server) can handle them in a consistent way.
"""

from __future__ import annotations

from typing import Optional


class LoadConfigError(Exception):
    """
    Base exception for all loadconfig-specific errors.
    """


class ConfigError(LoadConfigError):
    """
    Raised when runtime configuration is missing, invalid, or inconsistent.
    """


class IntegrationError(LoadConfigError):
    """
    Raised when an external collaborator (variable server, template engine)
    fails or returns an unexpected response.
    """


class LoadError(LoadConfigError):
    """
    Base class for errors raised while loading configuration files.

    Every ``LoadError`` is attributed to a location (file and line) by the
    loader when it is logged; ``message`` is the short diagnostic text.
    """

    message = "Config error"

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        # Set once the error has been logged against a file and line.
        self.reported = False
        super().__init__(self.message if detail is None else f"{self.message}: {detail}")


class NotConfigFileError(LoadError):
    """
    Raised when a file is missing, unreadable, too short, or does not start
    with the ``@config`` tag.
    """

    message = "Not a configuration file"


class ExpansionError(LoadError):
    """
    Raised when variable references in a line cannot be resolved, or the
    expanded line does not fit in the working buffer.
    """

    message = "Variable Expansion error"


class InvalidAssignmentError(LoadError):
    """
    Raised for a malformed name/value line.
    """

    message = "Invalid Variable Assignment"


class StoreError(LoadError):
    """
    Raised when the variable store rejects an assignment.
    """

    message = "Variable assignment failed"


class VariableNotFoundError(StoreError):
    """
    Raised when the variable store has no variable with the given name.
    """

    message = "Variable not found"


class UnsupportedDirectiveError(LoadError):
    """
    Raised for an ``@`` token that is not a known directive.
    """

    message = "unknown directive"


class DirectiveArgumentError(LoadError):
    """
    Raised when a directive that needs a path is given none.
    """

    message = "missing directive argument"


class IncludeCycleError(LoadError):
    """
    Raised when a file includes itself, directly or transitively.
    """

    message = "include cycle"


class IncludeDepthError(LoadError):
    """
    Raised when include nesting exceeds the configured maximum depth.
    """

    message = "include nesting too deep"

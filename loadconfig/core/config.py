"""
Configuration models and loading logic for loadconfig.

The goal of this module is to provide a single place where runtime
configuration (working buffer size, verbosity, variable server URL,
logging settings, etc.) is defined and loaded from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Optional

from .errors import ConfigError


# Matches the C library BUFSIZ the original tool sized its buffer with.
DEFAULT_WORKBUF_SIZE = 8192
DEFAULT_MAX_INCLUDE_DEPTH = 32


@dataclass
class LoggingConfig:
    """
    Logging-related configuration.

    When ``log_dir`` is None only the console handler is installed.
    """

    log_dir: Optional[str] = None
    log_level: str = "WARNING"


@dataclass
class LoaderConfig:
    """
    Settings for a single load run.
    """

    workbuf_size: int = DEFAULT_WORKBUF_SIZE
    verbose: bool = False
    max_include_depth: int = DEFAULT_MAX_INCLUDE_DEPTH


@dataclass
class VarServerConfig:
    """
    Configuration for the HTTP variable server integration.
    """

    base_url: str
    timeout_seconds: int = 30
    verify_ssl: bool = True


@dataclass
class AppConfig:
    """
    Top-level configuration for loadconfig.
    """

    loader: LoaderConfig = field(default_factory=LoaderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    varserver: Optional[VarServerConfig] = None


def _int_env(name: str, default: int, minimum: int = 1) -> int:
    """
    Read an integer environment variable or raise ConfigError if malformed.
    """

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer") from exc
    if value < minimum:
        raise ConfigError(f"{name} must be at least {minimum}")
    return value


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    lowered = raw.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{name} must be a boolean (got {raw!r})")


def load_config() -> AppConfig:
    """
    Load loadconfig configuration from environment variables.

    Environment variables:
        LOADCONFIG_WORKBUF_SIZE: Working buffer size in characters (default: 8192).
        LOADCONFIG_VERBOSE: Emit progress notices (default: false).
        LOADCONFIG_MAX_INCLUDE_DEPTH: Maximum include nesting (default: 32).

        LOADCONFIG_VARSERVER_URL: Base URL of the HTTP variable server.
        LOADCONFIG_VARSERVER_TIMEOUT_SECONDS: Request timeout (default: 30).
        LOADCONFIG_VARSERVER_VERIFY_SSL: Verify TLS certificates (default: true).

        LOADCONFIG_LOG_DIR: Directory for log files (default: console only).
        LOADCONFIG_LOG_LEVEL: Root log level (default: "WARNING").

    If the variable server URL is not set, ``varserver`` is None and callers
    fall back to the in-memory store.
    """

    logging_cfg = LoggingConfig(
        log_dir=os.getenv("LOADCONFIG_LOG_DIR") or None,
        log_level=os.getenv("LOADCONFIG_LOG_LEVEL", "WARNING"),
    )

    loader_cfg = LoaderConfig(
        workbuf_size=_int_env("LOADCONFIG_WORKBUF_SIZE", DEFAULT_WORKBUF_SIZE),
        verbose=_bool_env("LOADCONFIG_VERBOSE", False),
        max_include_depth=_int_env(
            "LOADCONFIG_MAX_INCLUDE_DEPTH", DEFAULT_MAX_INCLUDE_DEPTH
        ),
    )

    varserver_cfg: Optional[VarServerConfig] = None
    varserver_url = os.getenv("LOADCONFIG_VARSERVER_URL")
    if varserver_url:
        varserver_cfg = VarServerConfig(
            base_url=varserver_url,
            timeout_seconds=_int_env("LOADCONFIG_VARSERVER_TIMEOUT_SECONDS", 30),
            verify_ssl=_bool_env("LOADCONFIG_VARSERVER_VERIFY_SSL", True),
        )

    return AppConfig(
        loader=loader_cfg,
        logging=logging_cfg,
        varserver=varserver_cfg,
    )

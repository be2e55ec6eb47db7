"""
Shared logging configuration for loadconfig.

This module centralizes logging setup so that all components
(core, loader, integrations, CLI, development server) can
log in a consistent way.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import LoggingConfig


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Configure application-wide logging.

    This function is idempotent: calling it multiple times will not
    re-add handlers if they already exist.
    """

    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()

    # Avoid configuring logging twice.
    if getattr(root_logger, "_loadconfig_logging_configured", False):
        return

    level = config.log_level.upper()
    root_logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s [%(message)s]",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Diagnostics go to stderr so stdout stays usable for --dump/--json.
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt="%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if config.log_dir:
        os.makedirs(config.log_dir, exist_ok=True)

        # Error log
        error_handler = logging.FileHandler(os.path.join(config.log_dir, "error.log"))
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)

        # Debug log
        debug_handler = logging.FileHandler(os.path.join(config.log_dir, "debug.log"))
        debug_handler.setLevel(logging.DEBUG)
        debug_handler.setFormatter(formatter)

        root_logger.addHandler(error_handler)
        root_logger.addHandler(debug_handler)

    # Mark as configured
    root_logger._loadconfig_logging_configured = True  # type: ignore[attr-defined]


def get_logger(name: str) -> logging.Logger:
    """
    Convenience helper to get a logger for a given module or subsystem.
    """

    return logging.getLogger(name)

"""
Configuration file reader.

A configuration file is plain text whose first bytes are the literal
``@config`` tag. Anything else (missing, unreadable, too short, a
directory, or a file with a different first line) is "not a
configuration file", reported as None rather than raised so optional
includes can skip it silently.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

CONFIG_TAG = b"@config"


@dataclass
class ConfigDocument:
    """The decoded content of one configuration file."""

    name: str
    text: str


def is_config_data(data: bytes) -> bool:
    return data[: len(CONFIG_TAG)] == CONFIG_TAG


def load(path: str) -> Optional[ConfigDocument]:
    """
    Read ``path`` if it is a configuration file.

    Returns:
        The document, or None if ``path`` is not a configuration file.
    """
    try:
        size = os.stat(path).st_size
    except (OSError, ValueError):
        return None
    if size < len(CONFIG_TAG):
        return None

    try:
        with open(path, "rb") as f:
            if not is_config_data(f.read(len(CONFIG_TAG))):
                return None
            data = CONFIG_TAG + f.read()
    except OSError:
        return None

    return ConfigDocument(name=path, text=data.decode("utf-8", errors="replace"))

"""
Variable server implementation of the ``VarStore`` API.
"""

from __future__ import annotations

from typing import Dict, Optional

from ...core.config import AppConfig
from ...core.errors import ConfigError, IntegrationError
from ...core.logging import get_logger
from .varserver_http import VarServerHttpClient


logger = get_logger("loadconfig.integrations.varserver.client")


class VarServerStore:
    """
    ``VarStore`` backed by a remote variable server.
    """

    def __init__(self, http_client: VarServerHttpClient) -> None:
        self._http = http_client

    @classmethod
    def from_config(cls, config: AppConfig) -> "VarServerStore":
        """
        Factory to construct a store from AppConfig.

        Raises:
            ConfigError: If the variable server is not configured.
        """
        if not config.varserver:
            raise ConfigError("Variable server configuration is not set in AppConfig")

        http_client = VarServerHttpClient(
            base_url=config.varserver.base_url,
            timeout_seconds=config.varserver.timeout_seconds,
            verify_ssl=config.varserver.verify_ssl,
        )
        return cls(http_client=http_client)

    def get_by_name(self, name: str) -> Optional[str]:
        logger.debug("Reading variable %s", name)
        record = self._http.get_variable(name)
        if record is None:
            return None
        if not isinstance(record, dict):
            raise IntegrationError(
                f"Unexpected variable server response for {name}: {record!r}"
            )
        value = record.get("value")
        return None if value is None else str(value)

    def set_by_name(self, name: str, value: str) -> None:
        logger.debug("Setting variable %s", name)
        self._http.set_variable(name, value)

    def snapshot(self) -> Dict[str, str]:
        return self._http.list_variables()

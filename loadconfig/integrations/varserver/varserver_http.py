"""
Low-level HTTP client for the variable server.

This module handles HTTP requests to the variable server's JSON API:

- ``GET /vars?name=<name>`` reads a variable
- ``PUT /vars`` sets a variable
- ``GET /vars/all`` lists every variable
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from ...core.errors import IntegrationError, StoreError, VariableNotFoundError
from ...core.logging import get_logger


logger = get_logger("loadconfig.integrations.varserver.http")


def _error_detail(response: Optional[requests.Response]) -> Optional[str]:
    """Best-effort extraction of an error message from a failed response."""
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] if response.text else None
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)[:200]


class VarServerHttpClient:
    """
    HTTP client for the variable server API.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: int = 30,
        verify_ssl: bool = True,
    ) -> None:
        """
        Initialize the variable server HTTP client.

        Args:
            base_url: Base URL of the variable server (e.g., "http://127.0.0.1:8085")
            timeout_seconds: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.verify_ssl = verify_ssl

    def _headers(self) -> Dict[str, str]:
        """Build request headers."""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def get_variable(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Read a variable.

        Returns:
            The ``{"name", "value"}`` record, or None if the server has no
            such variable.

        Raises:
            IntegrationError: If the request fails for any other reason.
        """
        url = f"{self.base_url}/vars"
        try:
            response = requests.get(
                url,
                params={"name": name},
                headers=self._headers(),
                timeout=self.timeout_seconds,
                verify=self.verify_ssl,
            )
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout reading variable {name}: {e}")
            raise IntegrationError(f"Timeout reading variable {name}: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"API request failed reading variable {name}: {e}")
            error_msg = f"API request failed: {e}"
            detail = _error_detail(getattr(e, "response", None))
            if detail:
                error_msg += f" - {detail}"
            raise IntegrationError(error_msg) from e

    def set_variable(self, name: str, value: str) -> Dict[str, Any]:
        """
        Set a variable.

        Raises:
            VariableNotFoundError: If the server answers 404.
            StoreError: If the request fails for any other reason.
        """
        url = f"{self.base_url}/vars"
        payload = {"name": name, "value": value}
        try:
            logger.debug(f"Setting variable {name} (PUT {url})")
            response = requests.put(
                url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout_seconds,
                verify=self.verify_ssl,
            )
            if response.status_code == 404:
                raise VariableNotFoundError(name)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout setting variable {name}: {e}")
            raise StoreError(f"timeout setting {name}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"API request failed setting variable {name}: {e}")
            detail = _error_detail(getattr(e, "response", None))
            raise StoreError(f"{name}: {detail or e}") from e

    def list_variables(self) -> Dict[str, str]:
        """
        List every variable the server holds.

        Raises:
            IntegrationError: If the request fails.
        """
        url = f"{self.base_url}/vars/all"
        try:
            response = requests.get(
                url,
                headers=self._headers(),
                timeout=self.timeout_seconds,
                verify=self.verify_ssl,
            )
            response.raise_for_status()
            return dict(response.json().get("variables", {}))
        except requests.exceptions.RequestException as e:
            logger.error(f"API request failed listing variables: {e}")
            raise IntegrationError(f"API request failed: {e}") from e

"""
Remote call gateway for the spreadsheet-backed catalogue endpoint.

The single chokepoint between the application and the Apps Script web app:
- ``call`` POSTs ``{action, ...payload}`` and raises ``RemoteCallError`` on
  any failure (writes raise)
- ``fetch_all`` GETs the product list and degrades to ``[]`` on any failure
  (reads degrade)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from catalogue.shared.core.configuration import RemoteConfig
from catalogue.shared.core.errors import RemoteCallError
from catalogue.shared.domain.models import Product

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch products"


class Action(str, Enum):
    """Write actions understood by the endpoint."""
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"
    CLEAR_ALL = "clearAll"
    GET_SETTINGS = "getSettings"
    UPDATE_SETTINGS = "updateSettings"


class RemoteGateway:
    """HTTP client for the catalogue endpoint."""

    def __init__(
        self,
        config: Optional[RemoteConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Create a gateway.

        Args:
            config: Endpoint configuration (defaults to ``RemoteConfig()``)
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``
        """
        self.config = config or RemoteConfig()
        self._transport = transport

    @property
    def url(self) -> str:
        return self.config.api_url

    def _client(self) -> httpx.AsyncClient:
        # One client per call; each Streamlit action runs in its own event loop
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=self.config.follow_redirects,
            transport=self._transport,
        )

    async def call(self, action: Action | str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Send a write action and return the decoded envelope.

        Raises:
            RemoteCallError: transport failure, non-2xx status, unparseable
                body, or a body carrying an ``error`` field
        """
        action_name = action.value if isinstance(action, Action) else str(action)
        body = {"action": action_name, **(payload or {})}
        logger.debug(f"RemoteGateway: POST action '{action_name}'")

        try:
            async with self._client() as client:
                response = await client.post(
                    self.url,
                    json=body,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as exc:
            logger.error(f"RemoteGateway: transport error for action '{action_name}': {exc}")
            raise RemoteCallError(str(exc)) from exc

        try:
            data = self._decode(response)
        except RemoteCallError as exc:
            logger.error(f"RemoteGateway: action '{action_name}' failed: {exc}")
            raise
        if not response.is_success or (isinstance(data, dict) and "error" in data):
            message = self._error_message(data)
            logger.error(
                f"RemoteGateway: action '{action_name}' failed "
                f"(HTTP {response.status_code}): {message}"
            )
            raise RemoteCallError(
                message,
                status_code=response.status_code,
                payload=data if isinstance(data, dict) else None,
            )

        if not isinstance(data, dict):
            # Envelope callers pick fields out of; wrap anything else
            return {"data": data}
        return data

    async def fetch_all(self) -> List[Product]:
        """Fetch every product. Returns ``[]`` on any failure."""
        logger.debug("RemoteGateway: GET product list")
        try:
            async with self._client() as client:
                response = await client.get(self.url)
            data = self._decode(response)
            if not response.is_success or (isinstance(data, dict) and "error" in data):
                message = data.get("error") if isinstance(data, dict) else None
                raise RemoteCallError(message or FETCH_FAILED_MESSAGE, status_code=response.status_code)
        except httpx.HTTPError as exc:
            logger.error(f"RemoteGateway: error fetching products: {exc}")
            return []
        except RemoteCallError as exc:
            logger.error(f"RemoteGateway: error fetching products: {exc}")
            return []

        if not isinstance(data, list):
            logger.warning(f"RemoteGateway: product list response is {type(data).__name__}, not a list")
            return []

        products: List[Product] = []
        for index, row in enumerate(data):
            if not isinstance(row, dict):
                logger.warning(f"RemoteGateway: skipping product row {index}: not an object")
                continue
            try:
                products.append(Product.model_validate(row))
            except PydanticValidationError as exc:
                logger.warning(f"RemoteGateway: skipping product row {index}: {exc}")
        logger.info(f"RemoteGateway: fetched {len(products)} product(s)")
        return products

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteCallError(
                f"Invalid response from server (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _error_message(data: Any) -> str:
        if isinstance(data, dict):
            for key in ("message", "error"):
                value = data.get(key)
                if isinstance(value, str) and value.strip():
                    return value
                if value not in (None, "", False) and not isinstance(value, str):
                    return str(value)
        return RemoteCallError.DEFAULT_MESSAGE

"""Exception hierarchy shared by every Comfort Catalogue module."""

from __future__ import annotations

from typing import Any, Dict, Optional


class CatalogueError(Exception):
    """Base class for all catalogue errors."""


class ConfigurationError(CatalogueError):
    """Raised when configuration cannot be loaded or validated."""


class ValidationError(CatalogueError):
    """Client-side validation failure. No remote call is made."""


class RemoteCallError(CatalogueError):
    """Uniform failure raised by the remote gateway.

    Covers transport errors, non-success HTTP statuses, unparseable bodies and
    server-reported ``error`` envelopes alike.
    """

    DEFAULT_MESSAGE = "API call failed"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = (message or "").strip() or self.DEFAULT_MESSAGE
        self.status_code = status_code
        self.payload = payload
        super().__init__(self.message)

"""Static credential check for the catalogue front end.

Data access itself is governed by the endpoint's own permissions; this gate
only keeps casual visitors out of the editor.
"""

from __future__ import annotations

import hmac
import logging

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "Admin"
ADMIN_PASSWORD = "MarketingComfort25"
INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class StaticAuthenticator:
    """Accepts exactly one username/password pair."""

    def __init__(self, username: str = ADMIN_USERNAME, password: str = ADMIN_PASSWORD) -> None:
        self._username = username
        self._password = password

    def check(self, username: str, password: str) -> bool:
        # Exact, case-sensitive match on both fields
        ok = hmac.compare_digest(
            str(username).encode("utf-8"), self._username.encode("utf-8")
        ) and hmac.compare_digest(str(password).encode("utf-8"), self._password.encode("utf-8"))
        if not ok:
            logger.info("StaticAuthenticator: rejected login attempt")
        return ok

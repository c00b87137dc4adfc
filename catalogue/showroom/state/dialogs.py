"""Confirmation gate and alert surface.

Both replace native browser dialogs: a confirmation holds a pending action
until the user explicitly accepts it, and an alert is a dismissible message
that may carry a follow-up screen for success-flavoured outcomes.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Literal, Optional, Union

from .screens import Screen

logger = logging.getLogger(__name__)

AlertKind = Literal["info", "success", "error"]
ConfirmAction = Callable[[], Union[Awaitable[Any], Any]]


@dataclass(frozen=True)
class Alert:
    message: str
    kind: AlertKind = "info"
    then: Optional[Screen] = None

    @property
    def is_success(self) -> bool:
        return self.kind == "success"


@dataclass(frozen=True)
class PendingConfirmation:
    message: str
    action: ConfirmAction
    danger: bool = False


class ConfirmationGate:
    """Holds at most one action awaiting an explicit yes/cancel."""

    def __init__(self) -> None:
        self._pending: Optional[PendingConfirmation] = None

    @property
    def pending(self) -> Optional[PendingConfirmation]:
        return self._pending

    @property
    def message(self) -> Optional[str]:
        return self._pending.message if self._pending else None

    def request(self, message: str, action: ConfirmAction, danger: bool = False) -> None:
        if self._pending is not None:
            logger.debug("ConfirmationGate: replacing an unanswered confirmation")
        self._pending = PendingConfirmation(message, action, danger)

    async def confirm(self) -> Any:
        """Run the pending action. No-op when nothing is pending."""
        pending, self._pending = self._pending, None
        if pending is None:
            return None
        result = pending.action()
        if inspect.isawaitable(result):
            result = await result
        return result

    def cancel(self) -> None:
        self._pending = None

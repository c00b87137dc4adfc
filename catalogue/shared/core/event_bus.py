from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, TypeAlias

EventPayload: TypeAlias = Dict[str, Any]
EventHandler: TypeAlias = Callable[[EventPayload], Awaitable[None]]


class Subscription:
    """Handle returned by :meth:`EventBus.subscribe`.

    Screens keep the handle for their lifetime and close it when they are
    left, so a hidden screen never receives another notification.
    """

    def __init__(self, bus: "EventBus", topic: str, handler: EventHandler) -> None:
        self.bus = bus
        self.topic = topic
        self.handler = handler
        self.closed = False

    def close(self) -> None:
        if not self.closed:
            self.bus.unsubscribe(self.topic, self.handler)
            self.closed = True


class EventBus:
    """In-process publish/subscribe hub.

    ``publish`` awaits every handler; when it returns, all subscribers have
    observed the change.
    A failing handler is logged and never stops the others.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._logger = logging.getLogger(__name__)

    def subscribe(self, topic: str, handler: EventHandler) -> Subscription:
        """Register an async handler for a topic."""
        if handler not in self._subscribers[topic]:
            self._subscribers[topic].append(handler)
        return Subscription(self, topic, handler)

    def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        """Remove a handler from a topic."""
        if handler in self._subscribers.get(topic, []):
            self._subscribers[topic].remove(handler)

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, []))

    async def publish(self, topic: str, payload: EventPayload) -> None:
        """Publish an event to all subscribers and wait for them."""
        handlers = list(self._subscribers.get(topic, []))
        if not handlers:
            self._logger.debug(f"No subscribers for topic '{topic}'")
            return

        self._logger.debug(f"Publishing to topic '{topic}' with {len(handlers)} handler(s)")
        await asyncio.gather(
            *(self._safe_dispatch(topic, handler, payload) for handler in handlers)
        )

    async def _safe_dispatch(
        self,
        topic: str,
        handler: EventHandler,
        payload: EventPayload,
    ) -> None:
        """Dispatch wrapper to keep one handler failure from stopping the bus."""
        handler_name = getattr(handler, "__name__", str(handler))
        try:
            await handler(payload)
        except Exception as exc:
            self._logger.exception(
                f"EventBus handler error in '{handler_name}' for topic '{topic}'",
                exc_info=exc,
            )

    def clear(self) -> None:
        """Remove all subscriptions."""
        self._subscribers.clear()

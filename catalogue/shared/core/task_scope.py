"""Screen-lifetime task scopes.

Every screen gets a :class:`TaskScope` when it is navigated to. Remote calls
issued by the screen run inside the scope; when the user leaves the screen the
scope is closed, pending tasks are cancelled and results that arrive late are
flagged stale so they are never applied to shared state.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Optional, Set, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_scope_ids = itertools.count(1)


@dataclass
class ScopedResult(Generic[T]):
    """Outcome of :meth:`TaskScope.run`."""

    value: Optional[T]
    stale: bool = False

    @property
    def usable(self) -> bool:
        return not self.stale


class TaskScope:
    """Owns the asynchronous work of one screen instance."""

    def __init__(self, name: str = "screen") -> None:
        self.name = name
        self.scope_id = next(_scope_ids)
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def active(self) -> bool:
        return not self._closed

    async def run(self, awaitable: Awaitable[T]) -> ScopedResult[T]:
        """Await a call owned by this scope.

        Returns a stale result, without raising, if the scope was closed while
        the call was in flight or was cancelled because of the close.
        """
        if self._closed:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            return ScopedResult(None, stale=True)

        task = asyncio.ensure_future(awaitable)
        self._track(task)
        try:
            value = await task
        except asyncio.CancelledError:
            if self._closed:
                logger.debug(f"Scope '{self.name}' #{self.scope_id}: call cancelled on close")
                return ScopedResult(None, stale=True)
            raise
        if self._closed:
            logger.debug(f"Scope '{self.name}' #{self.scope_id}: dropping stale result")
            return ScopedResult(None, stale=True)
        return ScopedResult(value)

    def spawn(self, awaitable: Awaitable[Any]) -> Optional[asyncio.Task]:
        """Schedule background work owned by this scope."""
        if self._closed:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            return None
        task = asyncio.ensure_future(awaitable)
        self._track(task)
        return task

    def close(self) -> None:
        """Cancel all pending work. Idempotent."""
        if self._closed:
            return
        self._closed = True
        pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.debug(f"Scope '{self.name}' #{self.scope_id}: cancelled {len(pending)} task(s)")
        self._tasks.clear()

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self._tasks if not task.done())

    def _track(self, task: asyncio.Task) -> None:
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

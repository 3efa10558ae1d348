# -*- coding: utf-8 -*-
"""Fire-and-forget observer hub used for change notifications.

Bound-method listeners are held weakly: once the object owning the method
(typically a UI surface) is gone, its notifications become no-ops. Plain
functions are held strongly until unsubscribed.
"""
from __future__ import annotations

import asyncio
import inspect
import logging
import weakref
from typing import Any, Callable, Generic, List, Set, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], Any]


class Notifier(Generic[T]):
    def __init__(self, name: str) -> None:
        self.name = name
        self._refs: List[Callable[[], Any]] = []
        self._tasks: Set[asyncio.Task] = set()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        if inspect.ismethod(listener):
            ref: Callable[[], Any] = weakref.WeakMethod(listener)
        else:
            ref = lambda: listener  # noqa: E731
        self._refs.append(ref)

        def unsubscribe() -> None:
            if ref in self._refs:
                self._refs.remove(ref)

        return unsubscribe

    def __len__(self) -> int:
        return len(self._live_listeners())

    def _live_listeners(self) -> List[Listener]:
        live = []
        for ref in list(self._refs):
            fn = ref()
            if fn is None:
                self._refs.remove(ref)
                continue
            live.append(fn)
        return live

    def publish(self, payload: T) -> None:
        """Deliver *payload* to every live listener.

        Coroutine listeners are scheduled on the running loop and not
        awaited. A failing listener is logged and never affects the
        publisher or the other listeners.
        """
        for fn in self._live_listeners():
            try:
                result = fn(payload)
            except Exception:
                logger.exception("%s listener %r failed", self.name, fn)
                continue
            if inspect.isawaitable(result):
                self._schedule(fn, result)

    def _schedule(self, fn: Listener, awaitable: Any) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(
                "%s listener %r is async but no event loop is running",
                self.name,
                fn,
            )
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            return
        task = asyncio.ensure_future(awaitable, loop=loop)
        self._tasks.add(task)

        def _done(t: asyncio.Task) -> None:
            self._tasks.discard(t)
            if t.cancelled():
                return
            exc = t.exception()
            if exc is not None:
                logger.error(
                    "%s listener %r failed",
                    self.name,
                    fn,
                    exc_info=exc,
                )

        task.add_done_callback(_done)

    async def drain(self) -> None:
        """Wait for scheduled coroutine listeners (used on shutdown/tests)."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

"""Cancellable deferred callbacks used to debounce history commits."""

from __future__ import annotations

import asyncio
import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol

Callback = Callable[[], None]
Clock = Callable[[], float]


class ScheduledHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    def schedule(self, delay: float, callback: Callback) -> ScheduledHandle:
        ...


@dataclass(order=True)
class _ManualHandle:
    due: float
    seq: int
    callback: Callback = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Tick-driven scheduler for single-threaded hosts and tests.

    Callbacks never run on their own: the host calls :meth:`run_due` from its
    event loop (for example once per frame) and every callback whose due time
    has passed fires, in due order.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock = clock or time.monotonic
        self._queue: List[_ManualHandle] = []
        self._seq = itertools.count()

    def _prune(self) -> None:
        if any(handle.cancelled for handle in self._queue):
            self._queue = [handle for handle in self._queue if not handle.cancelled]
            heapq.heapify(self._queue)

    def schedule(self, delay: float, callback: Callback) -> _ManualHandle:
        self._prune()
        handle = _ManualHandle(self._clock() + max(delay, 0.0), next(self._seq), callback)
        heapq.heappush(self._queue, handle)
        return handle

    @property
    def pending(self) -> int:
        self._prune()
        return len(self._queue)

    def run_due(self, now: Optional[float] = None) -> int:
        """Fire due callbacks and return how many ran."""

        now = self._clock() if now is None else now
        fired = 0
        while self._queue and self._queue[0].due <= now:
            handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            handle.cancelled = True
            handle.callback()
            fired += 1
        return fired


class AsyncioScheduler:
    """Schedule callbacks on an asyncio event loop via ``call_later``."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule(self, delay: float, callback: Callback) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(delay, 0.0), callback)


__all__ = ["AsyncioScheduler", "Clock", "ManualScheduler", "ScheduledHandle", "Scheduler"]

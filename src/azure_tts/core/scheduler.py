from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional, Set

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

JobFunc = Callable[[], Awaitable[None]]


class Scheduler:
    """
    Thin wrapper over APScheduler's AsyncIOScheduler.

    Must be created inside a running event loop; jobs run as tasks on that loop.
    """

    def __init__(self, timezone: str = "UTC") -> None:
        self._timezone = timezone
        self._scheduler = AsyncIOScheduler(timezone=timezone, event_loop=asyncio.get_running_loop())
        self._inflight: Set["asyncio.Task[None]"] = set()
        self._shut_down = False

    @property
    def running(self) -> bool:
        # APScheduler may defer its own state change to the next loop turn.
        return not self._shut_down and bool(self._scheduler.running)

    def start(self) -> None:
        self._scheduler.start()

    def shutdown(self) -> None:
        self._shut_down = True
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        # shutdown() only stops future ticks; a job already on the loop keeps going.
        for task in list(self._inflight):
            task.cancel()
        self._inflight.clear()

    def every_seconds(self, seconds: float, func: JobFunc, *, name: Optional[str] = None) -> None:
        self._scheduler.add_job(
            self._tracked(func),
            IntervalTrigger(seconds=seconds, timezone=self._timezone),
            name=name,
            max_instances=1,
            coalesce=True,
        )

    def _tracked(self, func: JobFunc) -> Callable[[], Awaitable[None]]:
        async def runner() -> None:
            if self._shut_down:
                return
            task = asyncio.current_task()
            if task is not None:
                self._inflight.add(task)
            try:
                await func()
            finally:
                if task is not None:
                    self._inflight.discard(task)

        return runner

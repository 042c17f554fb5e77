"""Timer scheduling used by the toolbar."""

from __future__ import annotations

import asyncio
from typing import Callable, Protocol


class TimerHandle(Protocol):
    """Handle of a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback if it has not run yet."""


class Scheduler(Protocol):
    """Protocol for one-shot delayed callbacks on the UI event loop."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay`` seconds."""


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)

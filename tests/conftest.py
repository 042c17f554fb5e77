"""Shared fixtures for toolbar tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import pytest


@dataclass
class FakeTimer:
    deadline: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FakeScheduler:
    """Scheduler driven by a simulated clock."""

    now: float = 0.0
    timers: list[FakeTimer] = field(default_factory=list)

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(deadline=self.now + delay, callback=callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[FakeTimer]:
        return [timer for timer in self.timers if not timer.cancelled]

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [timer for timer in self.pending if timer.deadline <= target]
            if not due:
                break
            timer = min(due, key=lambda item: item.deadline)
            self.timers.remove(timer)
            self.now = timer.deadline
            timer.callback()
        self.now = target


@dataclass
class FakeWindow:
    pointer_listeners: list[Callable[[], None]] = field(default_factory=list)
    closed: bool = False

    def add_pointer_move_listener(self, callback: Callable[[], None]) -> None:
        self.pointer_listeners.append(callback)

    def remove_pointer_move_listener(self, callback: Callable[[], None]) -> None:
        self.pointer_listeners.remove(callback)

    def close(self) -> None:
        self.closed = True

    def move_pointer(self) -> None:
        for callback in list(self.pointer_listeners):
            callback()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def window() -> FakeWindow:
    return FakeWindow()

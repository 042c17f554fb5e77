"""Auto-hide state machine for the toolbar.

The toolbar is either visible or hidden. Becoming visible arms a single hide
timer. When the timer fires the hover flag is read: a hovered toolbar re-arms
the timer and stays visible, otherwise the toolbar hides. Only pointer
movement brings a hidden toolbar back.
"""

from __future__ import annotations

import logging
from typing import Callable

from .timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

TOOLBAR_TIMEOUT = 4.0


class VisibilityController:
    """Tracks toolbar visibility, hover and the hide timer."""

    def __init__(
        self,
        scheduler: Scheduler,
        timeout: float = TOOLBAR_TIMEOUT,
        on_change: Callable[[bool], None] | None = None,
    ) -> None:
        self.on_change = on_change
        self._scheduler = scheduler
        self._timeout = timeout
        self._visible = True
        self._hovered = False
        self._timer: TimerHandle | None = None
        self._running = False

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def hovered(self) -> bool:
        return self._hovered

    @property
    def timer_pending(self) -> bool:
        return self._timer is not None

    def start(self) -> None:
        """Show the toolbar and arm the first hide timer."""
        self._visible = True
        self._hovered = False
        self._running = True
        self._arm_timer()

    def stop(self) -> None:
        """Cancel the hide timer and ignore further events."""
        self._running = False
        self._cancel_timer()

    def on_pointer_move(self) -> None:
        if not self._running or self._visible:
            return
        self._set_visible(True)
        self._arm_timer()

    def on_pointer_enter(self) -> None:
        self._hovered = True

    def on_pointer_leave(self) -> None:
        self._hovered = False

    def _on_timer_fired(self) -> None:
        self._timer = None
        if not self._running:
            return
        if self._hovered:
            self._arm_timer()
            return
        self._set_visible(False)

    def _arm_timer(self) -> None:
        self._cancel_timer()
        self._timer = self._scheduler.call_later(self._timeout, self._on_timer_fired)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _set_visible(self, visible: bool) -> None:
        if visible == self._visible:
            return
        self._visible = visible
        logger.debug("Toolbar %s.", "shown" if visible else "hidden")
        if self.on_change:
            self.on_change(visible)

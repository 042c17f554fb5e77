"""Composition of media state, button derivation and visibility."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
from functools import partial
from typing import Callable, Protocol

from .api import CallControlAPI, MediaState
from .buttons import (
    BUTTON_REGISTRY,
    ButtonId,
    ButtonViewModel,
    build_view_models,
    descriptor_for,
)
from .config import OnTopConfig
from .media_state import MediaStateStore
from .timers import Scheduler
from .visibility import VisibilityController

logger = logging.getLogger(__name__)


class ToolbarWindow(Protocol):
    """Window hosting the toolbar."""

    def add_pointer_move_listener(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` on pointer movement anywhere in the window."""

    def remove_pointer_move_listener(self, callback: Callable[[], None]) -> None:
        """Stop calling ``callback`` on pointer movement."""

    def close(self) -> None:
        """Close the window."""


@dataclass(frozen=True)
class ToolbarSnapshot:
    """Everything the presentational layer needs to draw the toolbar."""

    visible: bool
    buttons: tuple[ButtonViewModel, ...]

    def button(self, button_id: ButtonId) -> ButtonViewModel:
        for view_model in self.buttons:
            if view_model.button_id == button_id:
                return view_model
        raise KeyError(button_id)


class ToolbarController:
    """Owns the toolbar state for one always-on-top window."""

    def __init__(
        self,
        api: CallControlAPI,
        window: ToolbarWindow,
        scheduler: Scheduler,
        config: OnTopConfig | None = None,
        on_render: Callable[[ToolbarSnapshot], None] | None = None,
    ) -> None:
        config = config or OnTopConfig()
        self.on_render = on_render
        self._api = api
        self._window = window
        self._store = MediaStateStore(on_change=self._on_media_state_changed)
        self._visibility = VisibilityController(
            scheduler,
            timeout=config.toolbar_timeout,
            on_change=self._on_visibility_changed,
        )
        self._click_handlers: dict[ButtonId, Callable[[], None]] = {
            descriptor.button_id: partial(self._dispatch, descriptor.button_id)
            for descriptor in BUTTON_REGISTRY
        }
        self._init_task: asyncio.Task[MediaState] | None = None

    @property
    def media_state(self) -> MediaState:
        return self._store.state

    @property
    def visibility(self) -> VisibilityController:
        return self._visibility

    def activate(self) -> None:
        """Subscribe to the API, query the call state and start auto-hide.

        Must be called from a running asyncio event loop.
        """
        self._store.subscribe(self._api)
        self._init_task = asyncio.get_running_loop().create_task(
            self._store.initialize(self._api)
        )
        self._visibility.start()
        self._window.add_pointer_move_listener(self._visibility.on_pointer_move)
        logger.info("Toolbar activated.")

    def deactivate(self) -> None:
        """Undo ``activate`` in reverse order."""
        self._window.remove_pointer_move_listener(self._visibility.on_pointer_move)
        self._visibility.stop()
        if self._init_task is not None and not self._init_task.done():
            self._init_task.cancel()
        self._init_task = None
        self._store.unsubscribe(self._api)
        logger.info("Toolbar deactivated.")

    async def wait_initialized(self) -> MediaState:
        """Wait for the initial state query started by ``activate``."""
        if self._init_task is not None:
            await asyncio.shield(self._init_task)
        return self._store.state

    def snapshot(self) -> ToolbarSnapshot:
        return ToolbarSnapshot(
            visible=self._visibility.visible,
            buttons=build_view_models(self._store.state, self._click_handlers),
        )

    def on_pointer_enter_toolbar(self) -> None:
        self._visibility.on_pointer_enter()

    def on_pointer_leave_toolbar(self) -> None:
        self._visibility.on_pointer_leave()

    def click(self, button_id: ButtonId | str) -> None:
        """Run the click handler of ``button_id``."""
        self._click_handlers[ButtonId(button_id)]()

    def _dispatch(self, button_id: ButtonId) -> None:
        descriptor = descriptor_for(button_id)
        self._api.execute_command(descriptor.command.value)
        if descriptor.closes_window:
            self._window.close()

    def _on_media_state_changed(self, state: MediaState) -> None:
        self._render()

    def _on_visibility_changed(self, visible: bool) -> None:
        self._render()

    def _render(self) -> None:
        if self.on_render:
            self.on_render(self.snapshot())

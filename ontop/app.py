"""Application wiring for the always-on-top toolbar."""

from __future__ import annotations

import asyncio
import importlib.util
import logging
import os

from .api import CallControlAPI, LocalCallControlAPI, NullCallControlAPI
from .config import OnTopConfig
from .timers import AsyncioScheduler
from .toolbar import ToolbarController
from .ui import ConsoleToolbarUI

logger = logging.getLogger(__name__)


class OnTopApp:
    """Top-level application that wires the toolbar components together."""

    def __init__(self, config: OnTopConfig | None = None) -> None:
        self.config = config or OnTopConfig.from_env()
        self.api = build_api(self.config)

    def run(self) -> None:
        """Run the application until the toolbar window closes."""
        if self.config.ui == "qt":
            logger.info("Starting toolbar in Qt mode.")
            self._run_qt()
            return

        if self.config.ui != "console":
            logger.warning("Unknown ONTOP_UI value %r; using console.", self.config.ui)
        logger.info("Starting toolbar in console mode.")
        try:
            asyncio.run(self._run_console())
        except KeyboardInterrupt:
            logger.info("Toolbar stopped.")

    async def _run_console(self) -> None:
        ui = ConsoleToolbarUI()
        controller = ToolbarController(
            self.api,
            ui,
            AsyncioScheduler(),
            config=self.config,
            on_render=ui.render,
        )
        controller.activate()
        try:
            await controller.wait_initialized()
            await ui.start(controller)
        finally:
            controller.deactivate()

    def _run_qt(self) -> None:
        for module in ("qtpy", "qasync"):
            if importlib.util.find_spec(module) is None:
                raise RuntimeError(
                    f"{module} is not installed. Install the 'qt' extra to use ONTOP_UI=qt."
                )

        import qasync  # type: ignore
        from qtpy import QtWidgets

        from .ui.qt_toolbar import QtToolbarWindow

        app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
        loop = qasync.QEventLoop(app)
        asyncio.set_event_loop(loop)

        window = QtToolbarWindow()
        controller = ToolbarController(
            self.api,
            window,
            AsyncioScheduler(loop),
            config=self.config,
            on_render=window.render,
        )
        window.bind(controller)
        window.resize(320, 120)

        closed = asyncio.Event()
        window.closed.connect(closed.set)

        async def run_window() -> None:
            controller.activate()
            window.render(controller.snapshot())
            window.show()
            try:
                await closed.wait()
            finally:
                controller.deactivate()

        with loop:
            loop.run_until_complete(run_window())


def build_api(config: OnTopConfig) -> CallControlAPI:
    """Create the call-control API selected by ``config``."""

    if not config.simulate_call:
        return NullCallControlAPI()
    return LocalCallControlAPI(
        audio_available=config.audio_available,
        video_available=config.video_available,
        audio_muted=config.audio_muted,
        video_muted=config.video_muted,
    )


def main() -> None:
    """Entry point for running the toolbar."""
    log_level = os.getenv("ONTOP_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=log_level, format="%(levelname)s %(message)s")
    OnTopApp().run()

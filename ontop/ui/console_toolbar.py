"""Console toolbar front-end for development and testing."""

from __future__ import annotations

import asyncio
import threading
from dataclasses import dataclass, field
from typing import Callable

from ..buttons import ButtonId
from ..toolbar import ToolbarController, ToolbarSnapshot

HELP_TEXT = (
    "Commands: move, enter, leave, click <camera|microphone|hangup>, show, /exit"
)


@dataclass
class ConsoleToolbarUI:
    """Line-based stand-in for the always-on-top window."""

    prompt: str = "toolbar> "
    input_func: Callable[[str], str] = input
    print_func: Callable[[str], None] = print
    closed: bool = field(default=False, init=False)
    _pointer_listeners: list[Callable[[], None]] = field(
        default_factory=list, init=False, repr=False
    )

    def add_pointer_move_listener(self, callback: Callable[[], None]) -> None:
        self._pointer_listeners.append(callback)

    def remove_pointer_move_listener(self, callback: Callable[[], None]) -> None:
        if callback in self._pointer_listeners:
            self._pointer_listeners.remove(callback)

    def close(self) -> None:
        self.closed = True

    def render(self, snapshot: ToolbarSnapshot) -> None:
        self.print_func(format_snapshot(snapshot))

    def handle_line(self, controller: ToolbarController, line: str) -> None:
        """Apply a single console command to ``controller``."""

        parts = line.strip().lower().split()
        if not parts:
            return
        command, args = parts[0], parts[1:]

        if command == "move":
            for callback in list(self._pointer_listeners):
                callback()
        elif command == "enter":
            controller.on_pointer_enter_toolbar()
        elif command == "leave":
            controller.on_pointer_leave_toolbar()
        elif command == "click" and args:
            try:
                button_id = ButtonId(args[0])
            except ValueError:
                self.print_func(f"Unknown button: {args[0]}")
                return
            view_model = controller.snapshot().button(button_id)
            if not view_model.enabled:
                self.print_func(f"{button_id.value} is disabled.")
                return
            view_model.on_click()
        elif command == "show":
            self.render(controller.snapshot())
        else:
            self.print_func(HELP_TEXT)

    async def start(self, controller: ToolbarController) -> None:
        """Run the command loop until the window closes or input ends."""

        loop = asyncio.get_running_loop()
        lines: asyncio.Queue[str | None] = asyncio.Queue()
        wanted = threading.Event()
        # Daemon thread: a read blocked in input() must not hold up shutdown.
        reader = threading.Thread(
            target=self._read_lines,
            args=(loop, lines, wanted),
            name="toolbar-stdin",
            daemon=True,
        )
        reader.start()

        self.print_func("Always-on-top toolbar started. Type /exit to quit.")
        self.render(controller.snapshot())
        while not self.closed:
            wanted.set()
            line = await lines.get()
            if line is None:
                self.print_func("\nSession ended.")
                return

            if line.strip().lower() in {"/exit", "/quit"}:
                self.print_func("Session ended.")
                return
            self.handle_line(controller, line)

        self.print_func("Window closed.")

    def _read_lines(
        self,
        loop: asyncio.AbstractEventLoop,
        lines: asyncio.Queue[str | None],
        wanted: threading.Event,
    ) -> None:
        while True:
            wanted.wait()
            wanted.clear()
            try:
                line: str | None = self.input_func(self.prompt)
            except EOFError:
                line = None
            try:
                loop.call_soon_threadsafe(lines.put_nowait, line)
            except RuntimeError:
                return
            if line is None:
                return


def format_snapshot(snapshot: ToolbarSnapshot) -> str:
    """Render ``snapshot`` as a single status line."""

    buttons = []
    for view_model in snapshot.buttons:
        state = "off" if view_model.toggled else "on"
        if not view_model.enabled:
            state += ",disabled"
        buttons.append(f"[{view_model.button_id.value}:{state}]")
    visibility = "visible" if snapshot.visible else "hidden"
    return f"({visibility}) {' '.join(buttons)}"

"""In-process call simulation implementing the call-control API."""

from __future__ import annotations

import logging

from .base import CallControlError, EventEmitter
from .types import Command, Topic

logger = logging.getLogger(__name__)


class LocalCallControlAPI(EventEmitter):
    """Call-control API backed by local flags instead of a real conference."""

    def __init__(
        self,
        audio_available: bool = True,
        video_available: bool = True,
        audio_muted: bool = False,
        video_muted: bool = False,
        fail_queries: bool = False,
    ) -> None:
        super().__init__()
        self.audio_available = audio_available
        self.video_available = video_available
        self.audio_muted = audio_muted
        self.video_muted = video_muted
        self.fail_queries = fail_queries
        self.ended = False
        self.commands: list[str] = []

    def execute_command(self, name: str) -> None:
        self.commands.append(name)
        if self.ended:
            logger.warning("Call already ended; ignoring command %s.", name)
            return

        if name == Command.TOGGLE_AUDIO:
            if not self.audio_available:
                logger.info("No audio device; cannot toggle audio.")
                return
            self.audio_muted = not self.audio_muted
            self.emit(Topic.AUDIO_MUTE_STATUS_CHANGED, {"muted": self.audio_muted})
        elif name == Command.TOGGLE_VIDEO:
            if not self.video_available:
                logger.info("No video device; cannot toggle video.")
                return
            self.video_muted = not self.video_muted
            self.emit(Topic.VIDEO_MUTE_STATUS_CHANGED, {"muted": self.video_muted})
        elif name == Command.HANGUP:
            logger.info("Call ended.")
            self.ended = True
            self.remove_all_listeners()
        else:
            logger.warning("Unknown call command: %s", name)

    def set_audio_available(self, available: bool) -> None:
        self.audio_available = available
        self.emit(Topic.AUDIO_ENABLED_STATUS_CHANGED, {"enabled": available})

    def set_video_available(self, available: bool) -> None:
        self.video_available = available
        self.emit(Topic.VIDEO_ENABLED_STATUS_CHANGED, {"enabled": available})

    async def is_audio_muted(self) -> bool | None:
        self._check_queries()
        return self.audio_muted

    async def is_video_muted(self) -> bool | None:
        self._check_queries()
        return self.video_muted

    async def is_audio_available(self) -> bool | None:
        self._check_queries()
        return self.audio_available

    async def is_video_available(self) -> bool | None:
        self._check_queries()
        return self.video_available

    def _check_queries(self) -> None:
        if self.fail_queries:
            raise CallControlError("Call state is not available.")

"""Mirror of the call's mute and availability state.

The store is fed by two sources: a one-time bulk query issued when the
toolbar activates, and the four status events published by the call-control
API afterwards. Every update replaces the whole ``MediaState`` value.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from .api import CallControlAPI, MediaState, Topic

logger = logging.getLogger(__name__)


class MediaStateStore:
    """Holds the latest ``MediaState`` and keeps it in sync with the API."""

    def __init__(self, on_change: Callable[[MediaState], None] | None = None) -> None:
        self.on_change = on_change
        self._state = MediaState()
        self._handlers: dict[Topic, Callable[[dict[str, Any]], None]] = {
            Topic.AUDIO_MUTE_STATUS_CHANGED: self._on_audio_muted_event,
            Topic.VIDEO_MUTE_STATUS_CHANGED: self._on_video_muted_event,
            Topic.AUDIO_ENABLED_STATUS_CHANGED: self._on_audio_enabled_event,
            Topic.VIDEO_ENABLED_STATUS_CHANGED: self._on_video_enabled_event,
        }

    @property
    def state(self) -> MediaState:
        return self._state

    def subscribe(self, api: CallControlAPI) -> None:
        """Register the status handlers on ``api``."""
        for topic, handler in self._handlers.items():
            api.on(topic.value, handler)

    def unsubscribe(self, api: CallControlAPI) -> None:
        """Remove exactly the handlers registered by ``subscribe``."""
        for topic, handler in self._handlers.items():
            api.remove_listener(topic.value, handler)

    async def initialize(self, api: CallControlAPI) -> MediaState:
        """Query the current state from ``api`` and store it.

        The four queries run concurrently. If any of them fails the error is
        logged and the stored state is left untouched.
        """
        try:
            audio_muted, video_muted, audio_enabled, video_enabled = await asyncio.gather(
                api.is_audio_muted(),
                api.is_video_muted(),
                api.is_audio_available(),
                api.is_video_available(),
            )
        except Exception:  # noqa: BLE001
            logger.exception("Failed to query the initial call state.")
            return self._state

        self._set_state(
            MediaState(
                audio_muted=bool(audio_muted),
                video_muted=bool(video_muted),
                audio_enabled=bool(audio_enabled),
                video_enabled=bool(video_enabled),
            )
        )
        return self._state

    def on_audio_mute_changed(self, muted: bool) -> None:
        self._set_state(self._state.with_audio_muted(muted))

    def on_video_mute_changed(self, muted: bool) -> None:
        self._set_state(self._state.with_video_muted(muted))

    def on_audio_availability_changed(self, enabled: bool) -> None:
        self._set_state(self._state.with_audio_enabled(enabled))

    def on_video_availability_changed(self, enabled: bool) -> None:
        self._set_state(self._state.with_video_enabled(enabled))

    def _on_audio_muted_event(self, payload: dict[str, Any]) -> None:
        self.on_audio_mute_changed(_flag(payload, "muted"))

    def _on_video_muted_event(self, payload: dict[str, Any]) -> None:
        self.on_video_mute_changed(_flag(payload, "muted"))

    def _on_audio_enabled_event(self, payload: dict[str, Any]) -> None:
        self.on_audio_availability_changed(_flag(payload, "enabled"))

    def _on_video_enabled_event(self, payload: dict[str, Any]) -> None:
        self.on_video_availability_changed(_flag(payload, "enabled"))

    def _set_state(self, state: MediaState) -> None:
        self._state = state
        logger.debug("Media state updated: %s", state)
        if self.on_change:
            self.on_change(state)


def _flag(payload: dict[str, Any] | None, key: str) -> bool:
    if not payload:
        return False
    return bool(payload.get(key))

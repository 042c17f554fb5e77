"""Base interfaces for the call-control API."""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

Listener = Callable[[dict[str, Any]], None]


class CallControlError(RuntimeError):
    """Raised when the call-control API cannot answer a query."""


class CallControlAPI(Protocol):
    """Protocol for the object that controls the call."""

    def execute_command(self, name: str) -> None:
        """Dispatch a command without waiting for a result."""

    async def is_audio_muted(self) -> bool | None:
        """Return whether the local audio track is muted."""

    async def is_video_muted(self) -> bool | None:
        """Return whether the local video track is muted."""

    async def is_audio_available(self) -> bool | None:
        """Return whether an audio device is available."""

    async def is_video_available(self) -> bool | None:
        """Return whether a video device is available."""

    def on(self, topic: str, callback: Listener) -> None:
        """Register a callback for an event topic."""

    def remove_listener(self, topic: str, callback: Listener) -> None:
        """Remove a callback previously registered with ``on``."""


class EventEmitter:
    """Topic based listener registry."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, topic: str, callback: Listener) -> None:
        self._listeners.setdefault(topic, []).append(callback)

    def remove_listener(self, topic: str, callback: Listener) -> None:
        listeners = self._listeners.get(topic)
        if not listeners:
            return
        try:
            listeners.remove(callback)
        except ValueError:
            return
        if not listeners:
            del self._listeners[topic]

    def remove_all_listeners(self) -> None:
        self._listeners.clear()

    def listener_count(self, topic: str) -> int:
        return len(self._listeners.get(topic, ()))

    def emit(self, topic: str, payload: dict[str, Any]) -> None:
        # Copy so listeners may deregister while being notified.
        for callback in list(self._listeners.get(topic, ())):
            callback(payload)


class NullCallControlAPI:
    """Fallback API used when no call is attached."""

    def execute_command(self, name: str) -> None:
        logger.warning("No call attached; dropping command %s.", name)

    async def is_audio_muted(self) -> bool | None:
        return None

    async def is_video_muted(self) -> bool | None:
        return None

    async def is_audio_available(self) -> bool | None:
        return None

    async def is_video_available(self) -> bool | None:
        return None

    def on(self, topic: str, callback: Listener) -> None:
        pass

    def remove_listener(self, topic: str, callback: Listener) -> None:
        pass

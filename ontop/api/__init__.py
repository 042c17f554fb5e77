"""Call-control API for the always-on-top toolbar."""

from .base import CallControlAPI, CallControlError, EventEmitter, NullCallControlAPI
from .local import LocalCallControlAPI
from .types import Command, MediaState, Topic

__all__ = [
    "CallControlAPI",
    "CallControlError",
    "EventEmitter",
    "NullCallControlAPI",
    "LocalCallControlAPI",
    "Command",
    "MediaState",
    "Topic",
]

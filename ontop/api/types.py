"""Types shared with the call-control API."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Command(str, Enum):
    """Commands the toolbar dispatches to the call."""

    TOGGLE_AUDIO = "toggleAudio"
    TOGGLE_VIDEO = "toggleVideo"
    HANGUP = "hangup"


class Topic(str, Enum):
    """Event topics published by the call-control API."""

    AUDIO_MUTE_STATUS_CHANGED = "audioMuteStatusChanged"
    VIDEO_MUTE_STATUS_CHANGED = "videoMuteStatusChanged"
    AUDIO_ENABLED_STATUS_CHANGED = "audioEnabledStatusChanged"
    VIDEO_ENABLED_STATUS_CHANGED = "videoEnabledStatusChanged"


@dataclass(frozen=True)
class MediaState:
    """Mute and availability flags of the local audio and video tracks."""

    audio_muted: bool = False
    video_muted: bool = False
    audio_enabled: bool = False
    video_enabled: bool = False

    def with_audio_muted(self, muted: bool) -> "MediaState":
        return replace(self, audio_muted=muted)

    def with_video_muted(self, muted: bool) -> "MediaState":
        return replace(self, video_muted=muted)

    def with_audio_enabled(self, enabled: bool) -> "MediaState":
        return replace(self, audio_enabled=enabled)

    def with_video_enabled(self, enabled: bool) -> "MediaState":
        return replace(self, video_enabled=enabled)

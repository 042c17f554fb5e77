"""Configuration loading for the always-on-top toolbar."""

from __future__ import annotations

from dataclasses import dataclass
import os


@dataclass(frozen=True)
class OnTopConfig:
    """Runtime configuration for the toolbar window."""

    toolbar_timeout: float = 4.0
    ui: str = "console"
    simulate_call: bool = True
    audio_available: bool = True
    video_available: bool = True
    audio_muted: bool = False
    video_muted: bool = False

    @classmethod
    def from_env(cls) -> "OnTopConfig":
        """Load configuration from environment variables."""

        return cls(
            toolbar_timeout=int(os.getenv("ONTOP_TOOLBAR_TIMEOUT_MS", "4000")) / 1000,
            ui=os.getenv("ONTOP_UI", "console").strip().lower(),
            simulate_call=_truthy(os.getenv("ONTOP_SIMULATE_CALL", "true")),
            audio_available=_truthy(os.getenv("ONTOP_AUDIO_AVAILABLE", "true")),
            video_available=_truthy(os.getenv("ONTOP_VIDEO_AVAILABLE", "true")),
            audio_muted=_truthy(os.getenv("ONTOP_AUDIO_MUTED", "false")),
            video_muted=_truthy(os.getenv("ONTOP_VIDEO_MUTED", "false")),
        )


def _truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "y"}

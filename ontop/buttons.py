"""Toolbar button descriptors and view-model derivation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

from .api import Command, MediaState


class ButtonId(str, Enum):
    """Identifiers of the toolbar buttons."""

    CAMERA = "camera"
    HANGUP = "hangup"
    MICROPHONE = "microphone"


@dataclass(frozen=True)
class ButtonDescriptor:
    """Static description of a toolbar button."""

    button_id: ButtonId
    element_id: str
    class_names: tuple[str, ...]
    command: Command
    closes_window: bool = False


BUTTON_REGISTRY: tuple[ButtonDescriptor, ...] = (
    ButtonDescriptor(
        button_id=ButtonId.CAMERA,
        element_id="toolbar_button_camera",
        class_names=("button", "icon-camera"),
        command=Command.TOGGLE_VIDEO,
    ),
    ButtonDescriptor(
        button_id=ButtonId.HANGUP,
        element_id="toolbar_button_hangup",
        class_names=("button", "icon-hangup", "button_hangup"),
        command=Command.HANGUP,
        closes_window=True,
    ),
    ButtonDescriptor(
        button_id=ButtonId.MICROPHONE,
        element_id="toolbar_button_mute",
        class_names=("button", "icon-microphone"),
        command=Command.TOGGLE_AUDIO,
    ),
)


def _microphone_flags(state: MediaState) -> tuple[bool, bool]:
    enabled = state.audio_enabled
    return enabled, state.audio_muted if enabled else True


def _camera_flags(state: MediaState) -> tuple[bool, bool]:
    enabled = state.video_enabled
    return enabled, state.video_muted if enabled else True


def _hangup_flags(state: MediaState) -> tuple[bool, bool]:
    return True, False


# (enabled, toggled) per button. An unavailable device is always shown toggled.
_FLAG_TABLE: dict[ButtonId, Callable[[MediaState], tuple[bool, bool]]] = {
    ButtonId.CAMERA: _camera_flags,
    ButtonId.HANGUP: _hangup_flags,
    ButtonId.MICROPHONE: _microphone_flags,
}

_missing = set(ButtonId) - set(_FLAG_TABLE)
if _missing:
    raise RuntimeError(f"No derivation for toolbar buttons: {sorted(_missing)}")


@dataclass(frozen=True)
class ButtonViewModel:
    """Render-ready state of a single toolbar button."""

    button_id: ButtonId
    element_id: str
    class_names: tuple[str, ...]
    enabled: bool
    toggled: bool
    on_click: Callable[[], None]


def derive_flags(button_id: ButtonId, state: MediaState) -> tuple[bool, bool]:
    """Return ``(enabled, toggled)`` for ``button_id`` under ``state``."""

    return _FLAG_TABLE[ButtonId(button_id)](state)


def build_view_models(
    state: MediaState,
    click_handlers: Mapping[ButtonId, Callable[[], None]],
) -> tuple[ButtonViewModel, ...]:
    """Build one view-model per registered button, in registry order."""

    view_models = []
    for descriptor in BUTTON_REGISTRY:
        enabled, toggled = derive_flags(descriptor.button_id, state)
        view_models.append(
            ButtonViewModel(
                button_id=descriptor.button_id,
                element_id=descriptor.element_id,
                class_names=descriptor.class_names,
                enabled=enabled,
                toggled=toggled,
                on_click=click_handlers[descriptor.button_id],
            )
        )
    return tuple(view_models)


def descriptor_for(button_id: ButtonId) -> ButtonDescriptor:
    for descriptor in BUTTON_REGISTRY:
        if descriptor.button_id == button_id:
            return descriptor
    raise KeyError(button_id)

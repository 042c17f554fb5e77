"""Floating always-on-top toolbar window built on Qt."""

from __future__ import annotations

import logging
from typing import Callable

from qtpy import QtCore, QtWidgets

from ..buttons import BUTTON_REGISTRY, ButtonId
from ..toolbar import ToolbarController, ToolbarSnapshot

logger = logging.getLogger(__name__)

FADE_DURATION_MS = 220

BUTTON_LABELS = {
    ButtonId.CAMERA: "Cam",
    ButtonId.HANGUP: "End",
    ButtonId.MICROPHONE: "Mic",
}

TOOLBAR_STYLE = """
QFrame#toolbar_primary {
    background: rgba(20, 20, 20, 200);
    border-radius: 12px;
}
QPushButton {
    min-width: 44px;
    min-height: 44px;
    border: none;
    border-radius: 22px;
    color: white;
    background: rgba(255, 255, 255, 40);
}
QPushButton[toggled="true"] {
    background: rgba(255, 255, 255, 120);
    color: black;
}
QPushButton:disabled {
    color: rgba(255, 255, 255, 90);
}
QPushButton#toolbar_button_hangup {
    background: rgb(200, 40, 40);
}
"""


class _ToolbarFrame(QtWidgets.QFrame):
    """Container of the buttons; reports pointer enter and leave."""

    pointerEntered = QtCore.Signal()
    pointerLeft = QtCore.Signal()

    def enterEvent(self, event) -> None:  # type: ignore[override]
        self.pointerEntered.emit()
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:  # type: ignore[override]
        self.pointerLeft.emit()
        super().leaveEvent(event)


class QtToolbarWindow(QtWidgets.QWidget):
    """Frameless, translucent window that stays above other windows."""

    closed = QtCore.Signal()

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowFlags(
            QtCore.Qt.WindowType.FramelessWindowHint
            | QtCore.Qt.WindowType.WindowStaysOnTopHint
            | QtCore.Qt.WindowType.Tool
        )
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.setMouseTracking(True)
        self.setStyleSheet(TOOLBAR_STYLE)

        self._controller: ToolbarController | None = None
        self._pointer_listeners: list[Callable[[], None]] = []
        self._visible = True

        self._toolbar = _ToolbarFrame(self)
        self._toolbar.setObjectName("toolbar_primary")
        self._toolbar.setMouseTracking(True)
        layout = QtWidgets.QHBoxLayout(self._toolbar)
        layout.setContentsMargins(10, 8, 10, 8)
        layout.setSpacing(8)

        self._buttons: dict[ButtonId, QtWidgets.QPushButton] = {}
        for descriptor in BUTTON_REGISTRY:
            button = QtWidgets.QPushButton(BUTTON_LABELS[descriptor.button_id], self._toolbar)
            button.setObjectName(descriptor.element_id)
            button.setCursor(QtCore.Qt.CursorShape.PointingHandCursor)
            button.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
            button.clicked.connect(
                lambda _checked=False, button_id=descriptor.button_id: self._on_button_clicked(button_id)
            )
            layout.addWidget(button)
            self._buttons[descriptor.button_id] = button

        outer = QtWidgets.QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addStretch(1)
        outer.addWidget(self._toolbar, 0, QtCore.Qt.AlignmentFlag.AlignHCenter)

        self._opacity_effect = QtWidgets.QGraphicsOpacityEffect(self._toolbar)
        self._opacity_effect.setOpacity(1.0)
        self._toolbar.setGraphicsEffect(self._opacity_effect)
        self._fade_anim = QtCore.QPropertyAnimation(self._opacity_effect, b"opacity", self)
        self._fade_anim.setDuration(FADE_DURATION_MS)
        self._fade_anim.setEasingCurve(QtCore.QEasingCurve.Type.OutCubic)

        app = QtWidgets.QApplication.instance()
        if app is not None:
            app.installEventFilter(self)

    def bind(self, controller: ToolbarController) -> None:
        """Route hover events of the toolbar frame to ``controller``."""

        self._controller = controller
        self._toolbar.pointerEntered.connect(controller.on_pointer_enter_toolbar)
        self._toolbar.pointerLeft.connect(controller.on_pointer_leave_toolbar)

    def add_pointer_move_listener(self, callback: Callable[[], None]) -> None:
        self._pointer_listeners.append(callback)

    def remove_pointer_move_listener(self, callback: Callable[[], None]) -> None:
        if callback in self._pointer_listeners:
            self._pointer_listeners.remove(callback)

    def render(self, snapshot: ToolbarSnapshot) -> None:
        for view_model in snapshot.buttons:
            button = self._buttons[view_model.button_id]
            button.setEnabled(view_model.enabled)
            button.setProperty("toggled", view_model.toggled)
            button.style().unpolish(button)
            button.style().polish(button)
        if snapshot.visible != self._visible:
            self._visible = snapshot.visible
            self._fade_to(1.0 if snapshot.visible else 0.0)

    def eventFilter(self, watched, event) -> bool:  # type: ignore[override]
        if event.type() == QtCore.QEvent.Type.MouseMove and self.isVisible():
            for callback in list(self._pointer_listeners):
                callback()
        return super().eventFilter(watched, event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        app = QtWidgets.QApplication.instance()
        if app is not None:
            app.removeEventFilter(self)
        self.closed.emit()
        super().closeEvent(event)

    def _on_button_clicked(self, button_id: ButtonId) -> None:
        if self._controller is None:
            logger.warning("Toolbar window is not bound; ignoring %s click.", button_id.value)
            return
        self._controller.snapshot().button(button_id).on_click()

    def _fade_to(self, opacity: float) -> None:
        self._fade_anim.stop()
        self._fade_anim.setStartValue(self._opacity_effect.opacity())
        self._fade_anim.setEndValue(opacity)
        self._fade_anim.start()

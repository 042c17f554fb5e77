"""UI front-ends for the always-on-top toolbar.

The Qt window lives in ``ontop.ui.qt_toolbar`` and is imported on demand.
"""

from .console_toolbar import ConsoleToolbarUI, format_snapshot

__all__ = ["ConsoleToolbarUI", "format_snapshot"]

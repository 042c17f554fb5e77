"""Always-on-top call toolbar."""

from .toolbar import ToolbarController, ToolbarSnapshot, ToolbarWindow

__all__ = ["ToolbarController", "ToolbarSnapshot", "ToolbarWindow"]

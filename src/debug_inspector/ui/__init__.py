"""
Inspector UI

Layout interface and the headless recording backend. The ImGui backend
(ui.imgui_layout), styling (ui.theme) and renderer integration
(ui.ui_manager) need a live ImGui context and are imported directly.
"""

from .layout import Layout
from .recording_layout import RecordingLayout, WidgetRecord

__all__ = [
    "Layout",
    "RecordingLayout",
    "WidgetRecord",
]

"""
Debugging Inspector

Component + custom editor pair. Selecting the DebuggingInspector component
shows every inspectable component of the scene with its marked members.
"""

from __future__ import annotations

import logging

from ..config.settings import AUTO_REFRESH_DEFAULT, INSPECTOR_TITLE
from ..scene.discovery import display_name, find_inspectable_components
from ..scene.objects import Component
from .custom_editor import Editor, EditorContext, EditorRegistry

logger = logging.getLogger(__name__)


class DebuggingInspector(Component):
    """Controller component the debugging inspector editor is drawn for."""

    def __init__(self):
        super().__init__()
        self.dirty = False

    def set_dirty(self) -> None:
        """Mark as modified so the host repaints the inspector."""
        self.dirty = True

    def clear_dirty(self) -> None:
        self.dirty = False


class DebuggingInspectorEditor(Editor):
    """
    Draws the scene-wide debugging inspector.

    Per redraw:
    - the target's own members
    - AutoRefresh toggle and Refresh button
    - every inspectable component with its members
    """

    def __init__(self, target: DebuggingInspector, context: EditorContext):
        super().__init__(target, context)
        self.auto_refresh = AUTO_REFRESH_DEFAULT
        self.render_passes = 0

    def on_inspector_gui(self) -> None:
        layout = self.layout
        self.render_passes += 1

        self.draw_default_inspector()
        layout.space()

        with layout.horizontal():
            self.auto_refresh = layout.toggle("AutoRefresh", self.auto_refresh)
            refresh_clicked = layout.button("Refresh")

        if refresh_clicked:
            logger.debug("Manual refresh requested")
            self.on_inspector_gui()

        layout.centered_label(INSPECTOR_TITLE)

        component_count = 0
        for component in find_inspectable_components(self.context.scene):
            component_count += 1
            with layout.vertical():
                with layout.horizontal():
                    layout.object_field(display_name(component), component, type(component))
                self.inspector.inspect(component)
            layout.space()

        logger.debug("Inspected %d components", component_count)

        if self.auto_refresh:
            self.target.set_dirty()


def register_debugging_inspector(registry: EditorRegistry) -> EditorRegistry:
    """Register DebuggingInspectorEditor as the editor for DebuggingInspector."""
    registry.register(DebuggingInspector, DebuggingInspectorEditor)
    return registry

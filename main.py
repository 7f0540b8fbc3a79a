#!/usr/bin/env python3
"""
Debugging Inspector - Main Entry Point

Opens the editor window with the sample scene selected on its debugging
inspector, so every inspectable component is shown in the side panel.
"""

import logging

import imgui
import moderngl_window as mglw

from debug_inspector import (
    EditorContext,
    EditorHost,
    EditorRegistry,
    Inspector,
    create_default_registry,
    register_debugging_inspector,
)
from debug_inspector.config.settings import (
    CLEAR_COLOR,
    GL_VERSION,
    INSPECTOR_PANEL_WIDTH,
    INSPECTOR_WINDOW_NAME,
    RESIZABLE,
    UI_THEME,
    WINDOW_SIZE,
    WINDOW_TITLE,
    configure_logging,
)
from debug_inspector.samples import build_sample_scene
from debug_inspector.ui.imgui_layout import ImGuiLayout
from debug_inspector.ui.ui_manager import UIManager


logger = logging.getLogger(__name__)


class EditorApp(mglw.WindowConfig):
    """Editor window hosting the debugging inspector"""

    gl_version = GL_VERSION
    title = WINDOW_TITLE
    window_size = WINDOW_SIZE
    aspect_ratio = None
    resizable = RESIZABLE

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.wnd.mouse_exclusivity = False
        self.wnd.cursor = True

        # Inspector: registry and layout are built once and shared by every editor
        self.layout = ImGuiLayout()
        self.registry = create_default_registry(self.layout)
        self.inspector = Inspector(self.registry, self.layout)

        # Scene
        self.scene, debugging_inspector = build_sample_scene()
        self.scene.start()
        logger.info("Loaded '%s' with %d objects", self.scene.name, self.scene.get_object_count())

        # Editors
        self.editor_registry = register_debugging_inspector(EditorRegistry())
        self.editor_host = EditorHost(self.editor_registry, EditorContext(self.scene, self.inspector))
        self.editor_host.select(debugging_inspector)

        # UI Manager (ImGui); user input asks the editor for a repaint
        self.ui_manager = UIManager(
            self.ctx,
            self.wnd.size,
            theme_name=UI_THEME,
            on_interaction=self.editor_host.request_repaint,
        )

        self._last_error = None

    def on_render(self, time, frametime):
        """
        Render a frame.

        Args:
            time: Total elapsed time (seconds)
            frametime: Time since last frame (seconds)
        """
        self.scene.update(frametime)

        self.ctx.clear(*CLEAR_COLOR)
        with self.ui_manager.frame(frametime):
            self.layout.new_frame()
            self._draw_inspector_window()

    def _draw_inspector_window(self):
        width, height = self.wnd.size
        imgui.set_next_window_position(width - INSPECTOR_PANEL_WIDTH, 0, imgui.ALWAYS)
        imgui.set_next_window_size(INSPECTOR_PANEL_WIDTH, height, imgui.ALWAYS)

        expanded, _ = imgui.begin(INSPECTOR_WINDOW_NAME, False)
        try:
            if expanded:
                self._repaint_editor()
        finally:
            imgui.end()

    def _repaint_editor(self):
        """One render pass; failures are reported and retried next frame."""
        indent_level = self.layout.indent_level
        try:
            # ImGui redraws every frame, so every frame is a repaint
            self.editor_host.repaint()
            self._last_error = None
        except Exception as e:
            # Report each distinct failure once instead of every frame
            message = f"{type(e).__name__}: {e}"
            if message != self._last_error:
                logger.exception("Inspector render pass failed")
                self._last_error = message
            imgui.text_colored(message, 0.85, 0.35, 0.35)
        finally:
            self.layout.indent_level = indent_level

    def on_mouse_position_event(self, x: int, y: int, dx: int, dy: int):
        self.ui_manager.input.on_mouse_move(x, y)

    def on_mouse_drag_event(self, x: int, y: int, dx: int, dy: int):
        self.ui_manager.input.on_mouse_move(x, y)

    def on_mouse_press_event(self, x: int, y: int, button: int):
        self.ui_manager.input.on_mouse_press(x, y, button)

    def on_mouse_release_event(self, x: int, y: int, button: int):
        self.ui_manager.input.on_mouse_release(x, y, button)

    def on_mouse_scroll_event(self, x_offset: float, y_offset: float):
        self.ui_manager.input.on_scroll(x_offset, y_offset)

    def on_unicode_char_entered(self, char: str):
        self.ui_manager.input.on_text(char)

    def on_key_event(self, key, action, modifiers):
        keys = self.wnd.keys
        if action == keys.ACTION_PRESS:
            self.ui_manager.input.on_key(key, True)
        elif action == keys.ACTION_RELEASE:
            self.ui_manager.input.on_key(key, False)

    def on_resize(self, width: int, height: int):
        self.ui_manager.resize(width, height)

    def on_close(self):
        self.ui_manager.shutdown()


if __name__ == '__main__':
    configure_logging()
    EditorApp.run()

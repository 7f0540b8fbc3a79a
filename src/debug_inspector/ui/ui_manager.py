"""
ImGui UI Manager

Owns the ImGui context of the editor window and draws each frame with the
OpenGL renderer. Input goes through `UIManager.input`.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import imgui
from imgui.integrations.opengl import ProgrammablePipelineRenderer
import moderngl

from .input_router import InputRouter
from .theme import ThemeManager


class UIManager:
    """ImGui context, theme and renderer for one window."""

    def __init__(
        self,
        ctx: moderngl.Context,
        window_size: tuple,
        theme_name: str = "sage_green",
        on_interaction: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize UI manager.

        Args:
            ctx: ModernGL context
            window_size: Initial window size (width, height)
            theme_name: Theme applied to the new context
            on_interaction: Forwarded to the input router
        """
        self.ctx = ctx

        imgui.create_context()
        io = imgui.get_io()
        io.ini_file_name = None
        self.resize(*window_size)

        self.renderer = ProgrammablePipelineRenderer()
        self.theme_manager = ThemeManager(theme_name)
        self.input = InputRouter(on_interaction)

    def resize(self, width: int, height: int) -> None:
        imgui.get_io().display_size = (width, height)

    @contextmanager
    def frame(self, frametime: float) -> Iterator[None]:
        """ImGui frame; everything drawn inside is rendered on exit."""
        imgui.get_io().delta_time = max(frametime, 1e-4)
        imgui.new_frame()
        try:
            yield
        finally:
            imgui.render()
            self.renderer.render(imgui.get_draw_data())

    def shutdown(self) -> None:
        self.renderer.shutdown()

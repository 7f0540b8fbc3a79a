"""
Input Router

Forwards raw window events to the ImGui IO state and tells the editor when
the user interacted with the inspector, so it can repaint.
"""

from __future__ import annotations

from typing import Callable, Optional

import imgui

MOUSE_BUTTON_COUNT = 3


class InputRouter:
    """
    Routes moderngl_window events into ImGui.

    Usage:
        router = InputRouter(on_interaction=host.request_repaint)
        router.on_mouse_press(x, y, button)
    """

    def __init__(self, on_interaction: Optional[Callable[[], None]] = None):
        """
        Initialize input router.

        Args:
            on_interaction: Called on presses, scrolling and typed text
        """
        self.on_interaction = on_interaction

    def _interacted(self) -> None:
        if self.on_interaction is not None:
            self.on_interaction()

    def on_mouse_move(self, x: float, y: float) -> None:
        imgui.get_io().mouse_pos = (x, y)

    def on_mouse_press(self, x: float, y: float, button: int) -> None:
        self._set_mouse_button(x, y, button, True)
        self._interacted()

    def on_mouse_release(self, x: float, y: float, button: int) -> None:
        self._set_mouse_button(x, y, button, False)

    def _set_mouse_button(self, x: float, y: float, button: int, pressed: bool) -> None:
        io = imgui.get_io()
        io.mouse_pos = (x, y)
        # moderngl_window buttons start at 1, ImGui's at 0
        index = button - 1
        if 0 <= index < MOUSE_BUTTON_COUNT:
            io.mouse_down[index] = pressed

    def on_scroll(self, x_offset: float, y_offset: float) -> None:
        io = imgui.get_io()
        io.mouse_wheel_horizontal = x_offset
        io.mouse_wheel = y_offset
        self._interacted()

    def on_key(self, key: int, pressed: bool) -> None:
        io = imgui.get_io()
        if 0 <= key < len(io.keys_down):
            io.keys_down[key] = pressed
        if pressed:
            self._interacted()

    def on_text(self, char: str) -> None:
        imgui.get_io().add_input_character(ord(char))
        self._interacted()

"""
ImGui Layout

Layout backend that draws inspector widgets with pyimgui.

Every widget gets a per-frame sequential ID suffix so that members with the
same name on different objects do not share ImGui state. Call new_frame()
once at the start of each ImGui frame.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Type

import imgui
from pyrr import Vector3, Vector4

from ..config.settings import INDENT_WIDTH, TEXT_FIELD_MAX_LENGTH
from ..core.types import Color, Vector2
from .layout import Layout


class ImGuiLayout(Layout):
    """Immediate-mode layout on top of the active ImGui context."""

    def __init__(self, indent_width: float = INDENT_WIDTH):
        """
        Initialize ImGui layout.

        Args:
            indent_width: Horizontal offset per indent level (pixels)
        """
        self.indent_width = indent_width
        self._indent_level = 0
        self._widget_counter = 0
        # Open groups, innermost last: [is_horizontal, item_count]
        self._groups: list[list] = []

    def new_frame(self) -> None:
        """Reset per-frame widget IDs."""
        self._widget_counter = 0
        self._groups.clear()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _id(self, label: str) -> str:
        self._widget_counter += 1
        return f"{label}##inspector_{self._widget_counter}"

    def _next_item(self) -> None:
        """Keep items on the same line while a horizontal row is open."""
        if not self._groups or not self._groups[-1][0]:
            return
        if self._groups[-1][1] > 0:
            imgui.same_line()
        self._groups[-1][1] += 1

    # ------------------------------------------------------------------
    # Indentation
    # ------------------------------------------------------------------

    @property
    def indent_level(self) -> int:
        return self._indent_level

    @indent_level.setter
    def indent_level(self, level: int) -> None:
        level = max(0, level)
        delta = level - self._indent_level
        if delta > 0:
            imgui.indent(self.indent_width * delta)
        elif delta < 0:
            imgui.unindent(self.indent_width * -delta)
        self._indent_level = level

    # ------------------------------------------------------------------
    # Value widgets
    # ------------------------------------------------------------------

    def int_field(self, label: str, value: int) -> int:
        self._next_item()
        _, new_value = imgui.input_int(self._id(label), value)
        return new_value

    def float_field(self, label: str, value: float) -> float:
        self._next_item()
        _, new_value = imgui.input_float(self._id(label), value)
        return new_value

    def text_field(self, label: str, value: str) -> str:
        self._next_item()
        _, new_text = imgui.input_text(self._id(label), value, TEXT_FIELD_MAX_LENGTH)
        return new_text

    def toggle(self, label: str, value: bool) -> bool:
        self._next_item()
        _, state = imgui.checkbox(self._id(label), value)
        return state

    def vector2_field(self, label: str, value: Vector2) -> Vector2:
        self._next_item()
        changed, (x, y) = imgui.input_float2(self._id(label), float(value.x), float(value.y))
        return Vector2(x, y) if changed else value

    def vector3_field(self, label: str, value: Vector3) -> Vector3:
        self._next_item()
        changed, xyz = imgui.input_float3(
            self._id(label),
            float(value[0]),
            float(value[1]),
            float(value[2]),
        )
        return Vector3(list(xyz)) if changed else value

    def vector4_field(self, label: str, value: Vector4) -> Vector4:
        self._next_item()
        changed, xyzw = imgui.input_float4(
            self._id(label),
            float(value[0]),
            float(value[1]),
            float(value[2]),
            float(value[3]),
        )
        return Vector4(list(xyzw)) if changed else value

    def color_field(self, label: str, value: Color) -> Color:
        self._next_item()
        changed, rgba = imgui.color_edit4(self._id(label), *value.as_tuple())
        return Color(*rgba[:4]) if changed else value

    def enum_popup(self, label: str, value: Optional[Enum], enum_type: Type[Enum]) -> Optional[Enum]:
        self._next_item()
        members = list(enum_type)
        current = members.index(value) if value in members else -1
        changed, index = imgui.combo(self._id(label), current, [m.name for m in members])
        if changed and 0 <= index < len(members):
            return members[index]
        return value

    # ------------------------------------------------------------------
    # Read-only widgets
    # ------------------------------------------------------------------

    def object_field(self, label: str, obj: Any, value_type: type) -> None:
        self._next_item()
        type_name = getattr(value_type, "__name__", str(value_type))
        name = getattr(obj, "name", None) or type(obj).__name__
        imgui.input_text(
            self._id(label),
            f"{name} ({type_name})",
            TEXT_FIELD_MAX_LENGTH,
            imgui.INPUT_TEXT_READ_ONLY,
        )

    def empty_field(self, label: str) -> None:
        self._next_item()
        imgui.input_text(self._id(label), "", TEXT_FIELD_MAX_LENGTH, imgui.INPUT_TEXT_READ_ONLY)

    def readonly_text(self, label: str, text: str) -> None:
        self._next_item()
        imgui.input_text(self._id(label), text, TEXT_FIELD_MAX_LENGTH, imgui.INPUT_TEXT_READ_ONLY)

    def label(self, text: str) -> None:
        self._next_item()
        imgui.text(text)

    def centered_label(self, text: str) -> None:
        self._next_item()
        text_width = imgui.calc_text_size(text).x
        window_width = imgui.get_window_width()
        imgui.set_cursor_pos_x(max(0.0, (window_width - text_width) * 0.5))
        imgui.text(text)

    def button(self, label: str) -> bool:
        self._next_item()
        return imgui.button(self._id(label))

    def space(self) -> None:
        imgui.spacing()

    # ------------------------------------------------------------------
    # Grouping
    # ------------------------------------------------------------------

    def begin_horizontal(self) -> None:
        self._next_item()
        imgui.begin_group()
        self._groups.append([True, 0])

    def end_horizontal(self) -> None:
        if self._groups:
            self._groups.pop()
        imgui.end_group()

    def begin_vertical(self) -> None:
        self._next_item()
        imgui.begin_group()
        self._groups.append([False, 0])

    def end_vertical(self) -> None:
        if self._groups:
            self._groups.pop()
        imgui.end_group()

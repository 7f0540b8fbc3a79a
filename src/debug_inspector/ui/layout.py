"""
Inspector Layout Interface

The immediate-mode widget surface the inspector draws through.

Editing widgets take the current value and return the value the widget holds
after this frame (edited or not). Buttons return True on the frame they are
clicked. Implementations: ImGuiLayout (editor window) and RecordingLayout
(headless rendering and tests).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from enum import Enum
from typing import Any, Iterator, Optional, Type

from pyrr import Vector3, Vector4

from ..core.types import Color, Vector2


class Layout(ABC):
    """Abstract immediate-mode layout used by the inspector and editors."""

    # ------------------------------------------------------------------
    # Indentation
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def indent_level(self) -> int:
        """Current nesting depth for subsequent widgets."""

    @indent_level.setter
    @abstractmethod
    def indent_level(self, level: int) -> None:
        ...

    # ------------------------------------------------------------------
    # Value widgets
    # ------------------------------------------------------------------

    @abstractmethod
    def int_field(self, label: str, value: int) -> int:
        ...

    @abstractmethod
    def float_field(self, label: str, value: float) -> float:
        ...

    @abstractmethod
    def text_field(self, label: str, value: str) -> str:
        ...

    @abstractmethod
    def toggle(self, label: str, value: bool) -> bool:
        ...

    @abstractmethod
    def vector2_field(self, label: str, value: Vector2) -> Vector2:
        ...

    @abstractmethod
    def vector3_field(self, label: str, value: Vector3) -> Vector3:
        ...

    @abstractmethod
    def vector4_field(self, label: str, value: Vector4) -> Vector4:
        ...

    @abstractmethod
    def color_field(self, label: str, value: Color) -> Color:
        ...

    @abstractmethod
    def enum_popup(self, label: str, value: Optional[Enum], enum_type: Type[Enum]) -> Optional[Enum]:
        ...

    # ------------------------------------------------------------------
    # Read-only widgets
    # ------------------------------------------------------------------

    @abstractmethod
    def object_field(self, label: str, obj: Any, value_type: type) -> None:
        """Read-only reference to an engine object."""

    @abstractmethod
    def empty_field(self, label: str) -> None:
        """Disabled text field without content (absent values)."""

    @abstractmethod
    def readonly_text(self, label: str, text: str) -> None:
        ...

    @abstractmethod
    def label(self, text: str) -> None:
        ...

    @abstractmethod
    def centered_label(self, text: str) -> None:
        ...

    @abstractmethod
    def button(self, label: str) -> bool:
        ...

    @abstractmethod
    def space(self) -> None:
        ...

    # ------------------------------------------------------------------
    # Grouping
    # ------------------------------------------------------------------

    @abstractmethod
    def begin_horizontal(self) -> None:
        ...

    @abstractmethod
    def end_horizontal(self) -> None:
        ...

    @abstractmethod
    def begin_vertical(self) -> None:
        ...

    @abstractmethod
    def end_vertical(self) -> None:
        ...

    @contextmanager
    def horizontal(self) -> Iterator[None]:
        """Lay out the widgets drawn inside the block on one row."""
        self.begin_horizontal()
        try:
            yield
        finally:
            self.end_horizontal()

    @contextmanager
    def vertical(self) -> Iterator[None]:
        """Group the widgets drawn inside the block into one column."""
        self.begin_vertical()
        try:
            yield
        finally:
            self.end_vertical()

    @contextmanager
    def indented(self) -> Iterator[None]:
        """Increase the indent level for the duration of the block."""
        self.indent_level += 1
        try:
            yield
        finally:
            self.indent_level -= 1

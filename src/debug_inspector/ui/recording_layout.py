"""
Recording Layout

Headless layout that records every widget call instead of drawing it.
Used by the dump tool and by tests; scripted responses stand in for user
edits and button clicks.
"""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Deque, Dict, List, Optional, Tuple, Type

from pyrr import Vector3, Vector4

from ..core.types import Color, Vector2
from .layout import Layout

_NO_RESPONSE = object()


@dataclass
class WidgetRecord:
    """A single recorded widget call."""

    kind: str
    label: str
    value: Any = None
    indent: int = 0


class RecordingLayout(Layout):
    """Layout that stores widget calls as WidgetRecord entries."""

    def __init__(self):
        self.records: List[WidgetRecord] = []
        self._indent_level = 0
        self._responses: Dict[Tuple[str, str], Deque[Any]] = defaultdict(deque)

    def respond(self, kind: str, label: str, value: Any, times: int = 1) -> None:
        """
        Script the value a widget returns on its next call(s).

        Args:
            kind: Widget kind ("int", "button", "toggle", ...)
            label: Widget label
            value: Value to return instead of the current one
            times: Number of calls the response applies to
        """
        self._responses[(kind, label)].extend([value] * times)

    def clear(self) -> None:
        """Forget recorded widgets (scripted responses are kept)."""
        self.records.clear()
        self._indent_level = 0

    def _record(self, kind: str, label: str, value: Any = None) -> Any:
        self.records.append(WidgetRecord(kind, label, value, self._indent_level))
        pending = self._responses.get((kind, label))
        if pending:
            return pending.popleft()
        return _NO_RESPONSE

    def _edit(self, kind: str, label: str, value: Any) -> Any:
        response = self._record(kind, label, value)
        return value if response is _NO_RESPONSE else response

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def labels(self, kind: Optional[str] = None) -> List[str]:
        """Labels of recorded widgets, optionally filtered by kind."""
        return [r.label for r in self.records if kind is None or r.kind == kind]

    def find(self, label: str) -> Optional[WidgetRecord]:
        """First recorded widget with the given label."""
        for record in self.records:
            if record.label == label:
                return record
        return None

    def format_records(self, indent: str = "  ") -> str:
        """Render the recording as an indented text tree."""
        lines = []
        for record in self.records:
            if record.kind in ("begin_horizontal", "end_horizontal", "begin_vertical", "end_vertical"):
                continue
            prefix = indent * record.indent
            if record.kind in ("label", "centered_label"):
                lines.append(f"{prefix}{record.label}")
            elif record.kind == "space":
                lines.append("")
            elif record.kind == "empty":
                lines.append(f"{prefix}{record.label}: <none>")
            else:
                lines.append(f"{prefix}{record.label} [{record.kind}]: {record.value}")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Indentation
    # ------------------------------------------------------------------

    @property
    def indent_level(self) -> int:
        return self._indent_level

    @indent_level.setter
    def indent_level(self, level: int) -> None:
        self._indent_level = max(0, level)

    # ------------------------------------------------------------------
    # Value widgets
    # ------------------------------------------------------------------

    def int_field(self, label: str, value: int) -> int:
        return self._edit("int", label, value)

    def float_field(self, label: str, value: float) -> float:
        return self._edit("float", label, value)

    def text_field(self, label: str, value: str) -> str:
        return self._edit("text", label, value)

    def toggle(self, label: str, value: bool) -> bool:
        return self._edit("toggle", label, value)

    def vector2_field(self, label: str, value: Vector2) -> Vector2:
        return self._edit("vector2", label, value)

    def vector3_field(self, label: str, value: Vector3) -> Vector3:
        return self._edit("vector3", label, value)

    def vector4_field(self, label: str, value: Vector4) -> Vector4:
        return self._edit("vector4", label, value)

    def color_field(self, label: str, value: Color) -> Color:
        return self._edit("color", label, value)

    def enum_popup(self, label: str, value: Optional[Enum], enum_type: Type[Enum]) -> Optional[Enum]:
        return self._edit("enum", label, value)

    # ------------------------------------------------------------------
    # Read-only widgets
    # ------------------------------------------------------------------

    def object_field(self, label: str, obj: Any, value_type: type) -> None:
        self._record("object", label, obj)

    def empty_field(self, label: str) -> None:
        self._record("empty", label)

    def readonly_text(self, label: str, text: str) -> None:
        self._record("readonly_text", label, text)

    def label(self, text: str) -> None:
        self._record("label", text)

    def centered_label(self, text: str) -> None:
        self._record("centered_label", text)

    def button(self, label: str) -> bool:
        response = self._record("button", label)
        return False if response is _NO_RESPONSE else bool(response)

    def space(self) -> None:
        self._record("space", "")

    # ------------------------------------------------------------------
    # Grouping
    # ------------------------------------------------------------------

    def begin_horizontal(self) -> None:
        self._record("begin_horizontal", "")

    def end_horizontal(self) -> None:
        self._record("end_horizontal", "")

    def begin_vertical(self) -> None:
        self._record("begin_vertical", "")

    def end_vertical(self) -> None:
        self._record("end_vertical", "")

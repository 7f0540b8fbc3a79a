"""
Inspector Value Types

Small value types the default renderers know how to draw.
Vector3 and Vector4 come straight from pyrr, like the rest of the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from pyrr import Vector3, Vector4

__all__ = ["Vector2", "Vector3", "Vector4", "Color"]


@dataclass
class Vector2:
    """Two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f})"


@dataclass
class Color:
    """RGBA color, components in the 0.0 - 1.0 range."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0, 1.0)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __str__(self) -> str:
        return f"RGBA({self.r:.3f}, {self.g:.3f}, {self.b:.3f}, {self.a:.3f})"

"""
Sample Component

Component exercising every inspector path: primitives, vectors, colors,
enums (through SampleType), nested inspectables and an unmarked field.
"""

from __future__ import annotations

from typing import Optional

from pyrr import Vector3

from ..core.markers import inspect_field, inspectable, inspectable_property
from ..core.types import Color
from ..scene.objects import Component
from .sample_types import SampleType


@inspectable
class SampleComponent(Component):
    """Counts elapsed time and exposes a handful of inspectable members."""

    _sample_int: int = inspect_field(0)
    _sample_float: float = inspect_field(0.0)

    # Not marked: never shown by the inspector
    ignore_inspection = 1

    def __init__(self):
        super().__init__()
        self._sample_boolean = False
        self._sample_type: Optional[SampleType] = None

    @inspectable_property
    def sample_boolean(self) -> bool:
        return self._sample_boolean

    @inspectable_property
    def sample_vector3(self) -> Vector3:
        return self.transform.position

    @inspectable_property
    def sample_color(self) -> Color:
        return Color.black()

    @inspectable_property
    def sample_type(self) -> Optional[SampleType]:
        return self._sample_type

    @sample_type.setter
    def sample_type(self, value: Optional[SampleType]):
        self._sample_type = value

    def start(self) -> None:
        self._sample_int = 42
        self._sample_float = 0.0
        self._sample_boolean = True
        self.sample_type = SampleType()

    def update(self, dt: float) -> None:
        self._sample_float += dt

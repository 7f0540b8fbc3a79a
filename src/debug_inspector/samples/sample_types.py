"""
Sample Types

Plain (non-component) inspectable types used by the sample scene.
"""

from __future__ import annotations

from enum import Enum

from ..core.markers import inspectable, inspectable_property
from ..core.types import Vector2


class SampleEnum(Enum):
    YUNO = 0
    MIYAKO = 1
    SAE = 2
    HIRO = 3


@inspectable
class SampleType:
    """Nested value shown indented under the component that holds it."""

    def __init__(self):
        self._sample_vector2 = Vector2.one()
        self._sample_enum = SampleEnum.YUNO

    @inspectable_property
    def sample_vector2(self) -> Vector2:
        return self._sample_vector2

    @sample_vector2.setter
    def sample_vector2(self, value: Vector2):
        self._sample_vector2 = value

    @inspectable_property
    def sample_enum(self) -> SampleEnum:
        return self._sample_enum

    def __str__(self) -> str:
        return f"SampleType({self._sample_vector2}, {self._sample_enum.name})"

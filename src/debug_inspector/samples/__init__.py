"""
Samples

Sample components and the demo scene.
"""

from .sample_types import SampleEnum, SampleType
from .sample_component import SampleComponent
from .sample_scene import build_sample_scene

__all__ = [
    "SampleEnum",
    "SampleType",
    "SampleComponent",
    "build_sample_scene",
]

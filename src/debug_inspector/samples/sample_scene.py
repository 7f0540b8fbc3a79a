"""
Sample Scene

Builds the demo scene: a debugging inspector object plus a few sample
components, one of them nested under a parent object.
"""

from __future__ import annotations

from typing import Tuple

from pyrr import Vector3

from ..config.settings import SAMPLE_OBJECT_COUNT
from ..editor.debugging_inspector import DebuggingInspector
from ..scene.objects import GameObject, Scene
from .sample_component import SampleComponent


def build_sample_scene(sample_count: int = SAMPLE_OBJECT_COUNT) -> Tuple[Scene, DebuggingInspector]:
    """
    Create the sample scene.

    Args:
        sample_count: Number of root objects carrying a SampleComponent

    Returns:
        Tuple of (scene, debugging inspector component)
    """
    scene = Scene("Sample Scene")

    inspector_object = scene.add_root(GameObject("Debugging Inspector"))
    debugging_inspector = inspector_object.add_component(DebuggingInspector)

    for i in range(sample_count):
        sample = scene.add_root(GameObject(f"Sample {i}", Vector3([float(i) * 2.0, 0.0, 0.0])))
        sample.add_component(SampleComponent)

    # A nested sample, found through its parent's hierarchy
    parent = scene.add_root(GameObject("Group"))
    child = parent.add_child(GameObject("Nested Sample", Vector3([0.0, 1.0, 0.0])))
    child.add_component(SampleComponent)

    return scene, debugging_inspector

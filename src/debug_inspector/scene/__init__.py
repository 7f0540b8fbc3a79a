"""
Scene Module

Host object model and discovery of inspectable components.
"""

from .objects import Component, EngineObject, GameObject, Scene, Transform
from .discovery import (
    all_root_objects,
    child_components_of,
    display_name,
    find_inspectable_components,
    is_inspectable_component,
)

__all__ = [
    "Component",
    "EngineObject",
    "GameObject",
    "Scene",
    "Transform",
    "all_root_objects",
    "child_components_of",
    "display_name",
    "find_inspectable_components",
    "is_inspectable_component",
]

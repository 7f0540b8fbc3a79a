"""
Inspectable Object Discovery

Finds the components in a scene whose type carries the inspection marker.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from ..core.markers import has_marker
from .objects import Component, GameObject, Scene

logger = logging.getLogger(__name__)


def all_root_objects(scene: Scene) -> Iterator[GameObject]:
    """Yield the top-level game objects of the scene."""
    yield from scene.root_objects()


def child_components_of(root: GameObject) -> Iterator[Component]:
    """Yield the components of root and all of its descendants."""
    yield from root.get_components_in_children(Component)


def is_inspectable_component(component: Optional[Component]) -> bool:
    """
    Check whether a component should be listed by the inspector.

    Only the component's own class counts: a marker on a base class does not
    make subclasses show up.
    """
    if component is None:
        return False
    return has_marker(type(component), inherit=False)


def find_inspectable_components(scene: Scene) -> Iterator[Component]:
    """
    Yield every inspectable component in the scene.

    Args:
        scene: Scene to scan

    Yields:
        Components whose class carries the marker, root by root
    """
    for root in all_root_objects(scene):
        for component in child_components_of(root):
            if is_inspectable_component(component):
                yield component


def display_name(component: Component) -> str:
    """Header shown above a component's members."""
    if component.game_object is not None:
        return component.game_object.name
    return type(component).__name__

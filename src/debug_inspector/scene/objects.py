"""
Scene Objects

Host-side object model observed by the inspector: game objects arranged in
a hierarchy, each carrying a transform and a list of components.

The inspector never owns these objects; they are created and destroyed by
the scene.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Type, TypeVar, Union

from pyrr import Vector3

C = TypeVar("C", bound="Component")


class EngineObject:
    """
    Base class for engine-managed object handles.

    Values deriving from EngineObject are shown as object references by the
    inspector rather than expanded.
    """

    name: str

    def __str__(self) -> str:
        return f"{self.name} ({type(self).__name__})"


class Component(EngineObject):
    """
    Behaviour attached to a GameObject.

    Subclasses override start() and update() for per-frame logic.
    """

    def __init__(self):
        self.game_object: Optional[GameObject] = None
        self.started = False

    @property
    def name(self) -> str:
        """Components are named after the game object they belong to."""
        if self.game_object is None:
            return type(self).__name__
        return self.game_object.name

    @property
    def transform(self) -> Optional["Transform"]:
        if self.game_object is None:
            return None
        return self.game_object.transform

    def start(self) -> None:
        """Called once before the first update."""

    def update(self, dt: float) -> None:
        """
        Called every frame.

        Args:
            dt: Time since last frame (seconds)
        """


class Transform(Component):
    """World-space placement of a GameObject."""

    def __init__(self, position: Optional[Vector3] = None):
        super().__init__()
        self.position = Vector3(position) if position is not None else Vector3([0.0, 0.0, 0.0])


class GameObject(EngineObject):
    """
    Node in the scene hierarchy.

    Each game object has:
    - A Transform (always the first component)
    - Any number of additional components
    - Child game objects
    """

    def __init__(self, name: str = "GameObject", position: Optional[Vector3] = None):
        """
        Initialize game object.

        Args:
            name: Display name
            position: Initial world position (origin if None)
        """
        self.name = name
        self.parent: Optional[GameObject] = None
        self.children: List[GameObject] = []
        self.components: List[Component] = []
        self.transform = self.add_component(Transform(position))

    def add_component(self, component: Union[Component, Type[C]]) -> C:
        """
        Attach a component.

        Args:
            component: Component instance, or component class to instantiate

        Returns:
            The attached component
        """
        if isinstance(component, type):
            component = component()
        if component.game_object is not None and component.game_object is not self:
            raise ValueError(f"{type(component).__name__} is already attached to '{component.game_object.name}'")
        component.game_object = self
        self.components.append(component)
        return component

    def get_component(self, component_type: Type[C]) -> Optional[C]:
        """First component that is an instance of component_type."""
        for component in self.components:
            if isinstance(component, component_type):
                return component
        return None

    def add_child(self, child: GameObject) -> GameObject:
        """Parent child under this object and return it."""
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def iter_hierarchy(self) -> Iterator[GameObject]:
        """This object followed by all descendants, depth-first."""
        yield self
        for child in self.children:
            yield from child.iter_hierarchy()

    def get_components_in_children(self, component_type: Type[C] = Component) -> List[C]:
        """Components of this object and all descendants, depth-first."""
        return [
            component
            for game_object in self.iter_hierarchy()
            for component in game_object.components
            if isinstance(component, component_type)
        ]


class Scene:
    """
    Manages the root game objects of a scene.

    Provides the hierarchy iteration the inspector discovers objects with,
    and drives component lifecycle each frame.
    """

    def __init__(self, name: str = "Scene"):
        self.name = name
        self._roots: List[GameObject] = []

    def add_root(self, game_object: GameObject) -> GameObject:
        """Add a top-level game object."""
        self._roots.append(game_object)
        return game_object

    def remove_root(self, game_object: GameObject) -> None:
        self._roots.remove(game_object)

    def clear(self) -> None:
        """Remove all objects from the scene"""
        self._roots.clear()

    def root_objects(self) -> List[GameObject]:
        """Top-level game objects, in insertion order."""
        return list(self._roots)

    def iter_game_objects(self) -> Iterator[GameObject]:
        for root in self._roots:
            yield from root.iter_hierarchy()

    def get_object_count(self) -> int:
        return sum(1 for _ in self.iter_game_objects())

    def start(self) -> None:
        """Call start() on every component that has not started yet."""
        for game_object in list(self.iter_game_objects()):
            for component in list(game_object.components):
                if not component.started:
                    component.started = True
                    component.start()

    def update(self, dt: float) -> None:
        """
        Advance the scene by one frame.

        Args:
            dt: Time since last frame (seconds)
        """
        self.start()
        for game_object in list(self.iter_game_objects()):
            for component in list(game_object.components):
                component.update(dt)

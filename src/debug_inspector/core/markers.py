"""
Inspection Markers

Zero-data tags that opt types and members into the debugging inspector.

A marker is an ``Inspectable`` instance. Presence is always checked by the
identity of the tag type, never by attribute name or string comparison, so a
look-alike object stored under the same attribute does not count.

Usage:
    @inspectable
    class Enemy(Component):
        health = inspect_field(100)
        _target = inspect_field(None, value_type=Vector3)

        @inspectable_property
        def speed(self) -> float:
            return self._speed
"""

from __future__ import annotations

from typing import Any, Callable, Optional

MARKER_ATTRIBUTE = "__inspectable__"


class Inspectable:
    """The inspection tag. Carries no data."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Inspectable()"


def is_marker(tag: Any) -> bool:
    """Return True if ``tag`` is an inspection marker."""
    return type(tag) is Inspectable


def has_marker(cls: type, inherit: bool = True) -> bool:
    """
    Check whether a type carries the inspection marker.

    Args:
        cls: Type to check
        inherit: Also accept a marker on any base class

    Returns:
        True if the marker is present
    """
    if not isinstance(cls, type):
        return False
    if not inherit:
        return is_marker(cls.__dict__.get(MARKER_ATTRIBUTE))
    return any(is_marker(klass.__dict__.get(MARKER_ATTRIBUTE)) for klass in cls.__mro__)


def member_has_marker(member: Any) -> bool:
    """Return True if a class member (field descriptor or property) is marked."""
    return is_marker(getattr(member, MARKER_ATTRIBUTE, None))


class InspectableField:
    """
    Data descriptor for a marked field.

    Instance fields keep their value in the instance ``__dict__``. Static
    fields keep a single value on the descriptor, shared by every instance and
    readable from the class itself.
    """

    def __init__(
        self,
        default: Any = None,
        *,
        default_factory: Optional[Callable[[], Any]] = None,
        value_type: Optional[type] = None,
        static: bool = False,
    ):
        if default is not None and default_factory is not None:
            raise ValueError("inspect_field: pass either default or default_factory, not both")
        self.default = default
        self.default_factory = default_factory
        self.value_type = value_type
        self.static = static
        self.name: str | None = None
        self.owner: type | None = None
        self._static_value = default_factory() if (static and default_factory) else default
        setattr(self, MARKER_ATTRIBUTE, Inspectable())

    def __set_name__(self, owner: type, name: str):
        self.name = name
        self.owner = owner

    def __get__(self, instance, owner=None):
        if self.static:
            return self._static_value
        if instance is None:
            return self
        try:
            return instance.__dict__[self.name]
        except KeyError:
            if self.default_factory is None:
                return self.default
            value = self.default_factory()
            instance.__dict__[self.name] = value
            return value

    def __set__(self, instance, value):
        if self.static:
            self._static_value = value
            return
        instance.__dict__[self.name] = value

    def __repr__(self) -> str:
        scope = "static" if self.static else "instance"
        return f"InspectableField({self.name!r}, {scope})"


class InspectableProperty(property):
    """A ``property`` that carries the inspection marker."""

    def __init__(self, fget=None, fset=None, fdel=None, doc=None):
        super().__init__(fget, fset, fdel, doc)
        setattr(self, MARKER_ATTRIBUTE, Inspectable())


def inspect_field(default: Any = None, **options) -> InspectableField:
    """
    Sugar: ``hp = inspect_field(100)``.

    options → default_factory, value_type, static
    """
    return InspectableField(default, **options)


inspectable_property = InspectableProperty


def inspectable(target):
    """
    Attach the inspection marker.

    Decorating a class tags the type itself. Applied to an existing
    ``property`` it returns an equivalent marked property.
    """
    if isinstance(target, type):
        setattr(target, MARKER_ATTRIBUTE, Inspectable())
        return target
    if isinstance(target, property):
        return InspectableProperty(target.fget, target.fset, target.fdel, target.__doc__)
    raise TypeError(f"inspectable() expects a class or a property, got {type(target).__name__}")

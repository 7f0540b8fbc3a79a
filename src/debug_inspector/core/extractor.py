"""
Member Extraction

Finds the marked fields and properties of a type.

Extraction is lazy and never cached: every call walks the class hierarchy
again, so members added or replaced at runtime show up on the next pass.
Order is base classes first, then declaration order; callers should not
depend on it.
"""

from __future__ import annotations

import logging
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Final, Iterator, Optional, Union

from .markers import InspectableField, member_has_marker

logger = logging.getLogger(__name__)


class MemberKind(Enum):
    """Kind of extracted member."""

    FIELD = "field"
    PROPERTY = "property"


@dataclass(frozen=True)
class MemberDescriptor:
    """
    Name, declared type and accessor of one marked member.

    name          – attribute name (also the display name)
    declared_type – type used for renderer dispatch
    kind          – field or property
    is_static     – field shared at class scope
    accessor      – callable reading the current value from an instance
    """

    name: str
    declared_type: Any
    kind: MemberKind
    is_static: bool
    accessor: Callable[[Any], Any]

    def read(self, obj: Any) -> Any:
        """Read the member's current value from obj."""
        return self.accessor(obj)


def unwrap_optional(annotation: Any) -> Any:
    """
    Turn Optional[T] (or T | None) into T; other annotations pass through.

    ClassVar[T] and Final[T] qualifiers are stripped first.
    """
    while typing.get_origin(annotation) in (ClassVar, Final):
        annotation = typing.get_args(annotation)[0]

    origin = typing.get_origin(annotation)
    if origin is Union or origin is getattr(types, "UnionType", None):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _type_hints(target: Any) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError) as e:
        logger.debug("Could not resolve annotations of %r: %s", target, e)
        return {}


def _owner_of(cls: type, name: str) -> Optional[type]:
    """Most-derived class in cls.__mro__ that defines name."""
    for klass in cls.__mro__:
        if name in klass.__dict__:
            return klass
    return None


def _field_type(field: InspectableField, annotation: Any) -> Any:
    if field.value_type is not None:
        return field.value_type
    if annotation is not None:
        return unwrap_optional(annotation)
    if field.default is not None:
        return type(field.default)
    return object


def _describe_field(name: str, field: InspectableField, hints: Dict[str, Any]) -> MemberDescriptor:
    def read_field(obj: Any, _field=field) -> Any:
        return _field.__get__(obj, type(obj))

    return MemberDescriptor(
        name=name,
        declared_type=_field_type(field, hints.get(name)),
        kind=MemberKind.FIELD,
        is_static=field.static,
        accessor=read_field,
    )


def _describe_property(name: str, prop: property) -> MemberDescriptor:
    annotation = _type_hints(prop.fget).get("return")
    declared_type = unwrap_optional(annotation) if annotation is not None else object

    def read_property(obj: Any, _getter=prop.fget) -> Any:
        return _getter(obj)

    return MemberDescriptor(
        name=name,
        declared_type=declared_type,
        kind=MemberKind.PROPERTY,
        is_static=False,
        accessor=read_property,
    )


def extract_members(cls: type) -> Iterator[MemberDescriptor]:
    """
    Yield a MemberDescriptor for every marked member of cls.

    Covers static and instance fields and properties, public and non-public
    names, declared on cls or inherited. A redefinition in a subclass shadows
    the base class member, marked or not.

    Args:
        cls: Type to extract members from

    Yields:
        MemberDescriptor per marked member
    """
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue

        hints: Optional[Dict[str, Any]] = None
        for name, member in list(klass.__dict__.items()):
            if not isinstance(member, (InspectableField, property)):
                continue
            if not member_has_marker(member):
                continue
            if _owner_of(cls, name) is not klass:
                continue

            if isinstance(member, InspectableField):
                if hints is None:
                    hints = _type_hints(klass)
                yield _describe_field(name, member, hints)
            elif member.fget is None:
                logger.debug("Skipping write-only property %s.%s", klass.__name__, name)
            else:
                yield _describe_property(name, member)

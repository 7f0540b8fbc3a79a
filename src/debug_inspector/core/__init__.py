"""
Inspector Core

Markers, renderer registry, member extraction and the recursive inspector.
"""

from .errors import ConfigurationError, InspectionValueError, InspectorError
from .markers import (
    Inspectable,
    InspectableField,
    InspectableProperty,
    has_marker,
    inspect_field,
    inspectable,
    inspectable_property,
)
from .types import Color, Vector2, Vector3, Vector4
from .registry import RendererRegistry, create_default_registry, register_default_renderers
from .extractor import MemberDescriptor, MemberKind, extract_members
from .inspector import Inspector

__all__ = [
    "ConfigurationError",
    "InspectionValueError",
    "InspectorError",
    "Inspectable",
    "InspectableField",
    "InspectableProperty",
    "has_marker",
    "inspect_field",
    "inspectable",
    "inspectable_property",
    "Color",
    "Vector2",
    "Vector3",
    "Vector4",
    "RendererRegistry",
    "create_default_registry",
    "register_default_renderers",
    "MemberDescriptor",
    "MemberKind",
    "extract_members",
    "Inspector",
]

"""
Debugging Inspector - ImGui scene inspector for a ModernGL engine

Scans a running scene for components tagged as inspectable and draws
editable widgets for their marked fields and properties.
"""

# Core
from .core import (
    Color,
    ConfigurationError,
    InspectionValueError,
    Inspector,
    InspectorError,
    MemberDescriptor,
    MemberKind,
    RendererRegistry,
    Vector2,
    Vector3,
    Vector4,
    create_default_registry,
    extract_members,
    has_marker,
    inspect_field,
    inspectable,
    inspectable_property,
)

# Scene
from .scene import Component, GameObject, Scene, Transform, find_inspectable_components

# Editor
from .editor import (
    DebuggingInspector,
    DebuggingInspectorEditor,
    EditorContext,
    EditorHost,
    EditorRegistry,
    register_debugging_inspector,
)

# UI
from .ui import Layout, RecordingLayout

__version__ = "0.1.0"
__all__ = [
    # Core
    "Color",
    "ConfigurationError",
    "InspectionValueError",
    "Inspector",
    "InspectorError",
    "MemberDescriptor",
    "MemberKind",
    "RendererRegistry",
    "Vector2",
    "Vector3",
    "Vector4",
    "create_default_registry",
    "extract_members",
    "has_marker",
    "inspect_field",
    "inspectable",
    "inspectable_property",
    # Scene
    "Component",
    "GameObject",
    "Scene",
    "Transform",
    "find_inspectable_components",
    # Editor
    "DebuggingInspector",
    "DebuggingInspectorEditor",
    "EditorContext",
    "EditorHost",
    "EditorRegistry",
    "register_debugging_inspector",
    # UI
    "Layout",
    "RecordingLayout",
]

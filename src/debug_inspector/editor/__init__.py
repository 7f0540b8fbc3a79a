"""
Editor Module

Custom editor registry, the debugging inspector editor and its host.
"""

from .custom_editor import Editor, EditorContext, EditorRegistry
from .debugging_inspector import (
    DebuggingInspector,
    DebuggingInspectorEditor,
    register_debugging_inspector,
)
from .host import EditorHost

__all__ = [
    "Editor",
    "EditorContext",
    "EditorRegistry",
    "DebuggingInspector",
    "DebuggingInspectorEditor",
    "register_debugging_inspector",
    "EditorHost",
]

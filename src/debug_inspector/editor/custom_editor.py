"""
Custom Editors

Editors draw the inspector panel for one selected target. The
EditorRegistry maps target component types to the editor class that draws
them; the host asks it for an editor whenever the selection changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type, TYPE_CHECKING

from ..core.errors import ConfigurationError

if TYPE_CHECKING:
    from ..core.inspector import Inspector
    from ..scene.objects import Scene
    from ..ui.layout import Layout

logger = logging.getLogger(__name__)


@dataclass
class EditorContext:
    """Everything an editor needs to draw: the scene and the inspector."""

    scene: "Scene"
    inspector: "Inspector"

    @property
    def layout(self) -> "Layout":
        return self.inspector.layout


class Editor:
    """Base class for custom editors."""

    def __init__(self, target: Any, context: EditorContext):
        """
        Initialize editor.

        Args:
            target: Object the editor is drawn for
            context: Scene and inspector shared by all editors
        """
        self.target = target
        self.context = context

    @property
    def layout(self) -> "Layout":
        return self.context.layout

    @property
    def inspector(self) -> "Inspector":
        return self.context.inspector

    def draw_default_inspector(self) -> None:
        """Draw the target's own marked members."""
        self.inspector.inspect(self.target)

    def on_inspector_gui(self) -> None:
        """Draw the editor. Called once per redraw."""
        self.draw_default_inspector()


class EditorRegistry:
    """Maps target types to custom editor classes (exact type match)."""

    def __init__(self):
        self._editors: Dict[type, Type[Editor]] = {}

    def register(self, target_type: type, editor_cls: Type[Editor]) -> None:
        """
        Register the editor class for a target type.

        Raises:
            ConfigurationError: If the target type already has an editor
        """
        if target_type in self._editors:
            raise ConfigurationError(
                f"Editor already registered for '{target_type.__name__}': "
                f"{self._editors[target_type].__name__}"
            )
        self._editors[target_type] = editor_cls
        logger.debug("Registered %s for %s", editor_cls.__name__, target_type.__name__)

    def editor_for(self, target_type: type) -> Callable[[Type[Editor]], Type[Editor]]:
        """
        [DECORATOR] Register the decorated Editor class for target_type.

        Usage:
            @editors.editor_for(DebuggingInspector)
            class DebuggingInspectorEditor(Editor):
                ...
        """

        def decorator(editor_cls: Type[Editor]) -> Type[Editor]:
            self.register(target_type, editor_cls)
            return editor_cls

        return decorator

    def lookup(self, target_type: type) -> Optional[Type[Editor]]:
        return self._editors.get(target_type)

    def create_editor(self, target: Any, context: EditorContext) -> Optional[Editor]:
        """Instantiate the registered editor for target, or None."""
        editor_cls = self.lookup(type(target))
        if editor_cls is None:
            return None
        return editor_cls(target, context)

"""
Editor Host

Owns the selected target's editor and decides when the inspector panel has
to be repainted.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .custom_editor import Editor, EditorContext, EditorRegistry

logger = logging.getLogger(__name__)


class EditorHost:
    """
    Drives custom editors for the current selection.

    A repaint is needed after selection changes, after explicit requests
    (user input) and whenever the selected target is marked dirty.
    """

    def __init__(self, registry: EditorRegistry, context: EditorContext):
        """
        Initialize editor host.

        Args:
            registry: Editor classes per target type
            context: Scene and inspector handed to every editor
        """
        self.registry = registry
        self.context = context
        self.selection: Optional[Any] = None
        self.editor: Optional[Editor] = None
        self._repaint_requested = False

    def select(self, target: Optional[Any]) -> Optional[Editor]:
        """
        Select a target and create its editor.

        Returns:
            The editor, or None if no editor is registered for the target type
        """
        self.selection = target
        self.editor = None if target is None else self.registry.create_editor(target, self.context)
        if target is not None and self.editor is None:
            logger.info("No custom editor registered for %s", type(target).__name__)
        self.request_repaint()
        return self.editor

    def request_repaint(self) -> None:
        self._repaint_requested = True

    @property
    def needs_repaint(self) -> bool:
        if self._repaint_requested:
            return True
        return bool(getattr(self.selection, "dirty", False))

    def repaint(self) -> None:
        """
        Run one render pass of the current editor.

        Errors raised while drawing propagate to the caller, which reports
        them; the pass is not retried.
        """
        self._repaint_requested = False
        clear_dirty = getattr(self.selection, "clear_dirty", None)
        if clear_dirty is not None:
            clear_dirty()
        if self.editor is not None:
            self.editor.on_inspector_gui()

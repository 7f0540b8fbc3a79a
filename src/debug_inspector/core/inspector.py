"""
Recursive Inspector

Draws the marked members of an object, dispatching each value to a
registered renderer, an object/enum picker, or a nested inspection.

Edits made through the generated widgets are not written back to the
inspected members: the widget's return value is discarded, making the
panel a read-only debug view of live values.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, TYPE_CHECKING

from ..config.settings import MAX_NESTING_DEPTH
from ..scene.objects import EngineObject
from .extractor import extract_members
from .markers import has_marker

if TYPE_CHECKING:
    from ..ui.layout import Layout
    from .registry import RendererRegistry

logger = logging.getLogger(__name__)


class Inspector:
    """Walks inspectable objects and renders their members."""

    def __init__(
        self,
        registry: "RendererRegistry",
        layout: "Layout",
        max_depth: int = MAX_NESTING_DEPTH,
    ):
        """
        Initialize inspector.

        Args:
            registry: Renderer registry used for value widgets
            layout: Layout the widgets are drawn with
            max_depth: Deepest nested inspection before falling back to text
        """
        self.registry = registry
        self.layout = layout
        self.max_depth = max_depth
        self._depth = 0

    def inspect(self, obj: Any) -> None:
        """
        Render every marked member of obj.

        Exceptions raised by member getters propagate unchanged and abort
        the inspection of obj.
        """
        for member in extract_members(type(obj)):
            self.inspect_value(member.name, member.declared_type, member.read(obj))

    def inspect_value(self, name: str, declared_type: Any, value: Any) -> None:
        """
        Render one value. First match wins:

        1. renderer registered for declared_type
        2. engine object handle   → object reference field
        3. enum declared type     → enum popup (absent values fall through)
        4. absent value           → empty field
        5. inspectable value type → label + nested inspection
        6. anything else          → read-only text of str(value)
        """
        render = self.registry.lookup(declared_type)
        if render is not None:
            render(name, value)
            return

        if isinstance(value, EngineObject):
            self.layout.object_field(name, value, declared_type)
            return

        if value is not None and isinstance(declared_type, type) and issubclass(declared_type, Enum):
            self.layout.enum_popup(name, value, declared_type)
            return

        if value is None:
            self.layout.empty_field(name)
            return

        if has_marker(type(value)):
            self._inspect_nested(name, value)
            return

        self.layout.readonly_text(name, str(value))

    def _inspect_nested(self, name: str, value: Any) -> None:
        if self._depth >= self.max_depth:
            logger.warning(
                "Nesting deeper than %d at member '%s' (%s); showing as text",
                self.max_depth,
                name,
                type(value).__name__,
            )
            self.layout.readonly_text(name, str(value))
            return

        self.layout.label(name)
        self._depth += 1
        try:
            with self.layout.indented():
                self.inspect(value)
        finally:
            self._depth -= 1

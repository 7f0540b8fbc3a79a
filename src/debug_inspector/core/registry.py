"""
Renderer Registry

Maps value types to the render functions that draw them in the inspector.

A render function takes (name, value), draws a widget and returns the value
the widget holds. Lookup is by exact type, so subclasses (bool for int, for
example) never pick up a base type's renderer.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

from pyrr import Vector3, Vector4

from .errors import ConfigurationError, InspectionValueError
from .types import Color, Vector2

if TYPE_CHECKING:
    from ..ui.layout import Layout

logger = logging.getLogger(__name__)

RenderFunction = Callable[[str, Any], Any]


class RendererRegistry:
    """
    Type-to-widget registry.

    Constructed once at startup and handed to the Inspector. Entries are
    expected to be registered before the first render pass; the registry is
    not thread-safe.
    """

    def __init__(self):
        self._renderers: Dict[type, RenderFunction] = {}

    def register(self, value_type: type, render_fn: RenderFunction) -> None:
        """
        Register the renderer for a value type.

        Args:
            value_type: Exact type drawn by the renderer
            render_fn: Callable taking (name, value)

        Raises:
            ConfigurationError: If the type already has a renderer
        """
        if value_type in self._renderers:
            raise ConfigurationError(
                f"Renderer already registered for type '{_type_name(value_type)}'"
            )
        self._renderers[value_type] = render_fn
        logger.debug("Registered renderer for %s", _type_name(value_type))

    def lookup(self, value_type: type) -> Optional[RenderFunction]:
        """Return the renderer registered for value_type, or None."""
        return self._renderers.get(value_type)

    def registered_types(self) -> List[type]:
        """Types with a registered renderer, in registration order."""
        return list(self._renderers)

    def __contains__(self, value_type: type) -> bool:
        return value_type in self._renderers

    def __len__(self) -> int:
        return len(self._renderers)


def _type_name(value_type: Any) -> str:
    return getattr(value_type, "__name__", repr(value_type))


def _typed_renderer(value_type: type, widget: Callable[[str, Any], Any], convert=None) -> RenderFunction:
    """Wrap a layout widget so it refuses absent values."""

    def render(name: str, value: Any) -> Any:
        if value is None:
            raise InspectionValueError(
                f"Renderer for '{_type_name(value_type)}' cannot draw absent value of member '{name}'"
            )
        return widget(name, convert(value) if convert else value)

    render.__name__ = f"render_{_type_name(value_type).lower()}"
    return render


def register_default_renderers(registry: RendererRegistry, layout: "Layout") -> RendererRegistry:
    """
    Register the built-in renderers, drawing through the given layout.

    Covers int, str, bool, float, Vector2, Vector3, Vector4 and Color.
    """
    registry.register(int, _typed_renderer(int, layout.int_field, int))
    registry.register(str, _typed_renderer(str, layout.text_field, str))
    registry.register(bool, _typed_renderer(bool, layout.toggle, bool))
    registry.register(float, _typed_renderer(float, layout.float_field, float))
    registry.register(Vector2, _typed_renderer(Vector2, layout.vector2_field))
    registry.register(Vector3, _typed_renderer(Vector3, layout.vector3_field))
    registry.register(Vector4, _typed_renderer(Vector4, layout.vector4_field))
    registry.register(Color, _typed_renderer(Color, layout.color_field))
    return registry


def create_default_registry(layout: "Layout") -> RendererRegistry:
    """Create a registry pre-populated with the built-in renderers."""
    return register_default_renderers(RendererRegistry(), layout)

"""Tests for the renderer registry"""

import pytest
from pyrr import Vector3, Vector4

from debug_inspector.core.errors import ConfigurationError, InspectionValueError
from debug_inspector.core.registry import RendererRegistry, create_default_registry
from debug_inspector.core.types import Color, Vector2
from debug_inspector.ui.recording_layout import RecordingLayout

DEFAULT_TYPES = [int, str, bool, float, Vector2, Vector3, Vector4, Color]


@pytest.fixture
def layout():
    return RecordingLayout()


@pytest.fixture
def registry(layout):
    return create_default_registry(layout)


@pytest.mark.parametrize("value_type", DEFAULT_TYPES)
def test_default_types_have_renderers(registry, value_type):
    """Every pre-registered type resolves to a renderer"""
    assert registry.lookup(value_type) is not None
    assert value_type in registry


def test_default_registry_size(registry):
    assert len(registry) == len(DEFAULT_TYPES)
    assert registry.registered_types() == DEFAULT_TYPES


def test_unregistered_type_lookup(registry):
    assert registry.lookup(dict) is None
    assert dict not in registry


def test_duplicate_registration_fails(registry):
    """Second registration fails and keeps the original mapping"""
    original = registry.lookup(int)

    with pytest.raises(ConfigurationError):
        registry.register(int, lambda name, value: value)

    assert registry.lookup(int) is original


def test_lookup_is_exact_type(layout, registry):
    """bool must not resolve to the int renderer"""
    assert registry.lookup(bool) is not registry.lookup(int)

    registry.lookup(bool)("flag", True)
    assert layout.records[-1].kind == "toggle"


def test_register_custom_type(layout):
    registry = RendererRegistry()
    calls = []
    registry.register(dict, lambda name, value: calls.append((name, value)))

    registry.lookup(dict)("data", {"a": 1})
    assert calls == [("data", {"a": 1})]


def test_default_renderers_draw_widgets(layout, registry):
    registry.lookup(int)("count", 3)
    registry.lookup(str)("title", "hello")
    registry.lookup(float)("speed", 1.5)
    registry.lookup(Color)("tint", Color.white())

    assert [(r.kind, r.label, r.value) for r in layout.records] == [
        ("int", "count", 3),
        ("text", "title", "hello"),
        ("float", "speed", 1.5),
        ("color", "tint", Color.white()),
    ]


def test_default_renderers_return_widget_value(layout, registry):
    layout.respond("int", "count", 9)
    assert registry.lookup(int)("count", 3) == 9


@pytest.mark.parametrize("value_type", DEFAULT_TYPES)
def test_default_renderers_reject_absent_values(layout, registry, value_type):
    """Renderers fail clearly on None and draw nothing"""
    with pytest.raises(InspectionValueError) as excinfo:
        registry.lookup(value_type)("missing", None)

    assert "missing" in str(excinfo.value)
    assert isinstance(excinfo.value, TypeError)
    assert layout.records == []

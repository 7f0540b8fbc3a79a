"""Tests for the recursive inspector"""

import logging
from enum import Enum
from typing import ClassVar, Final

import pytest
from pyrr import Vector3

from debug_inspector.core.errors import InspectionValueError
from debug_inspector.core.inspector import Inspector
from debug_inspector.core.markers import inspect_field, inspectable, inspectable_property
from debug_inspector.core.registry import create_default_registry
from debug_inspector.samples import SampleComponent, SampleEnum, SampleType
from debug_inspector.scene.objects import GameObject
from debug_inspector.ui.recording_layout import RecordingLayout


class Mood(Enum):
    CALM = 0
    ANGRY = 1


@inspectable
class Inner:
    level: int = inspect_field(7)


@inspectable
class Outer:
    title: str = inspect_field("outer")
    inner: Inner = inspect_field(default_factory=Inner)
    mood: Mood = inspect_field(Mood.CALM)
    target: GameObject = inspect_field(None)
    tags: list = inspect_field(default_factory=lambda: ["a", "b"])
    missing: Inner = inspect_field(None)


@pytest.fixture
def layout():
    return RecordingLayout()


@pytest.fixture
def inspector(layout):
    return Inspector(create_default_registry(layout), layout)


@pytest.fixture
def sample():
    game_object = GameObject("Sample", Vector3([1.0, 2.0, 3.0]))
    component = game_object.add_component(SampleComponent)
    component.start()
    return component


def _calls(layout):
    return [(r.kind, r.label) for r in layout.records]


def test_inspect_sample_component(layout, inspector, sample):
    inspector.inspect(sample)

    assert _calls(layout) == [
        ("int", "_sample_int"),
        ("float", "_sample_float"),
        ("toggle", "sample_boolean"),
        ("vector3", "sample_vector3"),
        ("color", "sample_color"),
        ("label", "sample_type"),
        ("vector2", "sample_vector2"),
        ("enum", "sample_enum"),
    ]
    assert layout.find("_sample_int").value == 42
    assert layout.find("sample_boolean").value is True
    assert layout.find("sample_enum").value is SampleEnum.YUNO


def test_nested_members_are_indented(layout, inspector, sample):
    inspector.inspect(sample)

    assert layout.find("sample_type").indent == 0
    assert layout.find("sample_vector2").indent == 1
    assert layout.find("sample_enum").indent == 1
    assert layout.indent_level == 0


def test_dispatch_paths(layout, inspector):
    outer = Outer()
    outer.target = GameObject("Player")

    inspector.inspect(outer)

    assert _calls(layout) == [
        ("text", "title"),
        ("label", "inner"),
        ("int", "level"),
        ("enum", "mood"),
        ("object", "target"),
        ("readonly_text", "tags"),
        ("empty", "missing"),
    ]
    assert layout.find("tags").value == "['a', 'b']"
    assert layout.find("target").value is outer.target


def test_registry_wins_over_nested_inspection(layout, inspector):
    """A type that is both registered and marked uses its renderer"""
    inspector.registry.register(Inner, lambda name, value: layout.readonly_text(name, "custom"))

    inspector.inspect_value("inner", Inner, Inner())

    assert _calls(layout) == [("readonly_text", "inner")]
    assert layout.records[0].value == "custom"


def test_absent_value_renders_empty_field(layout, inspector):
    """None renders as an empty field for unregistered declared types"""
    for declared_type in (Inner, object, list, GameObject, Mood):
        inspector.inspect_value("value", declared_type, None)

    assert [r.kind for r in layout.records] == ["empty"] * 5


def test_absent_value_with_registered_type_fails(inspector):
    with pytest.raises(InspectionValueError):
        inspector.inspect_value("count", int, None)


def test_unregistered_value_uses_string_form(layout, inspector):
    inspector.inspect_value("lookup", dict, {"k": 1})

    assert layout.records[0].kind == "readonly_text"
    assert layout.records[0].value == "{'k': 1}"


def test_edits_are_not_written_back(layout, inspector, sample):
    """Widget edits are discarded: the panel is a read-only view"""
    layout.respond("int", "_sample_int", 7)
    layout.respond("float", "_sample_float", 99.0)
    layout.respond("enum", "sample_enum", SampleEnum.HIRO)

    inspector.inspect(sample)

    assert sample._sample_int == 42
    assert sample._sample_float == 0.0
    assert sample.sample_type.sample_enum is SampleEnum.YUNO


def test_inspect_is_idempotent(layout, inspector, sample):
    inspector.inspect(sample)
    first = [(r.kind, r.label, r.indent) for r in layout.records]

    layout.clear()
    inspector.inspect(sample)
    second = [(r.kind, r.label, r.indent) for r in layout.records]

    assert first == second


def test_getter_failure_propagates(layout, inspector):
    @inspectable
    class Broken:
        before: int = inspect_field(1)

        @inspectable_property
        def failing(self) -> int:
            raise RuntimeError("sensor offline")

    with pytest.raises(RuntimeError, match="sensor offline"):
        inspector.inspect(Broken())

    # Members before the failure were drawn, nothing after it
    assert [r.label for r in layout.records] == ["before"]


def test_nested_getter_failure_restores_indent(layout, inspector):
    @inspectable
    class BrokenInner:
        @inspectable_property
        def failing(self) -> int:
            raise ValueError("bad")

    @inspectable
    class Holder:
        child: object = inspect_field(default_factory=BrokenInner)

    with pytest.raises(ValueError):
        inspector.inspect(Holder())

    assert layout.indent_level == 0
    assert inspector._depth == 0


def test_cyclic_graph_is_cut_at_max_depth(layout, caplog):
    @inspectable
    class Node:
        child = inspect_field(None)

        def __str__(self):
            return "Node"

    node = Node()
    node.child = node
    inspector = Inspector(create_default_registry(layout), layout, max_depth=3)

    with caplog.at_level(logging.WARNING):
        inspector.inspect(node)

    assert [r.kind for r in layout.records] == ["label", "label", "label", "readonly_text"]
    assert layout.records[-1].indent == 3
    assert layout.records[-1].value == "Node"
    assert "Nesting deeper than 3" in caplog.text


def test_engine_object_values_are_not_expanded(layout, inspector, sample):
    """Components are engine objects even when their type is inspectable"""
    inspector.inspect_value("other", object, sample)

    assert _calls(layout) == [("object", "other")]


def test_nested_sample_type_before_start(layout, inspector):
    game_object = GameObject("Fresh")
    component = game_object.add_component(SampleComponent)

    inspector.inspect(component)

    assert layout.find("sample_type").kind == "empty"
    assert layout.find("_sample_int").value == 0


def test_sample_type_direct_inspection(layout, inspector):
    inspector.inspect(SampleType())

    assert _calls(layout) == [("vector2", "sample_vector2"), ("enum", "sample_enum")]


@inspectable
class Counters:
    instances: ClassVar[int] = inspect_field(3, static=True)
    limit: Final[float] = inspect_field(2.5)


def test_class_var_and_final_fields_use_registered_widgets(layout, inspector):
    inspector.inspect(Counters())

    assert _calls(layout) == [("int", "instances"), ("float", "limit")]
    assert layout.find("instances").value == 3
    assert layout.find("limit").value == 2.5

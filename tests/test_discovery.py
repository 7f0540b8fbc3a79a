"""Tests for scene objects and inspectable component discovery"""

import numpy as np
from pyrr import Vector3

from debug_inspector.core.markers import inspectable
from debug_inspector.samples import SampleComponent
from debug_inspector.scene.discovery import (
    all_root_objects,
    child_components_of,
    display_name,
    find_inspectable_components,
    is_inspectable_component,
)
from debug_inspector.scene.objects import Component, GameObject, Scene, Transform


class PlainComponent(Component):
    pass


class DerivedSample(SampleComponent):
    """Inherits the marker but is not tagged itself"""


@inspectable
class TaggedComponent(Component):
    pass


def _build_scene():
    scene = Scene()

    first = scene.add_root(GameObject("First"))
    first.add_component(SampleComponent)

    second = scene.add_root(GameObject("Second"))
    second.add_component(PlainComponent)
    child = second.add_child(GameObject("Child"))
    child.add_component(TaggedComponent)
    grandchild = child.add_child(GameObject("Grandchild"))
    grandchild.add_component(DerivedSample)

    return scene


def test_game_object_has_transform():
    obj = GameObject("Box", Vector3([1.0, 2.0, 3.0]))

    assert isinstance(obj.transform, Transform)
    assert obj.components[0] is obj.transform
    assert np.allclose(np.asarray(obj.transform.position), [1.0, 2.0, 3.0])


def test_component_named_after_game_object():
    obj = GameObject("Lamp")
    component = obj.add_component(PlainComponent)

    assert component.name == "Lamp"
    assert component.transform is obj.transform
    assert PlainComponent().name == "PlainComponent"


def test_get_component():
    obj = GameObject("Thing")
    tagged = obj.add_component(TaggedComponent)

    assert obj.get_component(TaggedComponent) is tagged
    assert obj.get_component(SampleComponent) is None


def test_add_child_reparents():
    a = GameObject("A")
    b = GameObject("B")
    child = a.add_child(GameObject("Child"))

    b.add_child(child)

    assert child.parent is b
    assert a.children == []
    assert b.children == [child]


def test_scene_object_count():
    scene = _build_scene()
    assert scene.get_object_count() == 4
    assert [obj.name for obj in all_root_objects(scene)] == ["First", "Second"]


def test_child_components_include_descendants():
    scene = _build_scene()
    second = scene.root_objects()[1]

    types = [type(c) for c in child_components_of(second)]
    assert types == [Transform, PlainComponent, Transform, TaggedComponent, Transform, DerivedSample]


def test_is_inspectable_component():
    assert not is_inspectable_component(None)
    assert not is_inspectable_component(PlainComponent())
    assert is_inspectable_component(SampleComponent())
    assert is_inspectable_component(TaggedComponent())


def test_marker_on_base_class_is_not_enough():
    """Only directly-tagged component types are listed"""
    assert not is_inspectable_component(DerivedSample())


def test_find_inspectable_components():
    scene = _build_scene()

    found = list(find_inspectable_components(scene))

    assert [type(c) for c in found] == [SampleComponent, TaggedComponent]
    assert [display_name(c) for c in found] == ["First", "Child"]


def test_find_is_restartable():
    scene = _build_scene()
    assert list(find_inspectable_components(scene)) == list(find_inspectable_components(scene))


def test_scene_update_starts_components_once():
    scene = Scene()
    obj = scene.add_root(GameObject("Sample"))
    sample = obj.add_component(SampleComponent)

    scene.update(0.5)
    scene.update(0.25)

    assert sample.started
    assert sample._sample_int == 42
    assert sample._sample_float == 0.75


def test_scene_clear():
    scene = _build_scene()
    scene.clear()
    assert scene.get_object_count() == 0
    assert list(find_inspectable_components(scene)) == []

"""Tests for routing window input into ImGui"""

import pytest

imgui = pytest.importorskip("imgui")

from debug_inspector.ui.input_router import InputRouter  # noqa: E402


@pytest.fixture
def io():
    context = imgui.create_context()
    yield imgui.get_io()
    imgui.destroy_context(context)


@pytest.fixture
def interactions():
    return []


@pytest.fixture
def router(io, interactions):
    return InputRouter(on_interaction=lambda: interactions.append(True))


def test_mouse_press_uses_zero_based_buttons(io, router, interactions):
    router.on_mouse_press(10, 20, 1)

    assert io.mouse_down[0]
    assert tuple(io.mouse_pos) == (10.0, 20.0)
    assert len(interactions) == 1


def test_mouse_release_does_not_request_repaint(io, router, interactions):
    router.on_mouse_press(0, 0, 2)
    router.on_mouse_release(5, 5, 2)

    assert not io.mouse_down[1]
    assert len(interactions) == 1


def test_unknown_mouse_button_is_ignored(io, router):
    router.on_mouse_press(0, 0, 9)

    assert not any(io.mouse_down[i] for i in range(3))


def test_mouse_move_only_updates_position(io, router, interactions):
    router.on_mouse_move(3, 4)

    assert tuple(io.mouse_pos) == (3.0, 4.0)
    assert interactions == []


def test_scroll_and_text_request_repaint(io, router, interactions):
    router.on_scroll(0.0, 1.0)
    router.on_text("a")

    assert io.mouse_wheel == 1.0
    assert len(interactions) == 2


def test_key_press_and_release(io, router, interactions):
    router.on_key(65, True)
    assert io.keys_down[65]

    router.on_key(65, False)
    assert not io.keys_down[65]
    assert len(interactions) == 1


def test_out_of_range_key_still_counts_as_interaction(io, router, interactions):
    router.on_key(100000, True)

    assert len(interactions) == 1


def test_router_without_callback(io):
    InputRouter().on_mouse_press(1, 1, 1)

    assert io.mouse_down[0]

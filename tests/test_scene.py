import math

import pytest

from padview.controls import AxisSettings, GamepadAxis, GamepadButton
from padview.scene import (
    ACTIVE_BUTTON_COLOR,
    BUTTON_CLUSTER_RADIUS,
    BUTTONS_X,
    BUTTONS_Y,
    CONNECTED_HEADER,
    NORMAL_BUTTON_COLOR,
    NO_GAMEPADS,
    STICK_BOUNDS_SIZE,
    Scene,
    build_scene,
    format_value,
)


def _button(scene, button):
    (widget,) = [w for w in scene.buttons if w.button is button]
    return widget


def _stick(scene, button):
    (widget,) = [s for s in scene.sticks if s.button is button]
    return widget


def _trigger(scene, button):
    (widget,) = [t for t in scene.triggers if t.button is button]
    return widget


def test_format_zero():
    assert format_value(0.0) == "0.000"


@pytest.mark.parametrize("value", [0.25, -0.75, 1.0, -1.0, 0.123456])
def test_format_round_trip(value):
    text = format_value(value)
    assert float(text) == pytest.approx(value, abs=5e-4)
    assert len(text.split(".")[1]) == 3


def test_face_buttons_form_cluster():
    scene = build_scene()
    north = _button(scene, GamepadButton.NORTH)
    south = _button(scene, GamepadButton.SOUTH)
    west = _button(scene, GamepadButton.WEST)
    east = _button(scene, GamepadButton.EAST)
    assert north.y - south.y == pytest.approx(2 * BUTTON_CLUSTER_RADIUS)
    assert east.x - west.x == pytest.approx(2 * BUTTON_CLUSTER_RADIUS)
    assert (west.x + east.x) / 2 == pytest.approx(BUTTONS_X)
    assert (north.y + south.y) / 2 == pytest.approx(BUTTONS_Y)


def test_dpad_mirrors_face_buttons():
    scene = build_scene()
    assert _button(scene, GamepadButton.DPAD_UP).x == pytest.approx(
        -_button(scene, GamepadButton.NORTH).x
    )
    assert _button(scene, GamepadButton.DPAD_LEFT).y == pytest.approx(BUTTONS_Y)


def test_dpad_rotations():
    scene = build_scene()
    assert _button(scene, GamepadButton.DPAD_UP).rotation == 0.0
    assert _button(scene, GamepadButton.DPAD_DOWN).rotation == pytest.approx(math.pi)
    assert _button(scene, GamepadButton.DPAD_LEFT).rotation == pytest.approx(math.pi / 2)
    assert _button(scene, GamepadButton.DPAD_RIGHT).rotation == pytest.approx(-math.pi / 2)


def test_sticks_placed_from_arguments():
    scene = build_scene(525.0, -285.0)
    left = _stick(scene, GamepadButton.LEFT_THUMB)
    right = _stick(scene, GamepadButton.RIGHT_THUMB)
    assert (left.x, left.y) == (-525.0, -285.0)
    assert (right.x, right.y) == (525.0, -285.0)
    assert left.x_axis is GamepadAxis.LEFT_STICK_X
    assert right.y_axis is GamepadAxis.RIGHT_STICK_Y


def test_stick_zones_follow_settings():
    settings = AxisSettings()
    scene = build_scene(axis_settings=settings)
    live, dead = settings.stick_zones(STICK_BOUNDS_SIZE)
    for stick in scene.sticks:
        assert stick.live == live
        assert stick.dead == dead
        assert stick.bounds_size == pytest.approx(STICK_BOUNDS_SIZE * 2)


def test_press_and_release_only_matching():
    scene = build_scene()
    scene.press(GamepadButton.SOUTH)
    south = _button(scene, GamepadButton.SOUTH)
    assert south.active
    assert south.color == ACTIVE_BUTTON_COLOR
    others = [w for w in scene.buttons if w.button is not GamepadButton.SOUTH]
    assert not any(w.active for w in others)
    scene.release(GamepadButton.SOUTH)
    assert not south.active
    assert south.color == NORMAL_BUTTON_COLOR


def test_press_thumb_highlights_stick_knob():
    scene = build_scene()
    scene.press(GamepadButton.LEFT_THUMB)
    assert _stick(scene, GamepadButton.LEFT_THUMB).active
    assert not _stick(scene, GamepadButton.RIGHT_THUMB).active


def test_press_trigger2_highlights_trigger():
    scene = build_scene()
    scene.press(GamepadButton.RIGHT_TRIGGER2)
    assert _trigger(scene, GamepadButton.RIGHT_TRIGGER2).active
    assert not _trigger(scene, GamepadButton.LEFT_TRIGGER2).active


def test_axis_moves_knob_and_label():
    scene = build_scene()
    scene.axis_changed(GamepadAxis.LEFT_STICK_X, 0.5)
    left = _stick(scene, GamepadButton.LEFT_THUMB)
    assert left.knob_x == pytest.approx(0.5 * left.scale)
    assert left.knob_y == 0.0
    assert left.label == f"{format_value(0.5)}, {format_value(0.0)}"
    right = _stick(scene, GamepadButton.RIGHT_THUMB)
    assert right.knob_x == 0.0


def test_axis_y_updates_second_value():
    scene = build_scene()
    scene.axis_changed(GamepadAxis.RIGHT_STICK_Y, -0.25)
    right = _stick(scene, GamepadButton.RIGHT_THUMB)
    assert right.knob_y == pytest.approx(-0.25 * right.scale)
    assert right.y_text == format_value(-0.25)
    assert right.x_text == format_value(0.0)


def test_button_value_updates_trigger_text():
    scene = build_scene()
    scene.button_changed(GamepadButton.LEFT_TRIGGER2, 0.8)
    assert _trigger(scene, GamepadButton.LEFT_TRIGGER2).value_text == format_value(0.8)
    assert _trigger(scene, GamepadButton.RIGHT_TRIGGER2).value_text == format_value(0.0)


def test_connected_none_when_empty():
    scene = build_scene()
    scene.connection_changed([(1, "Pad")])
    scene.connection_changed([])
    assert scene.connected_text == NO_GAMEPADS
    assert scene.connected_label() == CONNECTED_HEADER + "None"


def test_connected_lists_gamepads():
    scene = Scene()
    scene.connection_changed([(1, "Pad"), (2, "Deck")])
    assert scene.connected_text.splitlines() == ["1 - Pad", "2 - Deck"]
    assert scene.connected_label().startswith("Connected Gamepads:\n")


def test_every_widget_bound_once():
    scene = build_scene()
    bound = [w.button for w in scene.buttons + scene.sticks + scene.triggers]
    assert len(bound) == len(set(bound))
    assert GamepadButton.MODE not in bound
    assert GamepadButton.LEFT_TRIGGER in bound
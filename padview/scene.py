"""The gamepad viewer scene: widgets for buttons, sticks and triggers and their state."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Union

from padview.controls import AxisSettings, GamepadAxis, GamepadButton

BUTTON_RADIUS = 25.0
BUTTON_CLUSTER_RADIUS = 50.0
START_SIZE = (30.0, 15.0)
TRIGGER_SIZE = (70.0, 20.0)
STICK_BOUNDS_SIZE = 100.0
KNOB_SCALE = 0.15
FONT_SIZE = 13.0

BUTTONS_X = 150.0
BUTTONS_Y = 80.0
STICKS_X = 150.0
STICKS_Y = -135.0

NORMAL_BUTTON_COLOR = (0.3, 0.3, 0.3)
ACTIVE_BUTTON_COLOR = (0.5, 0.0, 0.5)
LIVE_COLOR = (0.4, 0.4, 0.4)
DEAD_COLOR = (0.13, 0.13, 0.13)

CIRCLE = "circle"
TRIANGLE = "triangle"
START_PAUSE = "start_pause"
TRIGGER = "trigger"

CONNECTED_HEADER = "Connected Gamepads:\n"
NO_GAMEPADS = "None"


def format_value(value: float) -> str:
    """Format an input value with three decimals."""
    return f"{value:.3f}"


@dataclass
class ButtonWidget:
    """A button shape placed in the scene that lights up while its button is held."""

    button: GamepadButton
    shape: str
    x: float
    y: float
    rotation: float = 0.0
    active: bool = False

    @property
    def color(self) -> tuple[float, float, float]:
        return ACTIVE_BUTTON_COLOR if self.active else NORMAL_BUTTON_COLOR


@dataclass
class StickWidget:
    """An analogue stick: bounds, zone squares, a moving knob and a value label."""

    x: float
    y: float
    x_axis: GamepadAxis
    y_axis: GamepadAxis
    button: GamepadButton
    live: tuple[float, float]
    dead: tuple[float, float]
    scale: float = STICK_BOUNDS_SIZE
    knob_x: float = 0.0
    knob_y: float = 0.0
    x_text: str = field(default_factory=lambda: format_value(0.0))
    y_text: str = field(default_factory=lambda: format_value(0.0))
    active: bool = False

    @property
    def bounds_size(self) -> float:
        return self.scale * 2.0

    @property
    def label(self) -> str:
        return f"{self.x_text}, {self.y_text}"

    @property
    def color(self) -> tuple[float, float, float]:
        return ACTIVE_BUTTON_COLOR if self.active else NORMAL_BUTTON_COLOR


@dataclass
class TriggerWidget:
    """An analogue trigger showing its current pressure as text."""

    button: GamepadButton
    x: float
    y: float
    value_text: str = field(default_factory=lambda: format_value(0.0))
    active: bool = False

    @property
    def color(self) -> tuple[float, float, float]:
        return ACTIVE_BUTTON_COLOR if self.active else NORMAL_BUTTON_COLOR


_Reacting = Union[ButtonWidget, StickWidget, TriggerWidget]


@dataclass
class Scene:
    """All widgets of the viewer and the text listing connected gamepads."""

    buttons: list[ButtonWidget] = field(default_factory=list)
    sticks: list[StickWidget] = field(default_factory=list)
    triggers: list[TriggerWidget] = field(default_factory=list)
    connected_text: str = NO_GAMEPADS

    def _reacting(self) -> Iterator[_Reacting]:
        yield from self.buttons
        yield from self.sticks
        yield from self.triggers

    def press(self, button: GamepadButton) -> None:
        """Highlight every widget bound to *button*."""
        for widget in self._reacting():
            if widget.button is button:
                widget.active = True

    def release(self, button: GamepadButton) -> None:
        """Return every widget bound to *button* to its normal colour."""
        for widget in self._reacting():
            if widget.button is button:
                widget.active = False

    def button_changed(self, button: GamepadButton, value: float) -> None:
        """Show the analogue *value* of *button* on its trigger label."""
        for trigger in self.triggers:
            if trigger.button is button:
                trigger.value_text = format_value(value)

    def axis_changed(self, axis: GamepadAxis, value: float) -> None:
        """Move stick knobs and update stick labels for *axis*."""
        for stick in self.sticks:
            if axis is stick.x_axis:
                stick.knob_x = value * stick.scale
                stick.x_text = format_value(value)
            if axis is stick.y_axis:
                stick.knob_y = value * stick.scale
                stick.y_text = format_value(value)

    def connection_changed(self, gamepads: Iterable[tuple[object, str]]) -> None:
        """Replace the connected list with ``(id, name)`` pairs of present gamepads."""
        formatted = "\n".join(f"{ident} - {name}" for ident, name in gamepads)
        self.connected_text = formatted or NO_GAMEPADS

    def connected_label(self) -> str:
        """The full text of the connected gamepads panel."""
        return CONNECTED_HEADER + self.connected_text


def _cluster(
    cx: float,
    cy: float,
    shape: str,
    layout: Iterable[tuple[GamepadButton, float, float, float]],
) -> list[ButtonWidget]:
    return [
        ButtonWidget(button, shape, cx + dx, cy + dy, rotation)
        for button, dx, dy, rotation in layout
    ]


def build_scene(
    sticks_x: float = STICKS_X,
    sticks_y: float = STICKS_Y,
    axis_settings: AxisSettings | None = None,
) -> Scene:
    """Lay out every widget; sticks sit at ``(-sticks_x, sticks_y)`` and ``(sticks_x, sticks_y)``."""
    settings = axis_settings if axis_settings is not None else AxisSettings()
    r = BUTTON_CLUSTER_RADIUS

    buttons = _cluster(
        BUTTONS_X,
        BUTTONS_Y,
        CIRCLE,
        [
            (GamepadButton.NORTH, 0.0, r, 0.0),
            (GamepadButton.SOUTH, 0.0, -r, 0.0),
            (GamepadButton.WEST, -r, 0.0, 0.0),
            (GamepadButton.EAST, r, 0.0, 0.0),
        ],
    )
    buttons += [
        ButtonWidget(GamepadButton.SELECT, START_PAUSE, -30.0, BUTTONS_Y),
        ButtonWidget(GamepadButton.START, START_PAUSE, 30.0, BUTTONS_Y),
    ]
    buttons += _cluster(
        -BUTTONS_X,
        BUTTONS_Y,
        TRIANGLE,
        [
            (GamepadButton.DPAD_UP, 0.0, r, 0.0),
            (GamepadButton.DPAD_DOWN, 0.0, -r, math.pi),
            (GamepadButton.DPAD_LEFT, -r, 0.0, math.pi / 2),
            (GamepadButton.DPAD_RIGHT, r, 0.0, -math.pi / 2),
        ],
    )
    buttons += [
        ButtonWidget(GamepadButton.LEFT_TRIGGER, TRIGGER, -BUTTONS_X, BUTTONS_Y + 115.0),
        ButtonWidget(GamepadButton.RIGHT_TRIGGER, TRIGGER, BUTTONS_X, BUTTONS_Y + 115.0),
    ]

    live, dead = settings.stick_zones(STICK_BOUNDS_SIZE)
    sticks = [
        StickWidget(
            -sticks_x,
            sticks_y,
            GamepadAxis.LEFT_STICK_X,
            GamepadAxis.LEFT_STICK_Y,
            GamepadButton.LEFT_THUMB,
            live,
            dead,
        ),
        StickWidget(
            sticks_x,
            sticks_y,
            GamepadAxis.RIGHT_STICK_X,
            GamepadAxis.RIGHT_STICK_Y,
            GamepadButton.RIGHT_THUMB,
            live,
            dead,
        ),
    ]

    triggers = [
        TriggerWidget(GamepadButton.LEFT_TRIGGER2, -BUTTONS_X, BUTTONS_Y + 145.0),
        TriggerWidget(GamepadButton.RIGHT_TRIGGER2, BUTTONS_X, BUTTONS_Y + 145.0),
    ]

    return Scene(buttons=buttons, sticks=sticks, triggers=triggers)
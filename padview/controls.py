"""Gamepad buttons, axes and the axis zone settings used to draw sticks."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class GamepadButton(enum.Enum):
    """A physical button on a gamepad."""

    SOUTH = "south"
    EAST = "east"
    NORTH = "north"
    WEST = "west"
    C = "c"
    Z = "z"
    LEFT_TRIGGER = "left_trigger"
    LEFT_TRIGGER2 = "left_trigger2"
    RIGHT_TRIGGER = "right_trigger"
    RIGHT_TRIGGER2 = "right_trigger2"
    SELECT = "select"
    START = "start"
    MODE = "mode"
    LEFT_THUMB = "left_thumb"
    RIGHT_THUMB = "right_thumb"
    DPAD_UP = "dpad_up"
    DPAD_DOWN = "dpad_down"
    DPAD_LEFT = "dpad_left"
    DPAD_RIGHT = "dpad_right"


class GamepadAxis(enum.Enum):
    """An analogue axis on a gamepad."""

    LEFT_STICK_X = "left_stick_x"
    LEFT_STICK_Y = "left_stick_y"
    LEFT_Z = "left_z"
    RIGHT_STICK_X = "right_stick_x"
    RIGHT_STICK_Y = "right_stick_y"
    RIGHT_Z = "right_z"


@dataclass(frozen=True)
class AxisSettings:
    """Live and dead zone bounds of an analogue axis, in the range -1..1."""

    livezone_upperbound: float = 1.0
    deadzone_upperbound: float = 0.05
    deadzone_lowerbound: float = -0.05
    livezone_lowerbound: float = -1.0
    threshold: float = 0.01

    def __post_init__(self) -> None:
        if not -1.0 <= self.livezone_lowerbound <= 0.0:
            raise ValueError("livezone_lowerbound must lie in [-1, 0]")
        if not -1.0 <= self.deadzone_lowerbound <= 0.0:
            raise ValueError("deadzone_lowerbound must lie in [-1, 0]")
        if not 0.0 <= self.deadzone_upperbound <= 1.0:
            raise ValueError("deadzone_upperbound must lie in [0, 1]")
        if not 0.0 <= self.livezone_upperbound <= 1.0:
            raise ValueError("livezone_upperbound must lie in [0, 1]")
        if self.livezone_lowerbound > self.deadzone_lowerbound:
            raise ValueError("livezone_lowerbound must not exceed deadzone_lowerbound")
        if self.deadzone_upperbound > self.livezone_upperbound:
            raise ValueError("deadzone_upperbound must not exceed livezone_upperbound")
        if not 0.0 <= self.threshold <= 2.0:
            raise ValueError("threshold must lie in [0, 2]")

    def stick_zones(
        self, bounds_size: float
    ) -> tuple[tuple[float, float], tuple[float, float]]:
        """Return the live and dead zones as ``(size, mid)`` pairs scaled to *bounds_size*."""

        def zone(lower: float, upper: float) -> tuple[float, float]:
            lower *= bounds_size
            upper *= bounds_size
            return abs(lower) + abs(upper), (lower + upper) / 2.0

        live = zone(self.livezone_lowerbound, self.livezone_upperbound)
        dead = zone(self.deadzone_lowerbound, self.deadzone_upperbound)
        return live, dead
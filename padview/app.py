"""The handheld controller window: gamepad viewer on top of the incoming video image."""

from __future__ import annotations

import argparse
import math
import os
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from padview.controls import GamepadAxis, GamepadButton  # noqa: E402
from padview.frames import SharedFrame, VideoImage  # noqa: E402
from padview.scene import (  # noqa: E402
    BUTTON_RADIUS,
    CIRCLE,
    DEAD_COLOR,
    FONT_SIZE,
    KNOB_SCALE,
    LIVE_COLOR,
    START_PAUSE,
    START_SIZE,
    STICK_BOUNDS_SIZE,
    TRIANGLE,
    TRIGGER_SIZE,
    ButtonWidget,
    Scene,
    StickWidget,
    TriggerWidget,
    build_scene,
)

WINDOW_SIZE = (1280, 800)
WINDOW_TITLE = "Steam Deck App"
STICKS_X = 525.0
STICKS_Y = -285.0

PURPLE = (128, 0, 128)
PURPLE_SQUARE = 128
BACKGROUND = (43, 43, 43)
UI_FONT_SIZE = 20
FPS = 60

TRIGGER_PRESS = 0.75
TRIGGER_RELEASE = 0.65

_BUTTONS = {
    0: GamepadButton.SOUTH,
    1: GamepadButton.EAST,
    2: GamepadButton.WEST,
    3: GamepadButton.NORTH,
    4: GamepadButton.LEFT_TRIGGER,
    5: GamepadButton.RIGHT_TRIGGER,
    6: GamepadButton.SELECT,
    7: GamepadButton.START,
    8: GamepadButton.MODE,
    9: GamepadButton.LEFT_THUMB,
    10: GamepadButton.RIGHT_THUMB,
}

# Stick axes: (axis, sign). Screen "down" is positive on the device, "up" in the scene.
_STICK_AXES = {
    0: (GamepadAxis.LEFT_STICK_X, 1.0),
    1: (GamepadAxis.LEFT_STICK_Y, -1.0),
    3: (GamepadAxis.RIGHT_STICK_X, 1.0),
    4: (GamepadAxis.RIGHT_STICK_Y, -1.0),
}

_TRIGGER_AXES = {
    2: GamepadButton.LEFT_TRIGGER2,
    5: GamepadButton.RIGHT_TRIGGER2,
}

_HAT_X = {-1: GamepadButton.DPAD_LEFT, 1: GamepadButton.DPAD_RIGHT}
_HAT_Y = {-1: GamepadButton.DPAD_DOWN, 1: GamepadButton.DPAD_UP}


class _InputState:
    """Turns joystick events into scene updates, remembering what is held."""

    def __init__(self) -> None:
        self.pads: dict[int, pygame.joystick.JoystickType] = {}
        self.held: set[tuple[int, GamepadButton]] = set()

    def _set(self, scene: Scene, pad: int, button: GamepadButton, down: bool) -> None:
        key = (pad, button)
        if down and key not in self.held:
            self.held.add(key)
            scene.press(button)
        elif not down and key in self.held:
            self.held.discard(key)
            scene.release(button)

    def _connected(self, scene: Scene) -> None:
        scene.connection_changed(
            (iid, pad.get_name()) for iid, pad in sorted(self.pads.items())
        )

    def handle(self, scene: Scene, event: pygame.event.Event) -> None:
        pad = getattr(event, "instance_id", 0)
        if event.type in (pygame.JOYBUTTONDOWN, pygame.JOYBUTTONUP):
            button = _BUTTONS.get(event.button)
            if button is not None:
                down = event.type == pygame.JOYBUTTONDOWN
                self._set(scene, pad, button, down)
                scene.button_changed(button, 1.0 if down else 0.0)
        elif event.type == pygame.JOYAXISMOTION:
            if event.axis in _STICK_AXES:
                axis, sign = _STICK_AXES[event.axis]
                scene.axis_changed(axis, sign * event.value)
            elif event.axis in _TRIGGER_AXES:
                button = _TRIGGER_AXES[event.axis]
                value = (event.value + 1.0) / 2.0
                scene.button_changed(button, value)
                if value >= TRIGGER_PRESS:
                    self._set(scene, pad, button, True)
                elif value <= TRIGGER_RELEASE:
                    self._set(scene, pad, button, False)
        elif event.type == pygame.JOYHATMOTION:
            hx, hy = event.value
            for direction, button in _HAT_X.items():
                self._set(scene, pad, button, hx == direction)
            for direction, button in _HAT_Y.items():
                self._set(scene, pad, button, hy == direction)
        elif event.type == pygame.JOYDEVICEADDED:
            joystick = pygame.joystick.Joystick(event.device_index)
            self.pads[joystick.get_instance_id()] = joystick
            self._connected(scene)
        elif event.type == pygame.JOYDEVICEREMOVED:
            self.pads.pop(event.instance_id, None)
            self.held = {key for key in self.held if key[0] != event.instance_id}
            self._connected(scene)


def _rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    return tuple(round(c * 255) for c in color)  # type: ignore[return-value]


class _Painter:
    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.cx = screen.get_width() / 2
        self.cy = screen.get_height() / 2
        self.small = pygame.font.Font(None, round(FONT_SIZE * 4 / 3))
        self.ui = pygame.font.Font(None, round(UI_FONT_SIZE * 4 / 3))

    def point(self, x: float, y: float) -> tuple[float, float]:
        return self.cx + x, self.cy - y

    def rect(self, color, x: float, y: float, w: float, h: float) -> None:
        r = pygame.Rect(0, 0, round(w), round(h))
        r.center = self.point(x, y)
        pygame.draw.rect(self.screen, color, r)

    def circle(self, color, x: float, y: float, radius: float) -> None:
        pygame.draw.circle(self.screen, color, self.point(x, y), radius)

    def triangle(self, color, x: float, y: float, radius: float, rotation: float) -> None:
        points = [
            self.point(
                x + radius * math.cos(math.pi / 2 + rotation + k * 2 * math.pi / 3),
                y + radius * math.sin(math.pi / 2 + rotation + k * 2 * math.pi / 3),
            )
            for k in range(3)
        ]
        pygame.draw.polygon(self.screen, color, points)

    def text(self, font, content: str, anchor: str, pos: tuple[float, float]) -> None:
        surface = font.render(content, True, (255, 255, 255))
        r = surface.get_rect(**{anchor: pos})
        self.screen.blit(surface, r)

    def video(self, image: VideoImage) -> None:
        try:
            surface = pygame.image.frombuffer(
                bytes(image.data), (image.width, image.height), "RGBA"
            )
        except ValueError:
            return
        self.screen.blit(surface, surface.get_rect(center=self.point(0.0, 0.0)))
        self.rect(PURPLE, 0.0, 0.0, PURPLE_SQUARE, PURPLE_SQUARE)

    def button(self, widget: ButtonWidget) -> None:
        color = _rgb(widget.color)
        if widget.shape == CIRCLE:
            self.circle(color, widget.x, widget.y, BUTTON_RADIUS)
        elif widget.shape == TRIANGLE:
            self.triangle(color, widget.x, widget.y, BUTTON_RADIUS, widget.rotation)
        elif widget.shape == START_PAUSE:
            self.rect(color, widget.x, widget.y, *START_SIZE)
        else:
            self.rect(color, widget.x, widget.y, *TRIGGER_SIZE)

    def stick(self, stick: StickWidget) -> None:
        dead = _rgb(DEAD_COLOR)
        self.rect(dead, stick.x, stick.y, stick.bounds_size, stick.bounds_size)
        live_size, live_mid = stick.live
        self.rect(_rgb(LIVE_COLOR), stick.x + live_mid, stick.y + live_mid, live_size, live_size)
        dead_size, dead_mid = stick.dead
        self.rect(dead, stick.x + dead_mid, stick.y + dead_mid, dead_size, dead_size)
        self.text(
            self.small,
            stick.label,
            "midbottom",
            self.point(stick.x, stick.y + STICK_BOUNDS_SIZE + 2.0),
        )
        self.circle(
            _rgb(stick.color),
            stick.x + stick.knob_x,
            stick.y + stick.knob_y,
            BUTTON_RADIUS * KNOB_SCALE,
        )

    def trigger(self, trigger: TriggerWidget) -> None:
        self.rect(_rgb(trigger.color), trigger.x, trigger.y, *TRIGGER_SIZE)
        self.text(self.small, trigger.value_text, "center", self.point(trigger.x, trigger.y))

    def connected(self, label: str) -> None:
        y = 12
        for line in label.splitlines():
            self.text(self.ui, line, "topleft", (12, y))
            y += self.ui.get_linesize()

    def scene(self, scene: Scene) -> None:
        for widget in scene.buttons:
            self.button(widget)
        for stick in scene.sticks:
            self.stick(stick)
        for trigger in scene.triggers:
            self.trigger(trigger)
        self.connected(scene.connected_label())


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line: window size, title and stick placement."""
    parser = argparse.ArgumentParser(
        prog="padview", description="Show gamepad input over the video image."
    )
    parser.add_argument("--width", type=_positive, default=WINDOW_SIZE[0])
    parser.add_argument("--height", type=_positive, default=WINDOW_SIZE[1])
    parser.add_argument("--title", default=WINDOW_TITLE)
    parser.add_argument("--sticks-x", type=float, default=STICKS_X)
    parser.add_argument("--sticks-y", type=float, default=STICKS_Y)
    return parser.parse_args(argv)


def run(
    scene: Scene,
    size: tuple[int, int] = WINDOW_SIZE,
    title: str = WINDOW_TITLE,
) -> None:
    """Open the window and show *scene* until the window is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(title)
        pygame.joystick.init()
        painter = _Painter(screen)
        clock = pygame.time.Clock()
        shared = SharedFrame()
        video = VideoImage()
        state = _InputState()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                state.handle(scene, event)
            video.upload_from(shared)
            screen.fill(BACKGROUND)
            painter.video(video)
            painter.scene(scene)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the viewer from the command line."""
    args = parse_args(argv)
    scene = build_scene(args.sticks_x, args.sticks_y)
    run(scene, (args.width, args.height), args.title)
    return 0
# padview

`padview` opens a pygame window that mirrors the state of connected
gamepads as you use them:

- the face buttons, Select/Start, the D-pad and the shoulder buttons turn
  purple while they are held down;
- both analogue sticks are drawn inside their bounds, with the live zone and
  dead zone squares behind them, a small knob that follows the stick, and the
  current X/Y values printed above (three decimal places);
- the analogue triggers show their current value and light up when pressed
  past 0.75 (they go back to normal at 0.65 or below);
- a label in the top-left corner lists the connected gamepads as
  `<instance id> - <name>`, or `None`.

Behind the gamepad view sits a 640×480 video image, filled with opaque black,
with a purple square drawn over its centre.

## Installation

```
pip install .
```

This installs `pygame`, the only runtime dependency.

## Usage

```
padview
```

Options:

| option       | default          | meaning                                      |
|--------------|------------------|----------------------------------------------|
| `--width`    | `1280`           | window width in pixels (positive integer)    |
| `--height`   | `800`            | window height in pixels (positive integer)   |
| `--title`    | `Steam Deck App` | window title                                 |
| `--sticks-x` | `525.0`          | horizontal distance of each stick from centre |
| `--sticks-y` | `-285.0`         | vertical position of the sticks (up is positive) |

Close the window to quit. `padview --help` prints the same list.

Joystick input is read from pygame events: buttons 0–10 map to South, East,
West, North, left/right shoulder, Select, Start, Mode, left/right thumb;
axes 0/1 and 3/4 are the left and right sticks (Y inverted so that up is
positive on screen); axes 2 and 5 are the triggers, rescaled from -1..1 to
0..1; the hat drives the D-pad.

## Using it from Python

The scene model works without a window:

```python
from padview.controls import AxisSettings, GamepadAxis, GamepadButton
from padview.scene import build_scene, format_value

scene = build_scene(150.0, -135.0, AxisSettings())

scene.press(GamepadButton.SOUTH)
scene.axis_changed(GamepadAxis.LEFT_STICK_X, 0.5)
scene.button_changed(GamepadButton.RIGHT_TRIGGER2, 0.25)
scene.release(GamepadButton.SOUTH)

scene.connection_changed([(0, "Example Pad")])
print(scene.connected_label())   # "Connected Gamepads:\n0 - Example Pad"

print(format_value(0.5))         # "0.500"
```

`AxisSettings` holds the live and dead zone bounds of an axis (defaults
-1.0/-0.05/0.05/1.0) and rejects inconsistent values with `ValueError`.
`AxisSettings.stick_zones(bounds_size)` returns the `(size, mid)` pairs of the
live and dead zones scaled to `bounds_size`.

`padview.app.run(scene, size, title)` opens the window for a scene you built
yourself.

Frames can be handed between threads with `padview.frames.SharedFrame`: a
producer calls `put(frame)` with the newest RGBA bytes, and
`VideoImage.upload_from(shared)` takes the latest frame, if any, copies it
into the image and returns whether there was one.

## What it does not do

`padview` does not receive video from anywhere. The window creates its own
`SharedFrame`, and nothing in the package puts frames into it, so the video
panel always stays black. There is no network stream, decoder or camera input.

## Running the tests

```
pip install .[test]
pytest
```
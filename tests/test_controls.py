import pytest

from padview.controls import AxisSettings, GamepadAxis, GamepadButton


def test_default_zones_are_centred():
    live, dead = AxisSettings().stick_zones(100.0)
    assert live[1] == pytest.approx(0.0)
    assert dead[1] == pytest.approx(0.0)


def test_default_livezone_spans_full_bounds():
    live, _ = AxisSettings().stick_zones(100.0)
    assert live[0] == pytest.approx(200.0)


def test_deadzone_smaller_than_livezone():
    live, dead = AxisSettings().stick_zones(100.0)
    assert dead[0] < live[0]


def test_zones_scale_linearly():
    settings = AxisSettings()
    small_live, small_dead = settings.stick_zones(10.0)
    big_live, big_dead = settings.stick_zones(30.0)
    assert big_live[0] == pytest.approx(small_live[0] * 3)
    assert big_dead[0] == pytest.approx(small_dead[0] * 3)


def test_asymmetric_zone_mid_moves():
    settings = AxisSettings(
        livezone_upperbound=1.0,
        deadzone_upperbound=0.2,
        deadzone_lowerbound=0.0,
        livezone_lowerbound=-0.5,
    )
    live, dead = settings.stick_zones(100.0)
    assert live[1] > 0
    assert dead[1] > 0
    assert live[0] == pytest.approx(100.0 * (1.0 + 0.5))
    assert dead[0] == pytest.approx(100.0 * 0.2)


def test_zero_bounds_give_empty_zones():
    live, dead = AxisSettings().stick_zones(0.0)
    assert live == (0.0, 0.0)
    assert dead == (0.0, 0.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"livezone_lowerbound": -1.5},
        {"deadzone_lowerbound": 0.1},
        {"deadzone_upperbound": -0.1},
        {"livezone_upperbound": 1.2},
        {"livezone_lowerbound": -0.01, "deadzone_lowerbound": -0.05},
        {"deadzone_upperbound": 0.5, "livezone_upperbound": 0.4},
        {"threshold": -0.1},
    ],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        AxisSettings(**kwargs)


def test_settings_are_immutable():
    settings = AxisSettings()
    original = settings.threshold
    with pytest.raises(AttributeError):
        settings.threshold = 0.5
    assert settings.threshold == original
    assert settings.threshold != 0.5


def test_enums_have_unique_values():
    assert len({b.value for b in GamepadButton}) == len(list(GamepadButton))
    assert len({a.value for a in GamepadAxis}) == len(list(GamepadAxis))
    assert GamepadButton("south") is GamepadButton.SOUTH
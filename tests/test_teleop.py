import pytest

from amrtools.teleop import (
    CONTROL_KEYS,
    KEY_COEFFS,
    AxisSliders,
    TeleopController,
    format_velocity,
)


@pytest.fixture
def sent():
    return []


@pytest.fixture
def sliders(sent):
    return AxisSliders(send=lambda lin, ang: sent.append((lin, ang)))


def test_key_coeffs_known_keys():
    ctrl = TeleopController()
    assert ctrl.key_coeffs("T") == (1, 1)
    assert ctrl.key_coeffs("U") == (1, -1)
    assert ctrl.key_coeffs("M") == (-1, 1)


def test_key_coeffs_unmapped_is_zero():
    ctrl = TeleopController()
    assert ctrl.key_coeffs("H") == (0, 0)
    assert ctrl.key_coeffs("Q") == (0, 0)


def test_every_mapped_key_is_a_control_key():
    ctrl = TeleopController()
    assert len(CONTROL_KEYS) == 9
    for key in KEY_COEFFS:
        assert key in CONTROL_KEYS
        assert ctrl.key_coeffs(key) == KEY_COEFFS[key]
    for key in CONTROL_KEYS:
        assert ctrl.command_for_key(key) is not None


def test_increase_vel_is_capped():
    ctrl = TeleopController()
    for _ in range(50):
        ctrl.increase_vel()
        assert ctrl.vel <= ctrl.vel_limit
    assert ctrl.vel == ctrl.vel_limit


def test_increase_turn_is_capped():
    ctrl = TeleopController()
    for _ in range(50):
        ctrl.increase_turn()
    assert ctrl.turn == ctrl.turn_limit


def test_decrease_lowers_values():
    ctrl = TeleopController()
    ctrl.decrease_vel()
    ctrl.decrease_turn()
    assert 0 < ctrl.vel < 0.5
    assert 0 < ctrl.turn < 0.5


def test_increase_then_decrease_changes_by_ratio():
    ctrl = TeleopController()
    ctrl.increase_vel()
    raised = ctrl.vel
    ctrl.decrease_vel()
    assert ctrl.vel == pytest.approx(raised * 0.9)


def test_command_for_key_scales_coefficients():
    ctrl = TeleopController()
    assert ctrl.command_for_key("Y") == (ctrl.vel, 0.0)
    assert ctrl.command_for_key("B") == (-ctrl.vel, -ctrl.turn)


def test_command_for_key_is_case_insensitive():
    ctrl = TeleopController()
    assert ctrl.command_for_key("t") == ctrl.command_for_key("T")


def test_stop_key_gives_zero_command():
    assert TeleopController().command_for_key("H") == (0.0, 0.0)


def test_unknown_key_is_ignored():
    assert TeleopController().command_for_key("Q") is None


def test_format_velocity():
    assert format_velocity(0.5) == "0.500"
    assert format_velocity(-1) == "-1.000"


def test_linear_slider_sends_linear_only(sliders, sent):
    sliders.set_linear(250)
    assert sent == [(0.25, 0.0)]
    assert sliders.linear_text == format_velocity(0.25)


def test_linear_slider_is_clamped(sliders, sent):
    sliders.set_linear(5000)
    assert sliders.linear == 1000
    assert sent == [(1.0, 0.0)]


def test_unchanged_value_sends_nothing(sliders, sent):
    sliders.set_linear(100)
    sliders.set_linear(100)
    assert sent == [(0.1, 0.0)]
    assert sliders.linear == 100


def test_angular_slider_keeps_linear(sliders, sent):
    sliders.set_linear(250)
    sliders.set_angular(-500)
    assert sent[-1] == (0.25, -0.5)
    assert sliders.angular_text == format_velocity(-0.5)


def test_release_resets_angular(sliders, sent):
    sliders.set_linear(250)
    sliders.set_angular(300)
    sliders.release()
    assert sliders.angular == 0
    assert sent[-1] == (0.25, 0.0)
    assert sliders.linear == 250


def test_release_at_rest_sends_nothing(sliders, sent):
    sliders.release()
    assert sent == []
    assert sliders.angular == 0
    assert sliders.linear == 0
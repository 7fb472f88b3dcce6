import math

import pytest

from amrtools.drive_units import (
    PositionHelper,
    VelocityHelper,
    driver_vel_to_linear,
    linear_vel_to_driver_cmd,
    motor_position_to_wheel_position_rad,
)


@pytest.fixture
def helper():
    return VelocityHelper(
        velocity_encoder_resolution=4096.0,
        wheel_side_gear=48.0,
        motor_side_gear=16.0,
        motor_gear_heat=10.0,
        wheel_diameter=0.2,
        motor_max_rpm=3000.0,
    )


def test_one_revolution_of_encoder():
    result = motor_position_to_wheel_position_rad(1048576, PositionHelper())
    assert result == pytest.approx(2.0 * math.pi / 45.7143)


@pytest.mark.parametrize("count", [-500000, -1, 0, 7, 2000000])
def test_position_is_odd_and_linear(count):
    helper = PositionHelper(encoder_resolution=1.0, gear_ratio=1.0)
    forward = motor_position_to_wheel_position_rad(count, helper)
    backward = motor_position_to_wheel_position_rad(-count, helper)
    double = motor_position_to_wheel_position_rad(2 * count, helper)
    assert backward == pytest.approx(-forward)
    assert double == pytest.approx(2 * forward)


def test_driver_cmd_is_integer(helper):
    cmd = linear_vel_to_driver_cmd(0.37, helper)
    assert isinstance(cmd, int)
    assert cmd > 0


@pytest.mark.parametrize("speed", [0.0, 0.123, 0.5, 1.7])
def test_driver_cmd_truncates_toward_zero(helper, speed):
    assert linear_vel_to_driver_cmd(-speed, helper) == -linear_vel_to_driver_cmd(speed, helper)


@pytest.mark.parametrize("speed", [-1.2, -0.05, 0.05, 0.8, 2.0])
def test_round_trip_within_one_count(helper, speed):
    cmd = linear_vel_to_driver_cmd(speed, helper)
    one_count = driver_vel_to_linear(1, helper)
    back = driver_vel_to_linear(cmd, helper)
    assert abs(back - speed) < one_count
    assert abs(back) <= abs(speed) + 1e-12


@pytest.mark.parametrize("driver_vel", [-3000, 0, 1, 12345])
def test_integer_command_round_trips_exactly(helper, driver_vel):
    speed = driver_vel_to_linear(driver_vel, helper)
    assert abs(linear_vel_to_driver_cmd(speed, helper) - driver_vel) <= 1


def test_driver_vel_to_linear_scales_linearly(helper):
    assert driver_vel_to_linear(200, helper) == pytest.approx(
        2 * driver_vel_to_linear(100, helper)
    )


def test_unconfigured_velocity_helper_raises():
    with pytest.raises(ZeroDivisionError):
        driver_vel_to_linear(10, VelocityHelper())
    with pytest.raises(ZeroDivisionError):
        linear_vel_to_driver_cmd(1.0, VelocityHelper())
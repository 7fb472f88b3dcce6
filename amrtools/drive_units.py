"""Unit conversions between wheel motion and drive controller values."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Encoder counts per motor revolution and the fixed wheel gear reduction.
ENCODER_COUNTS_PER_REV = 1048576.0
WHEEL_GEAR_REDUCTION = 45.7143


@dataclass
class VelocityHelper:
    """Drive train parameters used for velocity conversions."""

    velocity_encoder_resolution: float = 0.0
    wheel_side_gear: float = 0.0
    motor_side_gear: float = 0.0
    motor_gear_heat: float = 0.0
    wheel_diameter: float = 0.0
    motor_max_rpm: float = 0.0


@dataclass
class PositionHelper:
    """Encoder and gearing parameters used for position conversions."""

    encoder_resolution: float = 0.0
    gear_ratio: float = 0.0


def driver_vel_to_linear(driver_vel: int, vel_helper: VelocityHelper) -> float:
    """Convert a drive velocity reading to wheel surface speed [m/s]."""
    return (
        driver_vel * math.pi * vel_helper.wheel_diameter * vel_helper.motor_side_gear
    ) / (
        vel_helper.wheel_side_gear
        * vel_helper.motor_gear_heat
        * vel_helper.velocity_encoder_resolution
    )


def linear_vel_to_driver_cmd(linear_vel: float, vel_helper: VelocityHelper) -> int:
    """Convert a wheel surface speed [m/s] to an integer drive command.

    The result is truncated toward zero.
    """
    value = (
        linear_vel
        * vel_helper.wheel_side_gear
        * vel_helper.motor_gear_heat
        * vel_helper.velocity_encoder_resolution
    ) / (math.pi * vel_helper.wheel_diameter * vel_helper.motor_side_gear)
    return int(value)


def motor_position_to_wheel_position_rad(
    encoder_count: int, pos_helper: PositionHelper
) -> float:
    """Convert a motor encoder count to the wheel angle [rad].

    The drive's fixed encoder resolution and gear reduction are used; the
    helper is accepted for interface compatibility.
    """
    return (float(encoder_count) / ENCODER_COUNTS_PER_REV) * (2.0 * math.pi) / WHEEL_GEAR_REDUCTION
"""Differential-drive wheel odometry from cumulative encoder readings."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import Callable, Mapping

ODOM_FRAME = "odom"

# Encoder readings are in millimetres.
_ENCODER_UNITS_PER_METRE = 1000.0

DEFAULT_WHEEL_RADIUS = 0.1
DEFAULT_WHEEL_BASE = 0.4

# Fallbacks used when the parameter store holds no wheel geometry.
PARAM_WHEEL_RADIUS = "/amr/wheel/radius"
PARAM_WHEEL_BASE = "/amr/wheel/base"
_PARAM_DEFAULT_WHEEL_RADIUS = 0.2
_PARAM_DEFAULT_WHEEL_BASE = 0.4


def normalize_angle(angle: float) -> float:
    """Wrap an angle once into [-pi, pi] by adding or removing one turn."""
    if angle > math.pi:
        return angle - 2 * math.pi
    if angle < -math.pi:
        return angle + 2 * math.pi
    return angle


def quaternion_from_yaw(yaw: float) -> tuple[float, float, float, float]:
    """Quaternion (x, y, z, w) for a rotation of ``yaw`` about the z axis."""
    half = yaw / 2.0
    return 0.0, 0.0, math.sin(half), math.cos(half)


def _rate(amount: float, dt: float) -> float:
    """Divide with IEEE semantics so a zero interval gives inf or nan."""
    if dt == 0:
        return math.nan if amount == 0 else math.copysign(math.inf, amount)
    return amount / dt


@dataclass
class Odometry:
    """A pose estimate with its velocity, stamped in the odometry frame."""

    stamp: float = 0.0
    frame_id: str = ODOM_FRAME
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    orientation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    linear: tuple[float, float, float] = (0.0, 0.0, 0.0)
    angular: tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass
class WheelOdometry:
    """Integrates right/left wheel encoder readings into a planar pose."""

    wheel_base: float = DEFAULT_WHEEL_BASE
    wheel_radius: float = DEFAULT_WHEEL_RADIUS
    clock: Callable[[], float] = time.time
    x: float = field(default=0.0, init=False)
    y: float = field(default=0.0, init=False)
    theta: float = field(default=0.0, init=False)
    last_odometry: Odometry | None = field(default=None, init=False)
    _previous: tuple[float, float] | None = field(default=None, init=False, repr=False)
    _last_time: float = field(default=0.0, init=False, repr=False)

    def update(self, right_encoder: float, left_encoder: float) -> Odometry | None:
        """Feed one encoder reading [mm]; return the new odometry.

        The first reading only sets the reference and returns None.
        """
        now = self.clock()
        previous = self._previous
        self._previous = (right_encoder, left_encoder)

        if previous is None:
            self._last_time = now
            return None

        prev_right, prev_left = previous
        right = (right_encoder - prev_right) / _ENCODER_UNITS_PER_METRE
        left = (left_encoder - prev_left) / _ENCODER_UNITS_PER_METRE

        cycle_distance = (right + left) / 2.0
        ratio = (right - left) / self.wheel_base
        if not -1.0 <= ratio <= 1.0:
            raise ValueError(
                f"wheel travel difference {right - left} m exceeds the wheel base "
                f"{self.wheel_base} m"
            )
        cycle_angle = math.asin(ratio)
        average_angle = normalize_angle(cycle_angle / 2.0 + self.theta)

        self.x += math.cos(average_angle) * cycle_distance
        self.y += math.sin(average_angle) * cycle_distance
        self.theta = normalize_angle(self.theta + cycle_angle)

        dt = now - self._last_time
        self._last_time = now

        odom = Odometry(
            stamp=now,
            frame_id=ODOM_FRAME,
            x=self.x,
            y=self.y,
            z=0.0,
            orientation=quaternion_from_yaw(self.theta),
            linear=(_rate(cycle_distance, dt), 0.0, 0.0),
            angular=(0.0, 0.0, _rate(cycle_angle, dt)),
        )
        self.last_odometry = odom
        return odom


def odometry_from_params(
    params: Mapping[str, float], clock: Callable[[], float] | None = None
) -> WheelOdometry:
    """Build a WheelOdometry from a parameter mapping, with fallbacks."""
    radius = params.get(PARAM_WHEEL_RADIUS, _PARAM_DEFAULT_WHEEL_RADIUS)
    base = params.get(PARAM_WHEEL_BASE, _PARAM_DEFAULT_WHEEL_BASE)
    if clock is None:
        return WheelOdometry(wheel_base=float(base), wheel_radius=float(radius))
    return WheelOdometry(wheel_base=float(base), wheel_radius=float(radius), clock=clock)
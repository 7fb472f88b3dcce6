"""Velocity commands from keyboard teleoperation and axis sliders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

VelocitySink = Callable[[float, float], None]

# Keys laid out as a 3x3 grid, row by row.
CONTROL_KEYS = ("T", "Y", "U", "G", "H", "J", "B", "N", "M")

# Key -> (linear coefficient, angular coefficient). "H" stops the robot.
KEY_COEFFS: dict[str, tuple[int, int]] = {
    "T": (1, 1),
    "Y": (1, 0),
    "U": (1, -1),
    "G": (0, 1),
    "J": (0, -1),
    "B": (-1, -1),
    "N": (-1, 0),
    "M": (-1, 1),
}

SLIDER_MIN = -1000
SLIDER_MAX = 1000
SLIDER_SCALE = 1000.0


def format_velocity(value: float) -> str:
    """Format a velocity with three decimals, as shown in the value fields."""
    return f"{value:.3f}"


@dataclass
class TeleopController:
    """Keyboard teleoperation: a speed and turn rate scaled by key coefficients."""

    vel: float = 0.5
    turn: float = 0.5
    vel_limit: float = 1.0
    turn_limit: float = 1.0

    def key_coeffs(self, key: str) -> tuple[int, int]:
        """Coefficients for a key; (0, 0) for a key without a mapping."""
        return KEY_COEFFS.get(key, (0, 0))

    def increase_vel(self) -> None:
        """Raise the speed by 10 %, capped at the limit."""
        self.vel = min(self.vel_limit, self.vel * 1.1)

    def decrease_vel(self) -> None:
        """Lower the speed by 10 %."""
        self.vel = min(self.vel_limit, self.vel * 0.9)

    def increase_turn(self) -> None:
        """Raise the turn rate by 10 %, capped at the limit."""
        self.turn = min(self.turn_limit, self.turn * 1.1)

    def decrease_turn(self) -> None:
        """Lower the turn rate by 10 %."""
        self.turn = min(self.turn_limit, self.turn * 0.9)

    def command_for_key(self, key: str) -> tuple[float, float] | None:
        """The (linear, angular) command for a key press, or None if the key is ignored.

        Keys are matched case-insensitively; the stop key gives a zero command.
        """
        name = key.upper()
        if name not in CONTROL_KEYS:
            return None
        lin_coeff, ang_coeff = self.key_coeffs(name)
        return lin_coeff * self.vel, ang_coeff * self.turn


@dataclass
class AxisSliders:
    """Linear and angular velocity sliders that publish on every change."""

    send: VelocitySink
    linear: int = field(default=0, init=False)
    angular: int = field(default=0, init=False)
    linear_text: str = field(default="", init=False)
    angular_text: str = field(default="", init=False)

    @staticmethod
    def _clamp(value: int) -> int:
        return max(SLIDER_MIN, min(SLIDER_MAX, int(value)))

    def set_linear(self, value: int) -> None:
        """Move the linear slider; a change sends (linear, 0)."""
        value = self._clamp(value)
        if value == self.linear:
            return
        self.linear = value
        lin_x = self.linear / SLIDER_SCALE
        self.linear_text = format_velocity(lin_x)
        self.send(lin_x, 0.0)

    def set_angular(self, value: int) -> None:
        """Move the angular slider; a change sends (linear, angular)."""
        value = self._clamp(value)
        if value == self.angular:
            return
        self.angular = value
        ang_z = self.angular / SLIDER_SCALE
        lin_x = self.linear / SLIDER_SCALE
        self.angular_text = format_velocity(ang_z)
        self.send(lin_x, ang_z)

    def release(self) -> None:
        """Releasing a slider springs the angular slider back to zero."""
        self.set_angular(0)
"""Joint-space conversions for the right arm's linear and rotary actuators."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

JOINT_COUNT = 7

# Elbow geometry [mm] and actuator offsets.
_ELBOW_O1 = 28.0
_ELBOW_O2 = 33.0
_ELBOW_Y = 226.0
_ELBOW_R = 50.0
_ELBOW_BASE_ANGLE_DEG = 107.0
_ELBOW_STROKE_OFFSET = 180.4
_ELBOW_VELOCITY_COEFF = 1.3
_CONTROLLER_MODEL_ELBOW_OFFSET_DEG = 90.0

# Elbow stroke [mm] -> angle [deg] fit, highest power first.
_ELBOW_FIT = (3.392e-8, -7.62e-6, 0.0007375, -0.03685, 2.063, 13.11)

_WRIST_PISTON_REST = 162.0

# Wrist piston strokes (roll x, pitch y) [mm] -> angle [deg] fits.
# Each entry is (coefficient, power of roll stroke, power of pitch stroke).
_PITCH_FIT = (
    (0.001665, 0, 0),
    (1.0, 1, 0),
    (1.023, 0, 1),
    (0.001848, 2, 0),
    (-0.001393, 1, 1),
    (0.0004754, 0, 2),
    (3.407e-05, 3, 0),
    (0.0001189, 2, 1),
    (0.0001038, 1, 2),
    (0.000226, 0, 3),
    (5.659e-06, 4, 0),
    (4.071e-06, 3, 1),
    (6.077e-06, 2, 2),
    (2.604e-06, 1, 3),
    (-2.154e-06, 0, 4),
)

_ROLL_FIT = (
    (-8.671e-06, 0, 0),
    (1.019, 1, 0),
    (-1.007, 0, 1),
    (2.939e-05, 2, 0),
    (-1.657e-05, 1, 1),
    (1.088e-05, 0, 2),
    (4.714e-05, 3, 0),
    (-0.0001397, 2, 1),
    (0.0001287, 1, 2),
    (-3.563e-05, 0, 3),
    (-9.05e-08, 4, 0),
    (-4.625e-07, 3, 1),
    (2.809e-06, 2, 2),
    (-3.96e-06, 1, 3),
    (1.643e-06, 0, 4),
)


def to_radian(degree: float) -> float:
    """Convert degrees to radians."""
    return (degree / 180.0) * math.pi


def to_degree(radian: float) -> float:
    """Convert radians to degrees."""
    return (radian / math.pi) * 180.0


def _fit(coeffs, a: float, b: float) -> float:
    return sum(c * a**i * b**j for c, i, j in coeffs)


def _require_joints(values: Sequence[float], what: str) -> list[float]:
    values = list(values)
    if len(values) < JOINT_COUNT:
        raise ValueError(
            f"{what} needs {JOINT_COUNT} joint values, got {len(values)}"
        )
    return values


@dataclass
class JointState:
    """Joint positions [rad] and velocities [rad/s] in model order."""

    position: list[float] = field(default_factory=list)
    velocity: list[float] = field(default_factory=list)


@dataclass(frozen=True)
class RightArmKinematics:
    """Converts between model joint angles and the actuators' raw units.

    Joints are ordered s1, s2, s3, elbow, roll, pitch, yaw. The shoulder and
    yaw joints are driven in degrees, the elbow and the wrist by linear
    pistons in millimetres.
    """

    x1: float = -28.11
    y1: float = 28.46
    x2: float = -28.46
    y2: float = -28.11
    z: float = 22.5
    zz: float = 184.5

    # Elbow

    def _elbow_angle(self, position: float) -> float:
        return to_radian(_ELBOW_BASE_ANGLE_DEG) + position

    def elbow_radian_to_linear_position(self, position: float) -> float:
        """Elbow angle [rad] to piston stroke [mm]."""
        angle = self._elbow_angle(position)
        lx = _ELBOW_R * math.cos(angle) + _ELBOW_O2
        ly = _ELBOW_Y - _ELBOW_R * math.sin(angle)
        return math.sqrt(lx**2 + ly**2 - _ELBOW_O1**2) - _ELBOW_STROKE_OFFSET

    def elbow_radian_to_linear_velocity(self, position: float, velocity: float) -> float:
        """Elbow angular velocity [rad/s] at an angle to piston speed [mm/s]."""
        angle = self._elbow_angle(position)
        lx = _ELBOW_R * math.cos(angle) + _ELBOW_O2
        lx_dot = -_ELBOW_R * math.sin(angle) * velocity
        ly = _ELBOW_Y - _ELBOW_R * math.sin(angle)
        ly_dot = -_ELBOW_R * math.cos(angle) * velocity
        return (lx * lx_dot + ly * ly_dot) / math.sqrt(lx**2 + ly**2 - _ELBOW_O1**2)

    def elbow_linear_to_radian_position(self, position_mm: float) -> float:
        """Elbow piston stroke [mm] to model joint angle [rad]."""
        degrees = 0.0
        for coeff in _ELBOW_FIT:
            degrees = degrees * position_mm + coeff
        return to_radian(degrees - _CONTROLLER_MODEL_ELBOW_OFFSET_DEG)

    def elbow_linear_to_radian_velocity(self, velocity_mm: float) -> float:
        """Elbow piston speed [mm/s] to an approximate joint velocity."""
        return velocity_mm * _ELBOW_VELOCITY_COEFF

    # Wrist

    def _wrist_distances(self, roll: float, pitch: float) -> tuple[float, float]:
        c1, c2 = math.cos(roll), math.cos(pitch)
        s1, s2 = math.sin(roll), math.sin(pitch)

        def distance(x: float, y: float) -> float:
            return math.sqrt(
                (x - x * c2) ** 2
                + (y - (x * s1 * s2 + y * c1)) ** 2
                + (self.z - (self.zz - x * c1 * s2 + y * s1)) ** 2
            )

        return distance(self.x2, self.y2), distance(self.x1, self.y1)

    def wrist_euler_to_linear_position(
        self, desired_pos: tuple[float, float]
    ) -> tuple[float, float]:
        """Wrist (roll, pitch) [rad] to piston strokes (roll, pitch) [mm]."""
        roll, pitch = desired_pos
        roll_dist, pitch_dist = self._wrist_distances(roll, pitch)
        return _WRIST_PISTON_REST - roll_dist, _WRIST_PISTON_REST - pitch_dist

    def wrist_euler_to_linear_velocity(
        self, desired_pos: tuple[float, float], desired_vel: tuple[float, float]
    ) -> tuple[float, float]:
        """Wrist (roll, pitch) rates [rad/s] to piston speeds (roll, pitch) [mm/s]."""
        th_roll, th_pitch = desired_pos
        dr, dp = desired_vel
        c1, c2 = math.cos(th_roll), math.cos(th_pitch)
        s1, s2 = math.sin(th_roll), math.sin(th_pitch)
        x1, y1, x2, y2, z, zz = self.x1, self.y1, self.x2, self.y2, self.z, self.zz

        roll_l, pitch_l = self.wrist_euler_to_linear_position(desired_pos)

        pitch_vel = (
            2 * x1 * x1 * s2 * dp
            - 2 * y1 * x1 * c1 * s2 * dr
            - 2 * y1 * x1 * s1 * c2 * dp
            + 2 * y1 * y1 * s1 * dr
            - 2 * z * x1 * s1 * s2 * dr
            + 2 * z * x1 * c1 * c2 * dp
            - 2 * z * y1 * c1 * dr
            + 2 * zz * x1 * s1 * s2 * dr
            - 2 * zz * x1 * c1 * c2 * dp
            + 2 * zz * y1 * c1 * dr
        ) / (2 * (pitch_l - _WRIST_PISTON_REST))

        roll_vel = (
            2 * (x2 - x2 * c2) * x2 * s2 * dp
            + 2
            * (y2 - (x2 * s1 * s2 + y2 * c1))
            * (y2 * s1 * dr - x2 * c1 * s2 * dr - x2 * s1 * c2 * dp)
            + 2
            * ((z - zz) + (x2 * c1 * s2 - y2 * s1))
            * (-x2 * s1 * s2 * dr + x2 * c1 * c2 * dp - y2 * c1 * dr)
        ) / (2 * (roll_l - _WRIST_PISTON_REST))

        return roll_vel, pitch_vel

    def wrist_linear_to_radian_position(
        self, roll_pitch_mm: tuple[float, float]
    ) -> tuple[float, float]:
        """Wrist piston strokes (roll, pitch) [mm] to (roll, pitch) [rad]."""
        roll_stroke, pitch_stroke = roll_pitch_mm
        roll = to_radian(_fit(_ROLL_FIT, roll_stroke, pitch_stroke))
        pitch = -to_radian(_fit(_PITCH_FIT, roll_stroke, pitch_stroke))
        return roll, pitch

    def wrist_linear_to_radian_velocity(
        self, roll_pitch_vel_mm: tuple[float, float]
    ) -> tuple[float, float]:
        """Wrist piston speeds, passed through unchanged."""
        roll, pitch = roll_pitch_vel_mm
        return roll, pitch

    # Whole arm

    def raw_to_joint_state(
        self, positions: Sequence[float], velocities: Sequence[float]
    ) -> JointState:
        """Convert the controller's raw joint readings to a model joint state."""
        pos = _require_joints(positions, "positions")
        vel = _require_joints(velocities, "velocities")

        state = JointState(
            position=[to_radian(p) for p in pos[:3]],
            velocity=[to_radian(v) for v in vel[:3]],
        )
        state.position.append(self.elbow_linear_to_radian_position(pos[3]))
        state.velocity.append(self.elbow_linear_to_radian_velocity(vel[3]))

        wrist_pos = self.wrist_linear_to_radian_position((pos[4], pos[5]))
        wrist_vel = self.wrist_linear_to_radian_velocity((vel[4], vel[5]))
        state.position.extend(wrist_pos)
        state.velocity.extend(wrist_vel)

        state.position.append(to_radian(pos[6]))
        state.velocity.append(to_radian(vel[6]))
        return state

    def joint_command_to_raw(
        self, pose: Sequence[float], vel: Sequence[float]
    ) -> tuple[list[float], list[float]]:
        """Convert model joint goals to the controller's raw (positions, velocities)."""
        pose = _require_joints(pose, "pose")
        vel = _require_joints(vel, "vel")

        raw_pos = [to_degree(p) for p in pose[:3]]
        raw_vel = [to_degree(v) for v in vel[:3]]

        elbow = pose[3] + math.pi / 2.0
        raw_pos.append(self.elbow_radian_to_linear_position(elbow))
        raw_vel.append(self.elbow_radian_to_linear_velocity(elbow, vel[3]))

        wrist_angles = (pose[4], pose[5])
        raw_pos.extend(self.wrist_euler_to_linear_position(wrist_angles))
        raw_vel.extend(self.wrist_euler_to_linear_velocity(wrist_angles, (vel[4], vel[5])))

        raw_pos.append(to_degree(pose[6]))
        raw_vel.append(to_degree(vel[6]))
        return raw_pos, raw_vel
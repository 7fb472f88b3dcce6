"""Mission building blocks: move goals, goal-state mapping and a charging task."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable

GOAL_FIELD_SEPARATOR = ";"
_GOAL_FIELD_COUNT = 8

CHARGING_PORT_FRAME = "map"
CHARGING_PORT_X = 3.5
CHARGING_PORT_ORIENT_W = 1.0

# The charge task finishes once its level counter reaches this value.
CHARGE_STEPS = 10


class TaskStatus(enum.Enum):
    """Result of ticking a mission task."""

    IDLE = "idle"
    RUNNING = "running"
    SUCCESS = "success"
    FAILURE = "failure"


class GoalState(enum.Enum):
    """State of a goal sent to the motion planner."""

    PENDING = "pending"
    ACTIVE = "active"
    RECALLED = "recalled"
    REJECTED = "rejected"
    PREEMPTED = "preempted"
    ABORTED = "aborted"
    SUCCEEDED = "succeeded"
    LOST = "lost"


@dataclass
class PositionGoal:
    """A target pose: position, orientation quaternion and reference frame."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    pos_z: float = 0.0
    orient_x: float = 0.0
    orient_y: float = 0.0
    orient_z: float = 0.0
    orient_w: float = 0.0
    target_frame: str = ""


def parse_position_goal(text: str) -> PositionGoal:
    """Parse ``x;y;z;qx;qy;qz;qw;frame`` into a PositionGoal.

    Raises ValueError if the field count is wrong or a number is invalid.
    """
    parts = text.split(GOAL_FIELD_SEPARATOR)
    if len(parts) != _GOAL_FIELD_COUNT:
        raise ValueError(
            f"invalid input: expected {_GOAL_FIELD_COUNT} fields, got {len(parts)}"
        )
    *numbers, frame = parts
    try:
        values = [float(part) for part in numbers]
    except ValueError as exc:
        raise ValueError(f"invalid input: {exc}") from exc
    return PositionGoal(*values, target_frame=frame)


def status_from_goal_state(state: GoalState) -> TaskStatus:
    """Map a planner goal state to the status of the task that sent it."""
    if state is GoalState.SUCCEEDED:
        return TaskStatus.SUCCESS
    if state in (GoalState.ABORTED, GoalState.REJECTED):
        return TaskStatus.FAILURE
    return TaskStatus.RUNNING


def charging_port_goal() -> PositionGoal:
    """The fixed goal pose of the charging port in the map frame."""
    return PositionGoal(
        pos_x=CHARGING_PORT_X,
        orient_w=CHARGING_PORT_ORIENT_W,
        target_frame=CHARGING_PORT_FRAME,
    )


def is_battery_ok() -> TaskStatus:
    """Battery check condition; always succeeds."""
    print("Battery is OK.")
    return TaskStatus.SUCCESS


def is_battery_full() -> TaskStatus:
    """Battery full condition; always succeeds."""
    return TaskStatus.SUCCESS


@dataclass
class ChargeAction:
    """A long-running charge task that reports progress on every tick."""

    report: Callable[[str], None] = print
    level: int = field(default=0)

    def on_start(self) -> TaskStatus:
        """Start charging."""
        return TaskStatus.RUNNING

    def on_running(self) -> TaskStatus:
        """Advance the charge by one step; succeed once full."""
        self.report(f"Charging...Currently at: {self.level * 10}%.")
        if self.level == CHARGE_STEPS:
            self.level = 0
            return TaskStatus.SUCCESS
        self.level += 1
        return TaskStatus.RUNNING

    def on_halted(self) -> TaskStatus:
        """Halt the task, keeping the charge level reached so far.

        Returns the status the task is left in, which is idle.
        """
        return TaskStatus.IDLE
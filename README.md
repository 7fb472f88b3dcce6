# amrtools

amrtools is a set of plain Python helpers for a differential-drive mobile robot that carries a seven-joint right arm. It covers:

- arm kinematics
- drive unit conversions
- wheel odometry
- named navigation points
- keyboard and slider teleoperation
- node status tracking
- small mission building blocks
- storage of the last known pose

Everything is a calculation or a piece of state bookkeeping, so you can run and test it on its own.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Modules

### `amrtools.kinematics`

- `to_radian` and `to_degree` convert between angle units.
- `RightArmKinematics` converts between model joint angles and actuator units. Joints are ordered s1, s2, s3, elbow, roll, pitch, yaw.
  - The shoulder and yaw joints use degrees.
  - The elbow and the roll/pitch wrist use piston strokes in millimetres.
  - `raw_to_joint_state(positions, velocities)` turns seven raw readings into a `JointState` with radian positions and velocities.
  - `joint_command_to_raw(pose, vel)` turns a seven-joint command into raw `(positions, velocities)` lists.
  - Both raise `ValueError` if fewer than seven values are given.

### `amrtools.drive_units`

- `VelocityHelper` and `PositionHelper` hold the drive train parameters.
- `driver_vel_to_linear` and `linear_vel_to_driver_cmd` convert between a wheel surface speed [m/s] and drive controller velocity values. The command is truncated toward zero to an `int`.
- `motor_position_to_wheel_position_rad` converts an encoder count to a wheel angle. It uses the fixed `ENCODER_COUNTS_PER_REV` and `WHEEL_GEAR_REDUCTION` values; the `PositionHelper` argument is accepted but not used.

### `amrtools.odometry`

- `WheelOdometry.update(right_encoder, left_encoder)` integrates cumulative encoder readings in millimetres into an `Odometry` pose and twist in the `odom` frame.
  - The first reading only sets the reference and returns `None`.
  - A wheel travel difference larger than the wheel base raises `ValueError`.
  - Time comes from the `clock` callable, which is `time.time` by default.
- Helpers:
  - `normalize_angle` wraps an angle once by a full turn.
  - `quaternion_from_yaw` builds a rotation about the z axis.
  - `odometry_from_params` builds a `WheelOdometry` from a mapping with the keys `/amr/wheel/radius` and `/amr/wheel/base`. The fallbacks are 0.2 and 0.4.

### `amrtools.nav_points`

- `load_nav_points(path)` reads the `nav_points` list from a YAML file. Each entry has `point_name`, `c_x`, `c_y` and `c_w`, and becomes a `NavPoint`.
  - An empty or malformed file raises `NavPointsError`, which is a subclass of `ValueError`.
- `find_nav_point(points, name)` returns the first point with that name.
  - An empty name raises `ValueError`.
  - A name that matches no point raises `KeyError`.

### `amrtools.teleop`

- `TeleopController` maps the keys T Y U / G H J / B N M to `(linear, angular)` commands.
  - Speed and turn rate both start at 0.5.
  - Keys are matched case-insensitively.
  - `H` gives a zero command.
  - Any other key gives `None`.
  - `increase_vel` and `increase_turn` step their value up by 10 %, capped at 1.0.
  - `decrease_vel` and `decrease_turn` step it down by 10 %.
- `AxisSliders` models the two velocity sliders. Each slider ranges from -1000 to 1000 and is scaled by 1/1000.
  - Every change calls the `send(linear, angular)` callback.
  - `release()` returns the angular slider to zero.
- `format_velocity` renders a value with three decimals.

### `amrtools.diagnostics`

- `load_nodes_to_monitor(path)` reads the `nodes_to_monitor` list from YAML.
- `NodeMonitor` tracks the master and each monitored node as a `NodeStatus`: `UNKNOWN`, `INACTIVE` or `ACTIVE`.
  - `update(active_nodes)` takes the list of currently running node names and returns a copy of the statuses.
  - Pass `None` to `update` when there is no master.

### `amrtools.mission`

- `parse_position_goal` reads a `PositionGoal` from text of the form `x;y;z;qx;qy;qz;qw;frame`. Malformed text raises `ValueError`.
- `status_from_goal_state` maps a planner `GoalState` to a `TaskStatus`.
- `charging_port_goal` returns the fixed charging pose.
- `is_battery_ok` and `is_battery_full` are conditions that always succeed.
- `ChargeAction` is a stepwise charge task. It reports progress on every `on_running()` tick and succeeds after the level reaches 10.

### `amrtools.position_store`

- `store_position(path, position)` writes a `StoredPosition` under `last_position` in an existing YAML file. It keeps the file's other keys.
- `position_to_node` builds the mapping that gets written.

## Example

```python
from amrtools.teleop import TeleopController
from amrtools.odometry import WheelOdometry

controller = TeleopController()
print(controller.command_for_key("T"))   # (0.5, 0.5)
controller.increase_vel()
print(controller.command_for_key("n"))   # (-0.55, 0.0), approximately

ticks = iter([0.0, 1.0])
odom = WheelOdometry(clock=lambda: next(ticks))
odom.update(0.0, 0.0)                    # first reading: None
print(odom.update(100.0, 100.0).x)       # 0.1 metres forward
```

## What this package does not do

amrtools does not connect to robot middleware, motor drives, an arm controller or a motion planner. It has no graphical interface and no command-line program.

Publishing commands, reading encoders, polling which nodes are running, and running a behaviour tree or a navigation loop are all left to the calling application. That application passes the values in and acts on the results.

## Versioning

`amrtools.__version__` holds the package version.
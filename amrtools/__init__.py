"""Kinematics, drive units, odometry, teleoperation, diagnostics and mission helpers for a mobile robot."""

__version__ = "0.1.0"
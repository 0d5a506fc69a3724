"""Mecanum base kinematics, PID obstacle avoidance, wall following and keyboard teleoperation."""

__version__ = "0.1.0"
__all__ = ["velocity", "base", "avoid_pid", "wall_follow", "teleop"]
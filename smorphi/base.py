"""Kinematics and wheel control of the four-wheel mecanum base."""

from __future__ import annotations

import functools
import logging
import math
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)

SPEED = 4.0
MAX_SPEED = 0.3
SPEED_INCREMENT = 0.05
DISTANCE_TOLERANCE = 0.001
ANGLE_TOLERANCE = 0.001

WHEEL_RADIUS = 0.05
LX = 0.07  # longitudinal distance from the centre of mass to a wheel [m]
LY = 0.07  # lateral distance from the centre of mass to a wheel [m]
_YAW_OFFSET = 0.085


class Motor(Protocol):
    """A wheel motor driven in velocity mode."""

    def set_position(self, position: float) -> None: ...

    def set_velocity(self, velocity: float) -> None: ...


def wheel_speeds(vx: float, vy: float, vtheta: float) -> tuple[float, float, float, float]:
    """Wheel angular speeds for a body velocity, in motor order fr, fl, rr, rl."""
    arm = LX + LY
    k = 1 / WHEEL_RADIUS
    return (
        k * (vx + vy + _YAW_OFFSET * vtheta + arm * vtheta),
        k * (vx - vy - _YAW_OFFSET * vtheta - arm * vtheta),
        k * (vx - vy - _YAW_OFFSET * vtheta + arm * vtheta),
        k * (vx + vy + _YAW_OFFSET * vtheta - arm * vtheta),
    )


def _clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))


class MecanumBase:
    """Drives four mecanum wheels, ordered front-right, front-left, rear-right, rear-left."""

    def __init__(self) -> None:
        self.motors: list[Motor] = []
        self.robot_vx = 0.0
        self.robot_vy = 0.0
        self.robot_vtheta = 0.0

    def init_motor(self, fl: Motor, fr: Motor, rl: Motor, rr: Motor) -> None:
        """Attach the four wheel motors."""
        self.motors = [fr, fl, rr, rl]

    def reset(self) -> None:
        """Stop all wheels and forget the accumulated velocity."""
        self.set_wheel_speeds((0.0, 0.0, 0.0, 0.0))
        self.robot_vx = 0.0
        self.robot_vy = 0.0
        self.robot_vtheta = 0.0

    def set_wheel_speeds(self, speeds: Sequence[float]) -> None:
        """Send one angular speed to each motor, in motor order."""
        if len(self.motors) != 4:
            raise RuntimeError("motors have not been initialised")
        if len(speeds) != 4:
            raise ValueError(f"expected 4 wheel speeds, got {len(speeds)}")
        for motor, speed in zip(self.motors, speeds):
            motor.set_position(math.inf)
            motor.set_velocity(speed)

    def forwards(self) -> None:
        self.set_wheel_speeds((SPEED, SPEED, SPEED, SPEED))

    def backwards(self) -> None:
        self.set_wheel_speeds((-SPEED, -SPEED, -SPEED, -SPEED))

    def turn_left(self) -> None:
        self.set_wheel_speeds((-SPEED, SPEED, -SPEED, SPEED))

    def turn_right(self) -> None:
        self.set_wheel_speeds((SPEED, -SPEED, SPEED, -SPEED))

    def strafe_left(self) -> None:
        self.set_wheel_speeds((SPEED, -SPEED, -SPEED, SPEED))

    def strafe_right(self) -> None:
        self.set_wheel_speeds((-SPEED, SPEED, SPEED, -SPEED))

    def move(self, vx: float, vy: float, vtheta: float) -> None:
        """Drive the base at a body velocity."""
        self.set_wheel_speeds(wheel_speeds(vx, vy, vtheta))

    def _move_accumulated(self) -> None:
        self.move(self.robot_vx, self.robot_vy, self.robot_vtheta)

    def forwards_increment(self) -> None:
        self.robot_vx = min(self.robot_vx + SPEED_INCREMENT, MAX_SPEED)
        self._move_accumulated()

    def backwards_increment(self) -> None:
        self.robot_vx = max(self.robot_vx - SPEED_INCREMENT, -MAX_SPEED)
        self._move_accumulated()

    def turn_left_increment(self) -> None:
        self.robot_vtheta = min(self.robot_vtheta + SPEED_INCREMENT, MAX_SPEED)
        self._move_accumulated()

    def turn_right_increment(self) -> None:
        self.robot_vtheta = max(self.robot_vtheta - SPEED_INCREMENT, -MAX_SPEED)
        self._move_accumulated()

    def strafe_left_increment(self) -> None:
        self.robot_vy = min(self.robot_vy + SPEED_INCREMENT, MAX_SPEED)
        self._move_accumulated()

    def strafe_right_increment(self) -> None:
        self.robot_vy = max(self.robot_vy - SPEED_INCREMENT, -MAX_SPEED)
        self._move_accumulated()


@functools.lru_cache(maxsize=None)
def get_base() -> MecanumBase:
    """The process-wide base instance, created on first use."""
    logger.info("Base instance created.")
    return MecanumBase()
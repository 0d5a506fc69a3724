"""Wall following for the mecanum base, from proximity sensors or a lidar scan."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from smorphi.base import MecanumBase
from smorphi.velocity import Velocity

logger = logging.getLogger(__name__)

CONSTANT_VEL = 0.3
K_P = 5.0
SENSOR_SETPOINT = 0.1
LIDAR_SETPOINT = 0.05
YAW_TARGET = -1.57
YAW_GAIN = 1.0

# Bearing of each proximity sensor, in reading order: forward, backward, right, left.
SENSOR_ANGLES = (0.0, math.pi, -math.pi / 2, math.pi / 2)


def closest_sensor(distances: Sequence[float]) -> tuple[int, float]:
    """Index and value of the smallest reading; the first one wins a tie."""
    if not distances:
        raise ValueError("no distance readings")
    index = min(range(len(distances)), key=distances.__getitem__)
    return index, distances[index]


def wrap_angle(angle: float) -> float:
    """Shift an angle by one turn towards ``[0, 2*pi)``."""
    if angle < 0:
        return angle + 2 * math.pi
    if angle >= 2 * math.pi:
        return angle - 2 * math.pi
    return angle


def closest_lidar_return(
    ranges: Sequence[float], min_range: float, fov: float
) -> tuple[float, float]:
    """Distance beyond ``min_range`` and wrapped bearing of the nearest lidar return.

    When no return is closer than infinity, the distance is infinite and the
    bearing is that of the slot just before the first one.
    """
    if len(ranges) < 2:
        raise ValueError(f"need at least 2 lidar returns, got {len(ranges)}")
    min_idx = -1
    min_distance = math.inf
    for index, value in enumerate(ranges):
        distance = value - min_range
        if distance < min_distance:
            min_distance = distance
            min_idx = index
    angle = fov / 2.0 + min_idx * (fov / (len(ranges) - 1))
    return min_distance, wrap_angle(angle)


def wall_follow_command(
    min_distance: float,
    angle: float,
    setpoint: float,
    constant_vel: float,
    k_p: float,
) -> tuple[float, float]:
    """Planar velocity that runs along a wall at ``angle`` while holding ``setpoint``."""
    error = setpoint - min_distance
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    forward_x = constant_vel * sin_a
    forward_y = -constant_vel * cos_a
    correction_x = max(-constant_vel, min(constant_vel, k_p * error * cos_a))
    correction_y = max(-constant_vel, min(constant_vel, k_p * error * sin_a))
    return forward_x - correction_x, forward_y - correction_y


@dataclass
class SensorWallFollower:
    """Follows the nearest wall seen by four proximity sensors."""

    setpoint: float = SENSOR_SETPOINT
    constant_vel: float = CONSTANT_VEL
    k_p: float = K_P
    base: Optional[MecanumBase] = None

    def step(self, distances: Sequence[float]) -> Velocity:
        """Readings ordered forward, backward, right, left; returns the command sent."""
        if len(distances) != len(SENSOR_ANGLES):
            raise ValueError(
                f"expected {len(SENSOR_ANGLES)} sensor readings, got {len(distances)}"
            )
        index, min_distance = closest_sensor(distances)
        vx, vy = wall_follow_command(
            min_distance, SENSOR_ANGLES[index], self.setpoint, self.constant_vel, self.k_p
        )
        command = Velocity(vx, vy, 0.0)
        if self.base is not None:
            self.base.move(command.vx, command.vy, command.vtheta)
        return command


@dataclass
class LidarWallFollower:
    """Follows the nearest wall in a lidar scan while holding a fixed heading."""

    setpoint: float = LIDAR_SETPOINT
    constant_vel: float = CONSTANT_VEL
    k_p: float = K_P
    yaw_target: float = YAW_TARGET
    yaw_gain: float = YAW_GAIN
    base: Optional[MecanumBase] = None

    def step(
        self, ranges: Sequence[float], min_range: float, fov: float, yaw: float
    ) -> Velocity:
        """Process one scan and the current yaw; returns the command sent."""
        min_distance, angle = closest_lidar_return(ranges, min_range, fov)
        vx, vy = wall_follow_command(
            min_distance, angle, self.setpoint, self.constant_vel, self.k_p
        )
        vtheta = self.yaw_gain * (self.yaw_target - yaw)
        logger.debug(
            "distance=%s angle_deg=%s command=(%s, %s)",
            min_distance, math.degrees(angle), vx, vy,
        )
        command = Velocity(vx, -vy, vtheta)
        if self.base is not None:
            self.base.move(command.vx, command.vy, command.vtheta)
        return command
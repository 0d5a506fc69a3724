"""PID-based obstacle avoidance for a differential-drive robot with eight proximity sensors."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

logger = logging.getLogger(__name__)

BASE_SPEED = 4.0
SAFE_DIST = 200.0
DANGER_DIST = 50.0
MAX_SPEED = 1.57
NUM_SENSORS = 8
FRONT_THRESHOLD = 80.0


@dataclass
class PidChannel:
    """One PID loop whose output is clamped to ``[-limit, limit]``."""

    kp: float = 0.15
    ki: float = 0.001
    kd: float = 0.05
    limit: float = MAX_SPEED
    integral: float = 0.0
    previous_error: float = 0.0

    def update(self, error: float, dt: float) -> float:
        """Feed one error sample taken ``dt`` seconds after the last; return the correction."""
        if dt <= 0:
            raise ValueError(f"time step must be positive, got {dt}")
        self.integral += error * dt
        derivative = (error - self.previous_error) / dt
        output = self.kp * error + self.ki * self.integral + self.kd * derivative
        self.previous_error = error
        return max(-self.limit, min(self.limit, output))


def _clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))


@dataclass
class ObstacleAvoider:
    """Turns eight proximity readings into left and right wheel speeds."""

    channels: list[PidChannel] = field(
        default_factory=lambda: [PidChannel() for _ in range(NUM_SENSORS)]
    )
    last_time: float = 0.0
    corrections: list[float] = field(default_factory=lambda: [0.0] * NUM_SENSORS)

    def step(self, distances: Sequence[float], time: float) -> tuple[float, float]:
        """Process readings taken at simulation ``time``; return ``(left, right)`` speeds."""
        if len(distances) != NUM_SENSORS:
            raise ValueError(f"expected {NUM_SENSORS} sensor readings, got {len(distances)}")
        dt = time - self.last_time
        self.corrections = [
            channel.update(SAFE_DIST - value, dt)
            for channel, value in zip(self.channels, distances)
        ]
        c = self.corrections
        front_val = (c[0] + c[7]) / 2.0
        left_val = (c[5] + c[6]) / 2.0
        right_val = (c[1] + c[2]) / 2.0

        left_speed = right_speed = BASE_SPEED
        if distances[0] > FRONT_THRESHOLD or distances[7] > FRONT_THRESHOLD:
            if left_val > right_val:
                left_speed, right_speed = 1.0, -1.0
            else:
                left_speed, right_speed = -1.0, 1.0
        elif distances[5] > SAFE_DIST or distances[6] > SAFE_DIST:
            left_speed += left_val
            right_speed -= left_val
        elif distances[2] > SAFE_DIST or distances[1] > SAFE_DIST:
            left_speed -= right_val
            right_speed += right_val

        left_speed = _clamp(left_speed, BASE_SPEED)
        right_speed = _clamp(right_speed, BASE_SPEED)
        logger.debug(
            "left=%s right=%s front=%s left_val=%s right_val=%s",
            left_speed, right_speed, front_val, left_val, right_val,
        )
        self.last_time = time
        return left_speed, right_speed
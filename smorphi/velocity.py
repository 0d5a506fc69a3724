"""Planar body velocity of the robot base."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Velocity:
    """Body velocity: forward ``vx``, lateral ``vy`` and yaw rate ``vtheta``.

    The arithmetic operators act component by component.
    """

    vx: float = 0.0
    vy: float = 0.0
    vtheta: float = 0.0

    def __add__(self, other: Velocity) -> Velocity:
        if not isinstance(other, Velocity):
            return NotImplemented
        return Velocity(self.vx + other.vx, self.vy + other.vy, self.vtheta + other.vtheta)

    def __sub__(self, other: Velocity) -> Velocity:
        if not isinstance(other, Velocity):
            return NotImplemented
        return Velocity(self.vx - other.vx, self.vy - other.vy, self.vtheta - other.vtheta)

    def __mul__(self, other: Velocity) -> Velocity:
        if not isinstance(other, Velocity):
            return NotImplemented
        return Velocity(self.vx * other.vx, self.vy * other.vy, self.vtheta * other.vtheta)

    def __truediv__(self, other: Velocity) -> Velocity:
        if not isinstance(other, Velocity):
            return NotImplemented
        return Velocity(self.vx / other.vx, self.vy / other.vy, self.vtheta / other.vtheta)
"""Keyboard teleoperation of the mecanum base."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from smorphi.base import MecanumBase
from smorphi.velocity import Velocity

logger = logging.getLogger(__name__)

STEP = 0.05
NO_KEY = -1
KEY_LEFT = 314
KEY_RIGHT = 316


class LastMove(enum.Enum):
    """The last discrete manoeuvre the base performed."""

    FORWARD = enum.auto()
    BACKWARD = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    FORWARD_LEFT = enum.auto()
    FORWARD_RIGHT = enum.auto()
    BACKWARD_LEFT = enum.auto()
    BACKWARD_RIGHT = enum.auto()
    NONE = enum.auto()


# key -> (change to vx, change to vy, change to vtheta); None resets the component to 0.
_BINDINGS: dict[int, tuple[Optional[float], Optional[float], Optional[float]]] = {
    ord("I"): (STEP, None, None),
    ord("M"): (-STEP, None, None),
    ord("J"): (None, STEP, None),
    ord("L"): (None, -STEP, None),
    KEY_LEFT: (None, None, -STEP),
    KEY_RIGHT: (None, None, STEP),
    ord("U"): (STEP, STEP, None),
    ord("O"): (STEP, -STEP, None),
    ord("N"): (-STEP, STEP, None),
    ord(","): (-STEP, -STEP, None),
}


def _apply(current: float, delta: Optional[float]) -> float:
    return 0.0 if delta is None else current + delta


@dataclass
class Teleop:
    """Turns key presses into body velocities; a key acts once until released."""

    base: Optional[MecanumBase] = None
    velocity: Velocity = field(default_factory=Velocity)
    last_key: int = NO_KEY
    last_move: LastMove = LastMove.NONE

    def handle_key(self, key: int) -> Optional[Velocity]:
        """Process the key read this step (negative for none).

        Returns the velocity commanded, or None when the key is absent or held.
        """
        command: Optional[Velocity] = None
        if key >= 0 and key != self.last_key:
            dvx, dvy, dvtheta = _BINDINGS.get(key, (None, None, None))
            v = self.velocity
            self.velocity = Velocity(
                _apply(v.vx, dvx), _apply(v.vy, dvy), _apply(v.vtheta, dvtheta)
            )
            command = replace(self.velocity)
            if self.base is not None:
                self.base.move(command.vx, command.vy, command.vtheta)
            logger.debug("key=%s command=%s", key, command)
        self.last_key = key
        return command
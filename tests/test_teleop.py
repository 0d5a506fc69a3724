import pytest

from smorphi.base import MecanumBase, wheel_speeds
from smorphi.teleop import KEY_LEFT, KEY_RIGHT, LastMove, Teleop
from smorphi.velocity import Velocity


class RecordingMotor:
    def __init__(self):
        self.velocity = None

    def set_position(self, position):
        pass

    def set_velocity(self, velocity):
        self.velocity = velocity


def test_forward_key_increments_vx():
    teleop = Teleop()
    command = teleop.handle_key(73)
    assert command == Velocity(0.05, 0.0, 0.0)


def test_held_key_does_nothing():
    teleop = Teleop()
    teleop.handle_key(73)
    assert teleop.handle_key(73) is None
    assert teleop.velocity.vx == pytest.approx(0.05)


def test_release_and_press_again_accumulates():
    teleop = Teleop()
    teleop.handle_key(73)
    assert teleop.handle_key(-1) is None
    command = teleop.handle_key(73)
    assert command.vx == pytest.approx(2 * 0.05)
    assert teleop.last_key == 73


def test_strafe_key_resets_other_components():
    teleop = Teleop()
    teleop.handle_key(73)
    command = teleop.handle_key(74)
    assert command.vx == 0.0
    assert command.vy == pytest.approx(0.05)
    assert command.vtheta == 0.0


def test_arrow_keys_turn():
    teleop = Teleop()
    left = teleop.handle_key(KEY_LEFT)
    assert left.vtheta == pytest.approx(-0.05)
    right = teleop.handle_key(KEY_RIGHT)
    assert right.vtheta == pytest.approx(0.0)


@pytest.mark.parametrize(
    "key, sx, sy",
    [(ord("U"), 1, 1), (ord("O"), 1, -1), (ord("N"), -1, 1), (ord(","), -1, -1)],
)
def test_diagonal_keys(key, sx, sy):
    command = Teleop().handle_key(key)
    assert command.vx == pytest.approx(sx * 0.05)
    assert command.vy == pytest.approx(sy * 0.05)


def test_unbound_key_stops():
    teleop = Teleop()
    teleop.handle_key(73)
    command = teleop.handle_key(32)
    assert command == Velocity()


def test_command_is_a_copy():
    teleop = Teleop()
    command = teleop.handle_key(73)
    command.vx = 9.0
    assert teleop.velocity.vx == pytest.approx(0.05)


def test_drives_base():
    motors = [RecordingMotor() for _ in range(4)]
    base = MecanumBase()
    base.init_motor(*motors)
    teleop = Teleop(base=base)
    command = teleop.handle_key(ord("U"))
    expected = wheel_speeds(command.vx, command.vy, command.vtheta)
    # init_motor takes fl, fr, rl, rr; wheel order is fr, fl, rr, rl.
    observed = (motors[1].velocity, motors[0].velocity, motors[3].velocity, motors[2].velocity)
    assert observed == pytest.approx(expected)


def test_initial_state():
    teleop = Teleop()
    assert teleop.last_move is LastMove.NONE
    assert teleop.handle_key(-1) is None
    assert teleop.velocity == Velocity()
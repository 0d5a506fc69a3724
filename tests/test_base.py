import math

import pytest

from smorphi.base import (
    MAX_SPEED,
    SPEED,
    MecanumBase,
    get_base,
    wheel_speeds,
)


class FakeMotor:
    def __init__(self):
        self.position = None
        self.velocity = None

    def set_position(self, position):
        self.position = position

    def set_velocity(self, velocity):
        self.velocity = velocity


@pytest.fixture
def rig():
    fl, fr, rl, rr = FakeMotor(), FakeMotor(), FakeMotor(), FakeMotor()
    base = MecanumBase()
    base.init_motor(fl, fr, rl, rr)
    return base, {"fl": fl, "fr": fr, "rl": rl, "rr": rr}


def speeds_of(motors):
    return (motors["fr"].velocity, motors["fl"].velocity, motors["rr"].velocity, motors["rl"].velocity)


def test_wheel_speeds_zero():
    assert wheel_speeds(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0, 0.0)


def test_pure_forward_drives_all_wheels_equally():
    s = wheel_speeds(0.1, 0.0, 0.0)
    assert len(set(s)) == 1
    assert s[0] > 0


def test_pure_strafe_pattern():
    fr, fl, rr, rl = wheel_speeds(0.0, 0.1, 0.0)
    assert fr == pytest.approx(rl)
    assert fl == pytest.approx(rr)
    assert fr == pytest.approx(-fl)


def test_wheel_speeds_linear():
    a = wheel_speeds(0.1, 0.2, 0.3)
    b = wheel_speeds(0.2, 0.4, 0.6)
    for x, y in zip(a, b):
        assert y == pytest.approx(2 * x)


def test_forwards_sets_speed_and_infinite_position(rig):
    base, motors = rig
    base.forwards()
    assert speeds_of(motors) == (SPEED, SPEED, SPEED, SPEED)
    assert all(math.isinf(m.position) for m in motors.values())


def test_turn_left_motor_order(rig):
    base, motors = rig
    base.turn_left()
    assert speeds_of(motors) == (-SPEED, SPEED, -SPEED, SPEED)


def test_strafe_right_motor_order(rig):
    base, motors = rig
    base.strafe_right()
    assert speeds_of(motors) == (-SPEED, SPEED, SPEED, -SPEED)


def test_move_matches_wheel_speeds(rig):
    base, motors = rig
    base.move(0.1, -0.05, 0.2)
    assert speeds_of(motors) == wheel_speeds(0.1, -0.05, 0.2)


def test_forwards_increment_clamps_at_max(rig):
    base, motors = rig
    for _ in range(20):
        base.forwards_increment()
    assert base.robot_vx == MAX_SPEED
    assert speeds_of(motors) == wheel_speeds(MAX_SPEED, 0.0, 0.0)


def test_strafe_right_increment_clamps_at_negative_max(rig):
    base, _ = rig
    for _ in range(20):
        base.strafe_right_increment()
    assert base.robot_vy == -MAX_SPEED


def test_turn_increments_cancel(rig):
    base, motors = rig
    base.turn_left_increment()
    base.turn_right_increment()
    assert base.robot_vtheta == pytest.approx(0.0)
    assert speeds_of(motors) == pytest.approx((0.0, 0.0, 0.0, 0.0))


def test_reset_stops_and_clears(rig):
    base, motors = rig
    base.forwards_increment()
    base.strafe_left_increment()
    base.reset()
    assert (base.robot_vx, base.robot_vy, base.robot_vtheta) == (0.0, 0.0, 0.0)
    assert speeds_of(motors) == (0.0, 0.0, 0.0, 0.0)


def test_without_motors_raises():
    with pytest.raises(RuntimeError):
        MecanumBase().forwards()


def test_wrong_speed_count_raises(rig):
    base, _ = rig
    with pytest.raises(ValueError):
        base.set_wheel_speeds([1.0, 2.0])


def test_get_base_is_singleton():
    first = get_base()
    original = first.robot_vx
    try:
        first.robot_vx = 0.15
        assert get_base().robot_vx == 0.15
    finally:
        first.robot_vx = original
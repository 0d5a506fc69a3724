# smorphi

Control logic for a four-wheel mecanum robot base and a small
differential-drive robot. The logic is plain Python with no dependencies
outside the standard library. Each controller takes sensor readings and returns
velocity commands, so any simulator or hardware layer can drive it.

## Modules

### `smorphi.velocity`

`Velocity(vx=0.0, vy=0.0, vtheta=0.0)` is a dataclass for a body velocity.
The `+`, `-`, `*` and `/` operators work component by component between two
`Velocity` values.

### `smorphi.base`

- `wheel_speeds(vx, vy, vtheta)` returns the four wheel angular speeds for a
  body velocity, in motor order front-right, front-left, rear-right, rear-left.
- `MecanumBase` drives four motor objects. A motor object is anything with
  `set_position(position)` and `set_velocity(velocity)` methods.
  - `init_motor(fl, fr, rl, rr)` attaches the motors.
  - `set_wheel_speeds(speeds)` sends four speeds to the motors, setting each
    motor's position to infinity first. It raises `RuntimeError` if the motors
    are not attached and `ValueError` if it is not given exactly four speeds.
  - `move(vx, vy, vtheta)` drives the base at a body velocity.
  - Fixed-speed moves: `forwards`, `backwards`, `turn_left`, `turn_right`,
    `strafe_left` and `strafe_right`. Each wheel turns at ±`SPEED` (4.0).
  - Incremental moves change the stored velocity by `SPEED_INCREMENT` (0.05),
    limited to ±`MAX_SPEED` (0.3), and then move the base:
    `forwards_increment`, `backwards_increment`, `turn_left_increment`,
    `turn_right_increment`, `strafe_left_increment` and
    `strafe_right_increment`.
  - `reset()` stops the wheels and clears the stored velocity.
- `get_base()` returns one shared `MecanumBase`. It is created on the first
  call.

### `smorphi.avoid_pid`

- `PidChannel` is one PID loop. Its defaults are kp 0.15, ki 0.001 and
  kd 0.05, and its output is clamped to ±1.57. `update(error, dt)` returns the
  correction and raises `ValueError` if `dt` is not positive.
- `ObstacleAvoider.step(distances, time)` takes eight proximity readings at a
  simulation time and returns `(left, right)` wheel speeds. The speeds are
  limited to ±4.0. The time must be later than that of the previous call; the
  first call counts from time 0.

### `smorphi.wall_follow`

- `closest_sensor(distances)` returns the index and value of the smallest
  reading.
- `closest_lidar_return(ranges, min_range, fov)` returns the distance beyond
  `min_range` and the bearing of the nearest lidar return.
- `wrap_angle(angle)` shifts an angle by one turn towards `[0, 2π)`.
- `wall_follow_command(min_distance, angle, setpoint, constant_vel, k_p)`
  returns the planar `(vx, vy)` that moves along a wall while holding the
  setpoint distance.
- `SensorWallFollower.step(distances)` uses four readings ordered forward,
  backward, right, left.
- `LidarWallFollower.step(ranges, min_range, fov, yaw)` uses a scan and also
  steers the heading towards `yaw_target` (-1.57).

Both followers return a `Velocity`. If they were given a `base`, they also
send the command to it.

### `smorphi.teleop`

`Teleop.handle_key(key)` turns a key code into a velocity command. The keys
are:

- `I` and `M`: change forward speed.
- `J` and `L`: change lateral speed.
- `U`, `O`, `N` and `,`: change forward and lateral speed together.
- `KEY_LEFT` (314) and `KEY_RIGHT` (316): change the yaw rate.

Each press changes the speed by 0.05. Any other key stops the base. A key
acts once until a different key, or no key, is read. In those cases
`handle_key` returns `None`. `LastMove` is an enumeration of manoeuvres, and
`Teleop` keeps a `last_move` field of that type.

## Not included

The package has no command-line program. It does not connect to a simulator,
a robot, a keyboard or sensors. Your own loop has to read the sensors, call the
controllers and pass motor objects to `MecanumBase`. Diagnostic output goes
through the standard `logging` module.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from smorphi.base import wheel_speeds
from smorphi.wall_follow import SensorWallFollower

print(wheel_speeds(0.1, 0.0, 0.0))  # four equal wheel speeds

follower = SensorWallFollower()
command = follower.step([0.5, 0.8, 0.08, 0.9])  # forward, backward, right, left
print(command.vx, command.vy, command.vtheta)
```
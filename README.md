# swiftpro_arm

Tools for driving a uArm Swift Pro desktop robot arm over its serial port.

The package has three modules:

- `swiftpro_arm.kinematics`: forward and inverse kinematics of the arm,
  the nine joint angles of the arm model used for display, and conversion
  from the joint positions a motion planner gives to the three motor angles.
- `swiftpro_arm.commands`: builders for the G-code lines the arm
  understands, and a `Controller` that sends them over an open serial
  connection and keeps the arm's last commanded state as a `SwiftproState`.
- `swiftpro_arm.report`: parsing of the position reports the arm sends
  back once reporting has been switched on.

Install with `pip install .`; the tests need the `test` extra
(`pip install .[test]`) and run with `pytest`.

## Kinematics

Angles are in degrees and positions in millimetres.

```python
from swiftpro_arm.kinematics import (
    KinematicsError,
    forward_kinematics,
    inverse_kinematics,
    passive_joint_angles,
    joint_state,
)

position = forward_kinematics((90.0, 90.0, 0.0))   # (x, y, z)

try:
    motors = inverse_kinematics(position)
except KinematicsError:
    print("position is out of reach")
else:
    joints = passive_joint_angles(motors)           # nine angles in degrees
    named = joint_state(joints)                     # {"Joint1": radians, ...}
```

- `inverse_kinematics` raises `KinematicsError` (a `ValueError`) when the
  position cannot be reached. X values below 0.1 are treated as 0.1.
- `motor_angles_from_joints` turns the first three planner joint positions
  (radians) into the three motor angles in degrees; it needs at least three.
- `joint_state` takes exactly nine joint angles in degrees and maps the
  names `Joint1` to `Joint9` (`JOINT_NAMES`) to positions in radians.
- Functions that take three angles or coordinates raise `ValueError` for
  any other count.

## Commands

The command builders only produce text, so they can be used without an arm:

```python
from swiftpro_arm.commands import move_command, wrist_command, pump_command

move_command(200.0, 0.0, 100.0)   # "G0 X200.00 Y0.00 Z100.00 F10000\r\n"
wrist_command(45.0)               # "G2202 N3 V45.00\r\n"
pump_command(1)                   # "M2231 V1\r\n"
```

`attach_command`, `gripper_command` and `pump_command` take a status of
`1` (attach / close / on) or `0` (detach / open / off); any other value is
rejected with `ValueError`.

To drive a real arm, open its port and hand it to a `Controller`:

```python
from swiftpro_arm.commands import Controller, open_port

connection = open_port("/dev/ttyACM0", 115200, 1.0)
controller = Controller(connection)
controller.start()                 # stop reports and attach the motors
controller.move(200.0, 0.0, 100.0)
controller.rotate_wrist(45.0)
controller.set_gripper(1)
controller.set_pump(0)
controller.set_attached(0)
print(controller.state)
```

`open_port` defaults to `DEFAULT_PORT` (`/dev/ttyACM0`), `DEFAULT_BAUDRATE`
(115200) and `DEFAULT_TIMEOUT` (1 second). `start` waits 3.5 seconds for
the arm to come up before writing. Each controller method sends one
G-code line, discards whatever the arm has written back so far, records
the commanded value in `controller.state` and returns the line it sent.
A rejected status raises `ValueError` and leaves the state unchanged.

Any object with `write(bytes)`, `read(size)` and an `in_waiting` count
can stand in for the serial port.

## Position reports

```python
from swiftpro_arm.report import ReportParser, parse_report_line, start_reporting

start_reporting(connection)        # detach and report every 0.05 s
parser = ReportParser()
for position in parser.feed(connection.read(connection.in_waiting)):
    print(position.x, position.y, position.z, position.angle)

parse_report_line("@3 X154.52 Y0.00 Z34.34 R90.00")
# Position(x=154.52, y=0.0, z=34.34, angle=90.0)
```

`ReportParser.feed` accepts text or bytes, may be given partial lines,
and returns the `Position` of every line completed by the data;
`parser.position` holds the latest one. `parse_report_line` raises
`ValueError` for a line with fewer than five fields, and the parser
skips such lines. `start_reporting` waits 3 seconds before detaching the
motors and another half second before switching reports on.

## What it does not do

The package has no command-line program and runs no loop of its own: it
does not poll the serial port, publish positions or joint states to other
programs, or draw the arm. Reading from the port and deciding what to do
with the results is left to the caller.
"""G-code commands for the Swift Pro arm and a controller that sends them."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace
from typing import Protocol

import serial

__all__ = [
    "SwiftproState",
    "Controller",
    "move_command",
    "wrist_command",
    "attach_command",
    "gripper_command",
    "pump_command",
    "open_port",
    "DEFAULT_PORT",
    "DEFAULT_BAUDRATE",
    "DEFAULT_TIMEOUT",
]

DEFAULT_PORT = "/dev/ttyACM0"
DEFAULT_BAUDRATE = 115200
DEFAULT_TIMEOUT = 1.0

STOP_REPORTING = "M2120 V0\r\n"

_ATTACH_CODES = {1: "M17", 0: "M2019"}

_log = logging.getLogger(__name__)


class Connection(Protocol):
    """The part of a serial port the controller needs."""

    in_waiting: int

    def write(self, data: bytes) -> int | None: ...

    def read(self, size: int) -> bytes: ...


@dataclass
class SwiftproState:
    """Last commanded state of the arm."""

    pump: int = 0
    gripper: int = 0
    swiftpro_status: int = 0
    motor_angle1: float = 0.0
    motor_angle2: float = 0.0
    motor_angle3: float = 0.0
    motor_angle4: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


def move_command(x: float, y: float, z: float) -> str:
    """Return the command that moves the end effector to (x, y, z) millimetres."""
    return f"G0 X{x:.2f} Y{y:.2f} Z{z:.2f} F10000\r\n"


def wrist_command(angle: float) -> str:
    """Return the command that turns the fourth motor to an angle in degrees."""
    return f"G2202 N3 V{angle:.2f}\r\n"


def _check_status(status: int, what: str) -> int:
    if status not in (0, 1):
        raise ValueError(f"wrong {what} status: {status!r}")
    return int(status)


def attach_command(status: int) -> str:
    """Return the command that attaches (1) or detaches (0) the motors."""
    code = _ATTACH_CODES[_check_status(status, "swiftpro")]
    return f"{code}\r\n"


def gripper_command(status: int) -> str:
    """Return the command that closes (1) or opens (0) the gripper."""
    return f"M2232 V{_check_status(status, 'gripper')}\r\n"


def pump_command(status: int) -> str:
    """Return the command that switches the pump on (1) or off (0)."""
    return f"M2231 V{_check_status(status, 'pump')}\r\n"


def open_port(
    port: str = DEFAULT_PORT,
    baudrate: int = DEFAULT_BAUDRATE,
    timeout: float = DEFAULT_TIMEOUT,
) -> serial.Serial:
    """Open the serial port the arm is connected to."""
    connection = serial.Serial(port=port, baudrate=baudrate, timeout=timeout)
    _log.info("Port has been open successfully")
    return connection


class Controller:
    """Sends commands to the arm and keeps track of what was commanded."""

    def __init__(self, connection: Connection) -> None:
        self.connection = connection
        self.state = SwiftproState()

    def start(self) -> None:
        """Stop position reports and attach the motors."""
        time.sleep(3.5)
        self.connection.write(STOP_REPORTING.encode("ascii"))
        time.sleep(0.1)
        self.connection.write(attach_command(1).encode("ascii"))
        time.sleep(0.1)
        _log.info("Attach and wait for commands")

    def _send(self, gcode: str) -> str:
        _log.info("%s", gcode)
        self.connection.write(gcode.encode("ascii"))
        self.connection.read(self.connection.in_waiting)
        return gcode

    def move(self, x: float, y: float, z: float) -> str:
        """Move the end effector to (x, y, z) millimetres."""
        self.state = replace(self.state, x=float(x), y=float(y), z=float(z))
        return self._send(move_command(x, y, z))

    def rotate_wrist(self, angle: float) -> str:
        """Turn the fourth motor to an angle in degrees."""
        self.state = replace(self.state, motor_angle4=float(angle))
        return self._send(wrist_command(angle))

    def set_attached(self, status: int) -> str:
        """Attach (1) or detach (0) the motors."""
        gcode = attach_command(status)
        self.state = replace(self.state, swiftpro_status=int(status))
        return self._send(gcode)

    def set_gripper(self, status: int) -> str:
        """Close (1) or open (0) the gripper."""
        gcode = gripper_command(status)
        self.state = replace(self.state, gripper=int(status))
        return self._send(gcode)

    def set_pump(self, status: int) -> str:
        """Switch the pump on (1) or off (0)."""
        gcode = pump_command(status)
        self.state = replace(self.state, pump=int(status))
        return self._send(gcode)
from unittest import mock

import pytest

from swiftpro_arm.commands import (
    Controller,
    SwiftproState,
    attach_command,
    gripper_command,
    move_command,
    pump_command,
    wrist_command,
)


class FakeConnection:
    def __init__(self, pending=b""):
        self.written = []
        self.pending = pending
        self.reads = []

    @property
    def in_waiting(self):
        return len(self.pending)

    def write(self, data):
        self.written.append(data)
        return len(data)

    def read(self, size):
        self.reads.append(size)
        data, self.pending = self.pending[:size], self.pending[size:]
        return data


def test_move_command_format():
    assert move_command(1.5, -2.25, 30) == "G0 X1.50 Y-2.25 Z30.00 F10000\r\n"


def test_move_command_rounds_to_two_places():
    command = move_command(1.0 / 3.0, 0, 0)
    assert command.startswith("G0 X0.33 ")
    assert command.endswith(" F10000\r\n")


def test_wrist_command_format():
    assert wrist_command(90) == "G2202 N3 V90.00\r\n"


@pytest.mark.parametrize(
    "function, on, off",
    [
        (attach_command, "M17\r\n", "M2019\r\n"),
        (gripper_command, "M2232 V1\r\n", "M2232 V0\r\n"),
        (pump_command, "M2231 V1\r\n", "M2231 V0\r\n"),
    ],
)
def test_status_commands(function, on, off):
    assert function(1) == on
    assert function(0) == off


@pytest.mark.parametrize("function", [attach_command, gripper_command, pump_command])
@pytest.mark.parametrize("status", [2, -1, 255])
def test_status_commands_reject_other_values(function, status):
    with pytest.raises(ValueError):
        function(status)


def test_controller_move_writes_and_updates_state():
    connection = FakeConnection(pending=b"ok\n")
    controller = Controller(connection)
    gcode = controller.move(10, 20, 30)
    assert connection.written == [move_command(10, 20, 30).encode("ascii")]
    assert gcode == move_command(10, 20, 30)
    assert (controller.state.x, controller.state.y, controller.state.z) == (10, 20, 30)
    assert connection.reads == [3]
    assert connection.pending == b""


def test_controller_rotate_wrist_updates_angle():
    connection = FakeConnection()
    controller = Controller(connection)
    controller.rotate_wrist(45)
    assert controller.state.motor_angle4 == 45
    assert connection.written == [b"G2202 N3 V45.00\r\n"]


def test_controller_status_setters():
    connection = FakeConnection()
    controller = Controller(connection)
    controller.set_attached(0)
    controller.set_gripper(1)
    controller.set_pump(1)
    assert connection.written == [b"M2019\r\n", b"M2232 V1\r\n", b"M2231 V1\r\n"]
    assert controller.state == SwiftproState(swiftpro_status=0, gripper=1, pump=1)


def test_controller_rejects_bad_status_without_writing():
    connection = FakeConnection()
    controller = Controller(connection)
    controller.set_pump(1)
    with pytest.raises(ValueError):
        controller.set_pump(3)
    assert controller.state.pump == 1
    assert connection.written == [b"M2231 V1\r\n"]


def test_controller_start_sequence():
    connection = FakeConnection()
    controller = Controller(connection)
    with mock.patch("time.sleep") as sleep:
        controller.start()
    assert connection.written == [b"M2120 V0\r\n", b"M17\r\n"]
    assert [call.args[0] for call in sleep.call_args_list] == [3.5, 0.1, 0.1]


def test_initial_state_is_zero():
    controller = Controller(FakeConnection())
    assert controller.state == SwiftproState()
    assert controller.state.x == 0.0
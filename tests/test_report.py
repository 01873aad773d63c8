from unittest import mock

import pytest

from swiftpro_arm.report import (
    Position,
    ReportParser,
    parse_report_line,
    start_reporting,
)


class FakeConnection:
    def __init__(self):
        self.written = []

    def write(self, data):
        self.written.append(data)
        return len(data)


def test_parse_report_line():
    position = parse_report_line("@3 X154.52 Y0.00 Z34.34 R90.00")
    assert position == Position(154.52, 0.0, 34.34, 90.0)


def test_parse_report_line_collapses_spaces_and_ignores_extra_fields():
    position = parse_report_line("@3  X1.5   Y-2 Z3 R4 S9")
    assert position == Position(1.5, -2.0, 3.0, 4.0)


def test_parse_report_line_unparsable_value_is_zero():
    position = parse_report_line("@3 Xabc Y1 Z2 R3")
    assert position.x == 0.0
    assert position.y == 1.0


def test_parse_report_line_number_prefix():
    assert parse_report_line("@3 X12.5mm Y1 Z2 R3").x == 12.5


@pytest.mark.parametrize("line", ["", "@3", "@3 X1 Y2 Z3", "ok"])
def test_parse_report_line_too_short(line):
    with pytest.raises(ValueError):
        parse_report_line(line)


def test_parser_handles_complete_line():
    parser = ReportParser()
    positions = parser.feed("@3 X154.52 Y0.00 Z34.34 R90.00\r\n")
    assert positions == [Position(154.52, 0.0, 34.34, 90.0)]
    assert parser.position == positions[0]


def test_parser_joins_split_chunks_and_bytes():
    parser = ReportParser()
    assert parser.feed(b"@3 X1 Y2") == []
    assert parser.feed(b" Z3 R4\r") == []
    assert parser.feed(b"\n@3 X5 Y6 Z7 R8\n") == [
        Position(1.0, 2.0, 3.0, 4.0),
        Position(5.0, 6.0, 7.0, 8.0),
    ]
    assert parser.position == Position(5.0, 6.0, 7.0, 8.0)


def test_parser_keeps_last_position_on_bad_line():
    parser = ReportParser()
    parser.feed("@3 X1 Y2 Z3 R4\n")
    assert parser.feed("ok\n") == []
    assert parser.position == Position(1.0, 2.0, 3.0, 4.0)


def test_parser_starts_at_origin():
    assert ReportParser().position == Position(0.0, 0.0, 0.0, 0.0)


def test_start_reporting_sequence():
    connection = FakeConnection()
    with mock.patch("time.sleep") as sleep:
        start_reporting(connection)
    assert connection.written == [b"M2019\r\n", b"M2120 V0.05\r\n"]
    assert [call.args[0] for call in sleep.call_args_list] == [3.0, 0.5]
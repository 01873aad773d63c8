"""Parsing of the position reports the Swift Pro sends over its serial line."""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from typing import Protocol

__all__ = [
    "Position",
    "ReportParser",
    "parse_report_line",
    "start_reporting",
]

DETACH = "M2019\r\n"
REPORT_EVERY_50_MS = "M2120 V0.05\r\n"

_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_FIELDS = 5

_log = logging.getLogger(__name__)


class Writable(Protocol):
    def write(self, data: bytes) -> int | None: ...


@dataclass(frozen=True)
class Position:
    """Cartesian position in millimetres and wrist angle in degrees."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    angle: float = 0.0


def _leading_number(text: str) -> float:
    match = _NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


def parse_report_line(line: str) -> Position:
    """Parse a report such as '@3 X154.52 Y0.00 Z34.34 R90.00'.

    Each field's first character is a label; the rest is its value.
    Raises ValueError when the line has fewer than five fields.
    """
    tokens = [token for token in line.split(" ") if token][:_FIELDS]
    if len(tokens) < _FIELDS:
        raise ValueError(f"report line has {len(tokens)} fields, expected {_FIELDS}")
    _, x, y, z, angle = (_leading_number(token[1:]) for token in tokens)
    return Position(x, y, z, angle)


class ReportParser:
    """Collects characters from the serial line and parses complete reports."""

    def __init__(self) -> None:
        self._buffer: list[str] = []
        self.position = Position()

    def feed(self, data: str | bytes) -> list[Position]:
        """Consume received data and return the positions of completed lines."""
        if isinstance(data, bytes):
            data = data.decode("ascii", errors="replace")
        positions = []
        for char in data:
            if char == "\r":
                continue
            if char != "\n":
                self._buffer.append(char)
                continue
            line = "".join(self._buffer)
            self._buffer.clear()
            try:
                self.position = parse_report_line(line)
            except ValueError:
                _log.debug("ignoring report line %r", line)
                continue
            positions.append(self.position)
        return positions


def start_reporting(connection: Writable) -> None:
    """Detach the motors and ask the arm to report its position every 0.05 s."""
    time.sleep(3.0)
    connection.write(DETACH.encode("ascii"))
    time.sleep(0.5)
    connection.write(REPORT_EVERY_50_MS.encode("ascii"))
    _log.info("Start to report data")
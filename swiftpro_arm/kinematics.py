"""Forward and inverse kinematics of the Swift Pro arm.

Angles are in degrees unless stated otherwise; cartesian coordinates are in
millimetres.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

DEGREES_PER_RADIAN = 57.2958
BASE_HEIGHT = 106.6
BASE_OFFSET = 13.2
LOWER_ARM = 142.07
UPPER_ARM = 158.81
UPPER_LOWER_RATIO = UPPER_ARM / LOWER_ARM

END_EFFECTOR_OFFSET = 56.55
HEIGHT_OFFSET = 74.55

LOWER_ARM_MAX_ANGLE = 135.6
LOWER_ARM_MIN_ANGLE = 0.0
UPPER_ARM_MAX_ANGLE = 100.7
UPPER_ARM_MIN_ANGLE = 0.0
LOWER_UPPER_MAX_ANGLE = 151.0
LOWER_UPPER_MIN_ANGLE = 10.0

JOINT_NAMES = tuple(f"Joint{number}" for number in range(1, 10))

__all__ = [
    "KinematicsError",
    "forward_kinematics",
    "inverse_kinematics",
    "passive_joint_angles",
    "motor_angles_from_joints",
    "joint_state",
    "JOINT_NAMES",
]


class KinematicsError(ValueError):
    """Raised when a position cannot be reached by the arm."""


def _triple(values: Sequence[float], what: str) -> tuple[float, float, float]:
    if len(values) != 3:
        raise ValueError(f"expected 3 {what}, got {len(values)}")
    first, second, third = (float(value) for value in values)
    return first, second, third


def forward_kinematics(angles: Sequence[float]) -> tuple[float, float, float]:
    """Return the (x, y, z) position reached by three motor angles."""
    base, lower, upper = _triple(angles, "motor angles")
    stretch = (
        LOWER_ARM * math.cos(lower / DEGREES_PER_RADIAN)
        + UPPER_ARM * math.cos(upper / DEGREES_PER_RADIAN)
        + BASE_OFFSET
        + END_EFFECTOR_OFFSET
    )
    height = (
        LOWER_ARM * math.sin(lower / DEGREES_PER_RADIAN)
        - UPPER_ARM * math.sin(upper / DEGREES_PER_RADIAN)
        + BASE_HEIGHT
    )
    x = stretch * math.sin(base / DEGREES_PER_RADIAN)
    y = -stretch * math.cos(base / DEGREES_PER_RADIAN)
    return x, y, height - HEIGHT_OFFSET


def _acos_degrees(value: float) -> float:
    if math.isnan(value) or not -1.0 <= value <= 1.0:
        raise KinematicsError("position is out of reach")
    return math.acos(value) * DEGREES_PER_RADIAN


def inverse_kinematics(position: Sequence[float]) -> tuple[float, float, float]:
    """Return the three motor angles that reach (x, y, z).

    Raises KinematicsError when no solution exists.
    """
    x, y, z = _triple(position, "coordinates")
    z += HEIGHT_OFFSET
    z_in = (z - BASE_HEIGHT) / LOWER_ARM
    x = max(x, 0.1)

    if y == 0:
        rotation = 90.0
    elif y < 0:
        rotation = -math.atan(x / y) * DEGREES_PER_RADIAN
    else:
        rotation = 180 - math.atan(x / y) * DEGREES_PER_RADIAN

    sine = math.sin(rotation / DEGREES_PER_RADIAN)
    if sine == 0:
        raise KinematicsError("position is out of reach")
    x_in = (x / sine - BASE_OFFSET - END_EFFECTOR_OFFSET) / LOWER_ARM

    if x_in == 0:
        if z_in == 0:
            raise KinematicsError("position is out of reach")
        phi = math.copysign(math.pi / 2, z_in) * DEGREES_PER_RADIAN
    else:
        phi = math.atan(z_in / x_in) * DEGREES_PER_RADIAN

    distance = math.hypot(z_in, x_in)
    if distance == 0:
        raise KinematicsError("position is out of reach")

    right = _acos_degrees(
        (distance**2 + UPPER_LOWER_RATIO**2 - 1) / (2 * UPPER_LOWER_RATIO * distance)
    )
    left = _acos_degrees((distance**2 + 1 - UPPER_LOWER_RATIO**2) / (2 * distance))
    left += phi
    right -= phi

    if any(math.isnan(angle) for angle in (rotation, left, right)):
        raise KinematicsError("position is out of reach")
    return rotation, left, right


def passive_joint_angles(angles: Sequence[float]) -> tuple[float, ...]:
    """Return all nine joint angles of the arm model from three motor angles."""
    base, alpha2, upper = _triple(angles, "motor angles")
    alpha3 = upper - 3.8
    joint2 = 90 - alpha2
    return (
        base - 90,
        joint2,
        (alpha2 + alpha3) - 176.11 + 90,
        -90 + alpha2,
        joint2,
        alpha3,
        90 - (alpha2 + alpha3),
        176.11 - 180 - alpha3,
        48.39 + alpha3 - 44.55,
    )


def motor_angles_from_joints(positions: Sequence[float]) -> tuple[float, float, float]:
    """Return motor angles (degrees) from the first three joint positions (radians)."""
    if len(positions) < 3:
        raise ValueError(f"expected at least 3 joint positions, got {len(positions)}")
    first, second, third = (float(value) for value in positions[:3])
    return (
        first * DEGREES_PER_RADIAN + 90,
        90 - second * DEGREES_PER_RADIAN,
        (second + third) * DEGREES_PER_RADIAN,
    )


def joint_state(joint_angles: Sequence[float]) -> dict[str, float]:
    """Map the nine joint names to their positions in radians."""
    if len(joint_angles) != len(JOINT_NAMES):
        raise ValueError(
            f"expected {len(JOINT_NAMES)} joint angles, got {len(joint_angles)}"
        )
    return {
        name: float(angle) / DEGREES_PER_RADIAN
        for name, angle in zip(JOINT_NAMES, joint_angles)
    }
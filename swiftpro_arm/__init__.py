"""Kinematics, G-code commands and position reports for the uArm Swift Pro."""

__version__ = "0.1.0"
__all__ = ["commands", "kinematics", "report"]
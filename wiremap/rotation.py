"""Rotation and projection matrices for turning map points in space."""

from __future__ import annotations

import math
from typing import Tuple

Matrix = Tuple[Tuple[float, float, float], ...]


def x_rotation_matrix(rotation: float) -> Matrix:
    """Return the 3x3 matrix rotating by ``rotation`` radians about the x axis."""
    cos, sin = math.cos(rotation), math.sin(rotation)
    return (
        (1.0, 0.0, 0.0),
        (0.0, cos, -sin),
        (0.0, sin, cos),
    )


def y_rotation_matrix(rotation: float) -> Matrix:
    """Return the 3x3 matrix rotating by ``rotation`` radians about the y axis."""
    cos, sin = math.cos(rotation), math.sin(rotation)
    return (
        (cos, 0.0, sin),
        (0.0, 1.0, 0.0),
        (-sin, 0.0, cos),
    )


def z_rotation_matrix(rotation: float) -> Matrix:
    """Return the 3x3 matrix rotating by ``rotation`` radians about the z axis."""
    cos, sin = math.cos(rotation), math.sin(rotation)
    return (
        (cos, -sin, 0.0),
        (sin, cos, 0.0),
        (0.0, 0.0, 1.0),
    )


def projection_matrix() -> Matrix:
    """Return the 3x3 matrix taking (x, y, z) to (x, z, 0)."""
    return (
        (1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0),
        (0.0, 0.0, 0.0),
    )
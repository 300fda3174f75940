"""Angle and coordinate helpers shared by the sector and label builders."""

from __future__ import annotations

import math
from typing import Tuple

TAU = 2.0 * math.pi

Direction = Tuple[float, float]
PixelPoint = Tuple[float, float]
Coord = Tuple[int, int]


def normalize_angle(angle: float) -> float:
    """Map ``angle`` (radians) into the half-open range ``[0, 2π)``."""

    if math.isnan(angle) or math.isinf(angle):
        raise ValueError("angle must be a finite number")
    normalized = angle % TAU
    # tiny negative inputs round up to TAU itself
    if normalized >= TAU:
        return 0.0
    return normalized


def unit_direction(angle: float) -> Direction:
    return math.cos(angle), math.sin(angle)


def rotate_perpendicular(v: Direction) -> Direction:
    """Rotate ``v`` by +90 degrees."""

    return -v[1], v[0]


def to_pixel(direction: Direction, circle_center: Coord, circle_radius: int) -> PixelPoint:
    """Project a unit-circle point onto the pixel grid (y grows downward)."""

    relative_x = direction[0] * circle_radius
    relative_y = -direction[1] * circle_radius
    return relative_x + circle_center[0], relative_y + circle_center[1]


__all__ = [
    "TAU",
    "Direction",
    "PixelPoint",
    "Coord",
    "normalize_angle",
    "unit_direction",
    "rotate_perpendicular",
    "to_pixel",
]

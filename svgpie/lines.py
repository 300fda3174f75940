"""Intersection algebra for infinite 2-D lines.

A line is either ``y = slope * x + intercept`` (:class:`NormalLine`) or a
vertical line ``x = constant`` (:class:`ConstantXLine`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .errors import ParallelVectorsDoNotCross


@dataclass(frozen=True)
class NormalLine:
    slope: float
    intercept: float


@dataclass(frozen=True)
class ConstantXLine:
    x: float


Line = Union[NormalLine, ConstantXLine]


def make_line(direction_x: float, direction_y: float, point_x: float, point_y: float) -> Line:
    """Return the line through ``(point_x, point_y)`` running along the direction vector."""

    if direction_x == 0.0:
        return ConstantXLine(point_x)
    slope = direction_y / direction_x
    intercept = point_y - point_x * slope
    return NormalLine(slope, intercept)


def intersect(lhs: Line, rhs: Line) -> Tuple[float, float]:
    """Return the crossing point of ``lhs`` and ``rhs``.

    Raises :class:`ParallelVectorsDoNotCross` when the lines never meet (or
    coincide).  When neither line is horizontal or vertical, ``y`` is taken
    from ``lhs``.
    """

    if isinstance(lhs, ConstantXLine) and isinstance(rhs, ConstantXLine):
        raise ParallelVectorsDoNotCross()
    if isinstance(lhs, NormalLine) and isinstance(rhs, NormalLine):
        return _intersect_normals(lhs, rhs)
    if isinstance(lhs, NormalLine) and isinstance(rhs, ConstantXLine):
        return _intersect_normal_and_constant_x(lhs, rhs)
    if isinstance(lhs, ConstantXLine) and isinstance(rhs, NormalLine):
        return _intersect_normal_and_constant_x(rhs, lhs)
    raise TypeError(f"unsupported line types: {type(lhs).__name__}, {type(rhs).__name__}")


def _intersect_normals(lhs: NormalLine, rhs: NormalLine) -> Tuple[float, float]:
    if lhs.slope - rhs.slope == 0.0:
        raise ParallelVectorsDoNotCross()
    if lhs.slope == 0.0 or rhs.slope == 0.0:
        if lhs.slope == 0.0:
            y, other = lhs.intercept, rhs
        else:
            y, other = rhs.intercept, lhs
        x = (y - other.intercept) / other.slope
        return x, y
    x = (rhs.intercept - lhs.intercept) / (lhs.slope - rhs.slope)
    y = lhs.slope * x + lhs.intercept
    return x, y


def _intersect_normal_and_constant_x(line: NormalLine, vertical: ConstantXLine) -> Tuple[float, float]:
    x = vertical.x
    return x, line.slope * x + line.intercept


__all__ = ["NormalLine", "ConstantXLine", "Line", "make_line", "intersect"]

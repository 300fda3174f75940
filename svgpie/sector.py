"""Clip polygons for pie slices.

A slice is drawn as a full circle clipped by a straight-edged polygon.  The
polygon starts at the circle center, runs out to the slice's start point,
then closes around the slice along tangent lines that stay outside the
circle, and comes back through the end point.  Only the circle's own
boundary ends up visible, so no arc primitives are needed.
"""

from __future__ import annotations

import enum
import logging
import math
import sys
from dataclasses import dataclass
from typing import Tuple

from .angles import (
    TAU,
    Coord,
    Direction,
    PixelPoint,
    normalize_angle,
    rotate_perpendicular,
    to_pixel,
    unit_direction,
)
from .lines import ConstantXLine, Line, intersect, make_line
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


class SectorCase(enum.Enum):
    DEGENERATE = "degenerate"
    MINOR = "minor"
    MAJOR = "major"
    FULL_CIRCLE = "full_circle"


@dataclass(frozen=True)
class SectorPath:
    """Closed clip polygon of a slice, in pixel coordinates.

    ``points`` is empty for :attr:`SectorCase.DEGENERATE` (draw nothing) and
    :attr:`SectorCase.FULL_CIRCLE` (draw the circle unclipped).
    """

    case: SectorCase
    points: Tuple[PixelPoint, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.case is SectorCase.DEGENERATE

    @property
    def is_full_circle(self) -> bool:
        return self.case is SectorCase.FULL_CIRCLE


def classify_span(span: float) -> SectorCase:
    """Pick the construction for a slice from its signed, un-normalized span."""

    if math.isnan(span):
        raise ValueError("span must not be NaN")
    magnitude = abs(span)
    if span == 0.0 or magnitude < sys.float_info.epsilon:
        return SectorCase.DEGENERATE
    if magnitude >= TAU:
        return SectorCase.FULL_CIRCLE
    if magnitude > math.pi:
        return SectorCase.MAJOR
    return SectorCase.MINOR


def build_sector_path(
    circle_center: Coord,
    circle_radius: int,
    start_angle: float,
    end_angle: float,
    center_angle: float,
    span: float,
) -> SectorPath:
    """Return the clip polygon for the slice between ``start_angle`` and ``end_angle``.

    ``center_angle`` is the bisector of the slice and ``span`` its signed width.
    Raises :class:`~svgpie.errors.ParallelVectorsDoNotCross` when a tangent
    construction degenerates.
    """

    case = classify_span(span)
    if case in (SectorCase.DEGENERATE, SectorCase.FULL_CIRCLE):
        return SectorPath(case)

    start = unit_direction(normalize_angle(start_angle))
    end = unit_direction(normalize_angle(end_angle))
    bisector = unit_direction(normalize_angle(center_angle))

    if case is SectorCase.MAJOR:
        vertices = _major_sector_vertices(start, end, bisector)
    else:
        vertices = _minor_sector_vertices(start, end, bisector)

    origin = (float(circle_center[0]), float(circle_center[1]))
    points = [origin]
    points.extend(to_pixel(vertex, circle_center, circle_radius) for vertex in vertices)
    points.append(origin)
    return SectorPath(case, tuple(points))


def _tangent_crossing(tangent_direction: Direction, anchor: Direction, through: Direction) -> Direction:
    """Cross the tangent at ``anchor`` with the line through ``through`` parallel to ``anchor``."""

    tangent = make_line(tangent_direction[0], tangent_direction[1], anchor[0], anchor[1])
    ray = make_line(anchor[0], anchor[1], through[0], through[1])
    # y is read off the flatter of the two lines
    if _steepness(ray) < _steepness(tangent):
        return intersect(ray, tangent)
    return intersect(tangent, ray)


def _steepness(line: Line) -> float:
    if isinstance(line, ConstantXLine):
        return math.inf
    return abs(line.slope)


def _minor_sector_vertices(start: Direction, end: Direction, bisector: Direction) -> Tuple[Direction, ...]:
    tangent_direction = rotate_perpendicular(bisector)
    start_crossing = _tangent_crossing(tangent_direction, bisector, start)
    end_crossing = _tangent_crossing(tangent_direction, bisector, end)
    return start, start_crossing, end_crossing, end


def _major_sector_vertices(start: Direction, end: Direction, bisector: Direction) -> Tuple[Direction, ...]:
    # anchor on the empty side of the circle
    target = (-bisector[0], -bisector[1])
    tangent_direction = rotate_perpendicular(target)
    # the cap must begin on the start side or the outline folds over itself
    if _dot(start, tangent_direction) < _dot(end, tangent_direction):
        tangent_direction = (-tangent_direction[0], -tangent_direction[1])

    start_crossing = _tangent_crossing(tangent_direction, target, start)
    end_crossing = _tangent_crossing(tangent_direction, target, end)

    start_side = (target[0] + tangent_direction[0], target[1] + tangent_direction[1])
    end_side = (target[0] - tangent_direction[0], target[1] - tangent_direction[1])
    width = (bisector[0] * 2.0, bisector[1] * 2.0)
    start_far = (start_side[0] + width[0], start_side[1] + width[1])
    end_far = (end_side[0] + width[0], end_side[1] + width[1])

    return start, start_crossing, start_side, start_far, end_far, end_side, end_crossing, end


def _dot(a: Direction, b: Direction) -> float:
    return a[0] * b[0] + a[1] * b[1]


__all__ = ["SectorCase", "SectorPath", "classify_span", "build_sector_path"]

apply_debug_logging(globals(), logger=logger)

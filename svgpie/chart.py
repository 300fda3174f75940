"""Pie chart assembly: turns ratios into per-slice sector paths and labels."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from .angles import TAU, Coord, normalize_angle
from .ast import Program
from .config import ChartOptions, get_default_chart_options
from .label import LabelPlacement, place_label
from .logging_utils import apply_debug_logging
from .sector import SectorPath, build_sector_path
from .svg_codegen import generate_svg_document
from .validate import validate_options, validate_slices

logger = logging.getLogger(__name__)

# slices start at 12 o'clock
BASE_ANGLE = math.pi / 2


@dataclass(frozen=True)
class PieSlice:
    label: str
    ratio: float
    color: str


SliceLike = Union[PieSlice, Tuple[str, float, str]]


@dataclass
class SlicePlan:
    index: int
    label: str
    color: str
    span: float
    start_angle: float
    end_angle: float
    center_angle: float
    clip_id: str
    path: SectorPath
    label_placement: LabelPlacement


@dataclass
class ChartPlan:
    width: int
    height: int
    circle_center: Coord
    circle_radius: int
    slices: List[SlicePlan] = field(default_factory=list)


def clip_path_id(index: int) -> str:
    return f"p_{index}"


def _coerce_slices(slices: Iterable[SliceLike]) -> List[PieSlice]:
    coerced: List[PieSlice] = []
    for item in slices:
        if isinstance(item, PieSlice):
            coerced.append(item)
        else:
            label, ratio, color = item
            coerced.append(PieSlice(str(label), ratio, str(color)))
    return coerced


def plan_pie_chart(slices: Iterable[SliceLike], options: Optional[ChartOptions] = None) -> ChartPlan:
    """Compute the geometry of every slice, walking clockwise from the top.

    Any :class:`~svgpie.errors.ParallelVectorsDoNotCross` aborts the whole
    chart; a chart with a missing slice would misrepresent the data.
    """

    options = options or get_default_chart_options()
    items = _coerce_slices(slices)
    validate_options(options)
    validate_slices(items)

    center = options.circle_center
    plan = ChartPlan(options.width, options.height, center, options.circle_radius)
    spans = TAU * np.asarray([item.ratio for item in items], dtype=float)

    base_angle = BASE_ANGLE
    for idx, (item, span) in enumerate(zip(items, spans)):
        span = float(span)
        start_angle = base_angle
        end_angle = base_angle - span
        center_angle = base_angle - span * 0.5

        path = build_sector_path(
            center,
            options.circle_radius,
            start_angle,
            end_angle,
            center_angle,
            span,
        )
        placement = place_label(
            center,
            options.label_position_radius,
            center_angle,
            item.label,
            options.label_color,
            options.label_font,
            options.label_size,
        )
        plan.slices.append(
            SlicePlan(
                index=idx,
                label=item.label,
                color=item.color,
                span=span,
                start_angle=start_angle,
                end_angle=end_angle,
                center_angle=center_angle,
                clip_id=clip_path_id(idx),
                path=path,
                label_placement=placement,
            )
        )
        logger.debug("Slice %d (%s): span=%.6f case=%s", idx, item.label, span, path.case.value)

        base_angle = normalize_angle(base_angle - span)

    return plan


def create_pie_chart(slices: Iterable[SliceLike], options: Optional[ChartOptions] = None) -> str:
    """Return a standalone SVG document drawing ``slices`` as a pie chart."""

    return generate_svg_document(plan_pie_chart(slices, options))


def chart_from_program(
    program: Program, defaults: Optional[ChartOptions] = None
) -> Tuple[List[PieSlice], ChartOptions]:
    """Collect the slices of a parsed chart script and apply its option overrides."""

    options = defaults or get_default_chart_options()
    for stmt in program.of_kind('chart'):
        overrides = {}
        if 'width' in stmt.opts:
            overrides['width'] = stmt.opts['width']
        if 'height' in stmt.opts:
            overrides['height'] = stmt.opts['height']
        if 'radius' in stmt.opts:
            overrides['circle_radius'] = stmt.opts['radius']
        options = replace(options, **overrides)
    for stmt in program.of_kind('labels'):
        overrides = {}
        if 'color' in stmt.opts:
            overrides['label_color'] = tuple(stmt.opts['color'])
        if 'font' in stmt.opts:
            overrides['label_font'] = stmt.opts['font']
        if 'size' in stmt.opts:
            overrides['label_size'] = stmt.opts['size']
        if 'radius' in stmt.opts:
            overrides['label_position_radius'] = stmt.opts['radius']
        options = replace(options, **overrides)

    slices = [
        PieSlice(stmt.data['label'], stmt.data['ratio'], stmt.data['color'])
        for stmt in program.of_kind('slice')
    ]
    return slices, options


__all__ = [
    "BASE_ANGLE",
    "PieSlice",
    "SlicePlan",
    "ChartPlan",
    "clip_path_id",
    "plan_pie_chart",
    "create_pie_chart",
    "chart_from_program",
]

apply_debug_logging(globals(), logger=logger)

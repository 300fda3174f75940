"""SVG renderer for planned pie charts."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Iterable, List, Tuple

import svgwrite

from ..label import LabelPlacement
from ..sector import SectorCase
from .utils import clean_text, format_float

if TYPE_CHECKING:  # pragma: no cover
    from ..chart import ChartPlan, SlicePlan


def format_path_data(points: Iterable[Tuple[float, float]]) -> str:
    """Return ``d`` attribute data drawing a closed polyline through ``points``."""

    commands: List[str] = []
    for idx, (x, y) in enumerate(points):
        op = "M" if idx == 0 else "L"
        commands.append(f"{op}{format_float(x)},{format_float(y)}")
    if not commands:
        return ""
    commands.append("z")
    return " ".join(commands)


def build_drawing(plan: "ChartPlan") -> svgwrite.Drawing:
    """Assemble the drawing: clip paths in ``<defs>``, then a group of pies and a group of labels."""

    dwg = svgwrite.Drawing(size=(plan.width, plan.height), profile="full", debug=False)
    dwg.attribs["viewBox"] = f"0, 0, {plan.width}, {plan.height}"

    pies = dwg.add(dwg.g())
    for item in plan.slices:
        pies.add(_slice_group(dwg, plan, item))

    labels = dwg.add(dwg.g())
    for item in plan.slices:
        labels.add(_label_group(dwg, item.label_placement))
    return dwg


def generate_svg_code(plan: "ChartPlan") -> str:
    """Render the ``<svg>`` element alone."""

    return build_drawing(plan).tostring()


def generate_svg_document(plan: "ChartPlan") -> str:
    """Render a standalone SVG file (XML declaration included)."""

    buffer = io.StringIO()
    build_drawing(plan).write(buffer)
    return buffer.getvalue()


def _slice_group(dwg: svgwrite.Drawing, plan: "ChartPlan", item: "SlicePlan"):
    group = dwg.g()
    case = item.path.case
    if case is SectorCase.DEGENERATE:
        return group

    circle = dwg.circle(center=plan.circle_center, r=plan.circle_radius, fill=item.color)
    if case is not SectorCase.FULL_CIRCLE:
        clip = dwg.defs.add(dwg.clipPath(id=item.clip_id))
        clip.add(dwg.path(d=format_path_data(item.path.points)))
        circle["clip-path"] = f"url(#{item.clip_id})"
    group.add(circle)
    return group


def _label_group(dwg: svgwrite.Drawing, label: LabelPlacement):
    text = clean_text(label.text)
    common = dict(
        x=[format_float(label.x)],
        y=[format_float(label.y)],
        font_family=label.font,
        font_size=label.size,
        text_anchor="middle",
    )
    group = dwg.g()
    # outline first so the body paints over it
    group.add(dwg.text(text, stroke=label.outline, stroke_width=label.outline_width, **common))
    group.add(dwg.text(text, fill=label.fill, **common))
    return group

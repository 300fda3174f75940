import math

import pytest

from svgpie import (
    ChartOptions,
    PieSlice,
    SectorCase,
    ValidationError,
    create_pie_chart,
    parse_program,
    plan_pie_chart,
)
from svgpie import sector
from svgpie.angles import TAU, normalize_angle
from svgpie.chart import BASE_ANGLE, chart_from_program
from svgpie.errors import ParallelVectorsDoNotCross

CASE = [
    ("Red", 0.5, "#fe5555"),
    ("Green", 0.10, "#55fe55"),
    ("Blue", 0.25, "#3366fe"),
    ("Other", 0.15, "#999"),
]


def _contains(ring, point):
    x, y = point
    inside = False
    n = len(ring)
    for i in range(n):
        x1, y1 = ring[i]
        x2, y2 = ring[(i + 1) % n]
        if (y1 > y) != (y2 > y):
            if x < x1 + (y - y1) * (x2 - x1) / (y2 - y1):
                inside = not inside
    return inside


def test_four_slice_chart_spans_tile_the_circle():
    plan = plan_pie_chart(CASE, ChartOptions())

    spans = [item.span for item in plan.slices]
    expected = [math.pi, 0.2 * math.pi, 0.5 * math.pi, 0.3 * math.pi]
    assert spans == pytest.approx(expected)
    assert sum(spans) == pytest.approx(TAU)

    # a span of exactly pi stays on the minor side
    assert [item.path.case for item in plan.slices] == [SectorCase.MINOR] * 4


def test_slices_run_clockwise_from_top():
    plan = plan_pie_chart(CASE, ChartOptions())

    assert plan.slices[0].start_angle == BASE_ANGLE
    for prev, nxt in zip(plan.slices, plan.slices[1:]):
        assert normalize_angle(nxt.start_angle) == pytest.approx(normalize_angle(prev.end_angle))
        assert nxt.start_angle == pytest.approx(normalize_angle(prev.start_angle - prev.span))
    assert normalize_angle(plan.slices[-1].end_angle) == pytest.approx(BASE_ANGLE)


def test_slices_do_not_overlap():
    plan = plan_pie_chart(CASE, ChartOptions())
    cx, cy = plan.circle_center
    rings = [list(item.path.points[:-1]) for item in plan.slices]

    for idx, item in enumerate(plan.slices):
        probe = (
            cx + 20 * math.cos(item.center_angle),
            cy - 20 * math.sin(item.center_angle),
        )
        hits = [_contains(ring, probe) for ring in rings]
        assert hits == [other == idx for other in range(len(rings))]


def test_clip_ids_are_unique_per_slice():
    plan = plan_pie_chart(CASE)
    assert [item.clip_id for item in plan.slices] == ["p_0", "p_1", "p_2", "p_3"]


def test_circle_center_is_canvas_center():
    plan = plan_pie_chart(CASE, ChartOptions(width=201, height=100, circle_radius=30))
    assert plan.circle_center == (100, 50)
    assert plan.circle_radius == 30


def test_single_full_slice_is_full_circle():
    plan = plan_pie_chart([("All", 1.0, "#123456")])
    assert plan.slices[0].path.case is SectorCase.FULL_CIRCLE

    document = create_pie_chart([("All", 1.0, "#123456")])
    assert "clipPath" not in document
    assert 'fill="#123456"' in document


def test_large_slice_selects_major_case():
    plan = plan_pie_chart([("Most", 0.75, "#f00"), ("Rest", 0.25, "#0f0")])
    assert [item.path.case for item in plan.slices] == [SectorCase.MAJOR, SectorCase.MINOR]


def test_zero_ratio_slice_is_empty_but_labelled():
    plan = plan_pie_chart([("Nothing", 0.0, "#000"), ("All", 1.0, "#fff")])
    assert plan.slices[0].path.is_empty
    assert plan.slices[0].label_placement.text == "Nothing"


def test_accepts_pie_slice_objects():
    plan = plan_pie_chart([PieSlice("Half", 0.5, "red"), PieSlice("Half", 0.5, "blue")])
    assert [item.color for item in plan.slices] == ["red", "blue"]


def test_parallel_failure_aborts_the_chart(monkeypatch):
    def _parallel(lhs, rhs):
        raise ParallelVectorsDoNotCross()

    monkeypatch.setattr(sector, "intersect", _parallel)

    with pytest.raises(ParallelVectorsDoNotCross):
        plan_pie_chart(CASE)


@pytest.mark.parametrize("ratio", [-0.1, 1.5, math.nan, math.inf])
def test_invalid_ratio_is_rejected(ratio):
    with pytest.raises(ValidationError):
        plan_pie_chart([("Bad", ratio, "#000")])


def test_invalid_options_are_rejected():
    with pytest.raises(ValidationError, match="circle_radius"):
        plan_pie_chart(CASE, ChartOptions(circle_radius=-1))


def test_chart_from_program_applies_overrides():
    program = parse_program(
        """
chart width=200 height=120 radius=50
labels color=255,255,255 font="Noto Sans" size=12 radius=30
slice "Red" 50% #fe5555
slice Blue 0.5 blue
"""
    )

    slices, options = chart_from_program(program)

    assert slices == [PieSlice("Red", 0.5, "#fe5555"), PieSlice("Blue", 0.5, "blue")]
    assert options == ChartOptions(
        width=200,
        height=120,
        circle_radius=50,
        label_color=(255, 255, 255),
        label_font="Noto Sans",
        label_size=12,
        label_position_radius=30,
    )


def test_chart_from_program_keeps_defaults():
    slices, options = chart_from_program(parse_program('slice "Only" 1 #000'))
    assert options == ChartOptions()
    assert slices[0].ratio == 1.0


def test_slice_centred_on_nine_o_clock_is_fully_covered():
    plan = plan_pie_chart([("A", 0.7, "#f00"), ("B", 0.1, "#0f0"), ("C", 0.2, "#00f")])
    item = plan.slices[1]
    ring = list(item.path.points[:-1])
    cx, cy = plan.circle_center

    assert normalize_angle(item.center_angle) == pytest.approx(math.pi)
    for theta in (0.91 * math.pi, 0.93 * math.pi, math.pi, 1.07 * math.pi, 1.09 * math.pi):
        for fraction in (0.5, 0.9, 0.99):
            point = (
                cx + plan.circle_radius * fraction * math.cos(theta),
                cy - plan.circle_radius * fraction * math.sin(theta),
            )
            assert _contains(ring, point), (theta, fraction)

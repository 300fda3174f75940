import math
import sys

import pytest

from svgpie.angles import TAU, normalize_angle, rotate_perpendicular, to_pixel, unit_direction

EPS = sys.float_info.epsilon


def test_normalize_angle_values():
    assert normalize_angle(-math.pi / 4) == TAU - math.pi / 4
    assert normalize_angle(TAU + math.pi / 4) == pytest.approx(math.pi / 4)
    assert normalize_angle(math.pi / 4) == math.pi / 4
    assert normalize_angle(TAU) == 0.0
    assert normalize_angle(math.pi / 2 + TAU * 0.5 + TAU * 0.25) == 0.0


@pytest.mark.parametrize(
    "angle",
    [0.0, -0.0, 1.0, -1.0, 7.5, -7.5, 100.0, -1234.5678, TAU, -TAU, 3 * TAU, -1e-20, 1e-20],
)
def test_normalize_angle_is_idempotent_and_in_range(angle):
    once = normalize_angle(angle)
    assert 0.0 <= once < TAU
    assert normalize_angle(once) == once


@pytest.mark.parametrize("angle", [math.nan, math.inf, -math.inf])
def test_normalize_angle_rejects_non_finite(angle):
    with pytest.raises(ValueError, match="finite"):
        normalize_angle(angle)


def test_unit_direction_values():
    assert unit_direction(0.0) == (1.0, 0.0)

    x, y = unit_direction(math.pi / 2)
    assert abs(x) < EPS
    assert y == 1.0

    x, y = unit_direction(math.pi)
    assert x == -1.0
    assert abs(y) < EPS

    x, y = unit_direction(math.pi * 1.5)
    assert abs(x) < EPS
    assert y == -1.0


def test_rotate_perpendicular():
    assert rotate_perpendicular((1.0, 0.0)) == (-0.0, 1.0)
    assert rotate_perpendicular((0.0, 1.0)) == (-1.0, 0.0)


@pytest.mark.parametrize(
    "direction, expected",
    [
        ((0.0, 1.0), (3.0, 2.0)),
        ((-1.0, 0.0), (1.0, 4.0)),
        ((0.0, -1.0), (3.0, 6.0)),
        ((1.0, 0.0), (5.0, 4.0)),
    ],
)
def test_to_pixel_inverts_y(direction, expected):
    assert to_pixel(direction, (3, 4), 2) == expected

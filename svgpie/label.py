"""Placement of slice labels along the slice bisector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .angles import Coord, normalize_angle, to_pixel, unit_direction

RGB = Tuple[int, int, int]

OUTLINE_WIDTH = 2
_DARK_OUTLINE = "#000"
_LIGHT_OUTLINE = "#fff"


@dataclass(frozen=True)
class LabelPlacement:
    text: str
    x: float
    y: float
    font: str
    size: int
    fill: str
    outline: str
    outline_width: int = OUTLINE_WIDTH


def rgb_string(color: RGB) -> str:
    return f"rgb({color[0]}, {color[1]}, {color[2]})"


def outline_color(color: RGB) -> str:
    """Return the outline that keeps ``color`` readable over any slice.

    The sum of the channels is compared against half of a single channel's
    range, so only near-black text gets a white outline.
    """

    total = int(color[0]) + int(color[1]) + int(color[2])
    return _DARK_OUTLINE if total > 255 // 2 else _LIGHT_OUTLINE


def place_label(
    circle_center: Coord,
    position_radius: int,
    center_angle: float,
    text: str,
    color: RGB,
    font: str,
    size: int,
) -> LabelPlacement:
    direction = unit_direction(normalize_angle(center_angle))
    x, y = to_pixel(direction, circle_center, position_radius)
    return LabelPlacement(
        text=text,
        x=x,
        y=y,
        font=font,
        size=size,
        fill=rgb_string(color),
        outline=outline_color(color),
    )


__all__ = ["RGB", "LabelPlacement", "OUTLINE_WIDTH", "rgb_string", "outline_color", "place_label"]

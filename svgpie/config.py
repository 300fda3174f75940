"""Chart layout options and their process-wide defaults."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Tuple


@dataclass
class ChartOptions:
    """Canvas and label settings; all sizes are in pixels."""

    width: int = 100
    height: int = 100
    circle_radius: int = 40
    label_color: Tuple[int, int, int] = (0, 0, 0)
    label_font: str = "sans-serif"
    label_size: int = 10
    label_position_radius: int = 20

    @property
    def circle_center(self) -> Tuple[int, int]:
        return self.width // 2, self.height // 2


_DEFAULT_CHART_OPTIONS = ChartOptions()


def get_default_chart_options() -> ChartOptions:
    return copy.deepcopy(_DEFAULT_CHART_OPTIONS)


def set_default_chart_options(options: ChartOptions) -> None:
    global _DEFAULT_CHART_OPTIONS
    _DEFAULT_CHART_OPTIONS = copy.deepcopy(options)

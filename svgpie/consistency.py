from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

import numpy as np

if TYPE_CHECKING:  # pragma: no cover
    from .chart import PieSlice

RATIO_SUM_TOLERANCE = 1e-9


@dataclass
class ConsistencyWarning:
    kind: str
    message: str
    index: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return self.message


def check_consistency(slices: Sequence['PieSlice']) -> List[ConsistencyWarning]:
    """Report inputs that render, but probably not as intended."""

    warnings: List[ConsistencyWarning] = []
    if not slices:
        warnings.append(ConsistencyWarning('no_slices', 'chart has no slices; the drawing will be empty'))
        return warnings

    ratios = np.asarray([item.ratio for item in slices], dtype=float)
    for idx in np.flatnonzero(ratios == 0.0):
        label = slices[int(idx)].label
        warnings.append(
            ConsistencyWarning(
                'empty_slice',
                f'slice {int(idx)} ({label!r}) has ratio 0 and draws only its label',
                int(idx),
            )
        )

    total = float(ratios.sum())
    if np.isclose(total, 1.0, rtol=0.0, atol=RATIO_SUM_TOLERANCE):
        return warnings
    if total < 1.0:
        warnings.append(
            ConsistencyWarning(
                'ratio_sum_short',
                f'ratios sum to {total:.6g}; {1.0 - total:.6g} of the circle stays empty',
            )
        )
    else:
        warnings.append(
            ConsistencyWarning(
                'ratio_sum_over',
                f'ratios sum to {total:.6g}; slices past the first full turn overlap earlier ones',
            )
        )
    return warnings

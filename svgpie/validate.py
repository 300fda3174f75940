import math
import numbers
from typing import TYPE_CHECKING, Sequence

from .ast import Program, Span
from .config import ChartOptions

if TYPE_CHECKING:  # pragma: no cover
    from .chart import PieSlice


class ValidationError(Exception):
    pass


def _where(sp: Span) -> str:
    return f'[line {sp.line}, col {sp.col}] '


def _check_ratio(ratio: object, prefix: str) -> None:
    if isinstance(ratio, bool) or not isinstance(ratio, numbers.Real):
        raise ValidationError(f'{prefix}ratio must be a real number, got {ratio!r}')
    value = float(ratio)
    if math.isnan(value) or math.isinf(value):
        raise ValidationError(f'{prefix}ratio must be finite')
    if not 0.0 <= value <= 1.0:
        raise ValidationError(f'{prefix}ratio must be in [0, 1] (got {value:g})')


def _check_color(color: object, prefix: str) -> None:
    if not isinstance(color, str) or not color.strip():
        raise ValidationError(f'{prefix}color must be a non-empty string')


def _check_size(name: str, value: object, prefix: str = '') -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f'{prefix}{name} must be an integer, got {value!r}')
    if value < 0:
        raise ValidationError(f'{prefix}{name} cannot be negative')


def _check_rgb(color: object, prefix: str = '') -> None:
    if not isinstance(color, (tuple, list)) or len(color) != 3:
        raise ValidationError(f'{prefix}label color must be an (r, g, b) triple')
    for channel in color:
        if isinstance(channel, bool) or not isinstance(channel, numbers.Integral) or not 0 <= channel <= 255:
            raise ValidationError(f'{prefix}label color channels must be integers in 0..255')


def validate_slices(slices: Sequence['PieSlice']) -> None:
    for idx, item in enumerate(slices):
        prefix = f'slice {idx} ({item.label!r}): '
        _check_ratio(item.ratio, prefix)
        _check_color(item.color, prefix)


def validate_options(options: ChartOptions) -> None:
    for name in ('width', 'height', 'circle_radius', 'label_size', 'label_position_radius'):
        _check_size(name, getattr(options, name))
    _check_rgb(options.label_color)
    if not isinstance(options.label_font, str) or not options.label_font.strip():
        raise ValidationError('label font must be a non-empty string')


def validate(prog: Program) -> None:
    seen = set()
    for s in prog.stmts:
        if s.kind in ('chart', 'labels'):
            if s.kind in seen:
                raise ValidationError(f'{_where(s.span)}duplicate {s.kind} statement')
            seen.add(s.kind)
            for key, val in s.opts.items():
                if key == 'color':
                    _check_rgb(val, _where(s.span))
                elif key == 'font':
                    if not val.strip():
                        raise ValidationError(f'{_where(s.span)}label font must be a non-empty string')
                else:
                    _check_size(key, val, _where(s.span))
        elif s.kind == 'slice':
            _check_ratio(s.data['ratio'], _where(s.span))
            _check_color(s.data['color'], _where(s.span))

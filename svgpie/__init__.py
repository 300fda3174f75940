from .angles import TAU, normalize_angle, rotate_perpendicular, to_pixel, unit_direction
from .ast import Program, Span, Stmt
from .chart import (
    BASE_ANGLE,
    ChartPlan,
    PieSlice,
    SlicePlan,
    chart_from_program,
    create_pie_chart,
    plan_pie_chart,
)
from .config import ChartOptions, get_default_chart_options, set_default_chart_options
from .consistency import ConsistencyWarning, check_consistency
from .errors import ParallelVectorsDoNotCross, PieChartError
from .label import LabelPlacement, place_label
from .lines import ConstantXLine, Line, NormalLine, intersect, make_line
from .parser import parse_program
from .sector import SectorCase, SectorPath, build_sector_path, classify_span
from .svg_codegen import build_drawing, format_path_data, generate_svg_code, generate_svg_document
from .validate import ValidationError, validate, validate_options, validate_slices

__all__ = [
    'TAU',
    'normalize_angle',
    'rotate_perpendicular',
    'to_pixel',
    'unit_direction',
    'Program',
    'Span',
    'Stmt',
    'BASE_ANGLE',
    'ChartPlan',
    'PieSlice',
    'SlicePlan',
    'chart_from_program',
    'create_pie_chart',
    'plan_pie_chart',
    'ChartOptions',
    'get_default_chart_options',
    'set_default_chart_options',
    'ConsistencyWarning',
    'check_consistency',
    'ParallelVectorsDoNotCross',
    'PieChartError',
    'LabelPlacement',
    'place_label',
    'ConstantXLine',
    'Line',
    'NormalLine',
    'intersect',
    'make_line',
    'parse_program',
    'SectorCase',
    'SectorPath',
    'build_sector_path',
    'classify_span',
    'format_path_data',
    'build_drawing',
    'generate_svg_code',
    'generate_svg_document',
    'ValidationError',
    'validate',
    'validate_options',
    'validate_slices',
]

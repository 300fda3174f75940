"""Pie chart → SVG code generation helpers."""

from .generator import (
    build_drawing,
    format_path_data,
    generate_svg_code,
    generate_svg_document,
)
from .utils import clean_text, format_float

__all__ = [
    "build_drawing",
    "format_path_data",
    "generate_svg_code",
    "generate_svg_document",
    "clean_text",
    "format_float",
]

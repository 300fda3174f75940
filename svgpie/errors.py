"""Exceptions raised while building pie charts."""

from __future__ import annotations


class PieChartError(Exception):
    """Base class for pie chart failures."""


class ParallelVectorsDoNotCross(PieChartError):
    """Raised when two construction lines that must cross are parallel."""

    def __init__(self, message: str = "parallel vectors do not cross") -> None:
        super().__init__(message)


__all__ = ["PieChartError", "ParallelVectorsDoNotCross"]

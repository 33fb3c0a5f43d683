"""Infrastructure layer - output formatters."""

from .formatters import (
    CutPlanFormatter,
    JsonExporter,
    count_cut_lengths,
    describe_cuts,
    format_length,
)

__all__ = [
    "CutPlanFormatter",
    "JsonExporter",
    "count_cut_lengths",
    "describe_cuts",
    "format_length",
]

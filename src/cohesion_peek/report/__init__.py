"""Report layer: per-metric reports, the index, the matrix and the score."""

from .documents import MetricSheet, format_value, load_sheets, parse_value, read_metric_sheet
from .index import Index
from .matrix import Matrix
from .renderer import STATIC_TEMPLATES, TEMPLATE_FILES, Renderer, Templates
from .report import Report
from .scorer import Scorer

__all__ = [
    "Report",
    "Index",
    "Matrix",
    "Scorer",
    "Renderer",
    "Templates",
    "TEMPLATE_FILES",
    "STATIC_TEMPLATES",
    "MetricSheet",
    "format_value",
    "parse_value",
    "load_sheets",
    "read_metric_sheet",
]

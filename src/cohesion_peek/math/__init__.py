"""Mathematical utilities for cohesion analysis."""

from .graph import GraphMetrics
from .incidence import Incidence
from .statistics import Statistics

__all__ = [
    "GraphMetrics",
    "Incidence",
    "Statistics",
]

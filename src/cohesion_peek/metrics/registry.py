"""Metric registry: the fixed, ordered set of metrics run on every analysis.

Adding a metric means writing a ``Metric`` subclass under ``plugins/`` and
appending it to ``METRICS``. Its ``name`` becomes the report file stem and
the index section key, so it must be unique.
"""

from typing import List, Optional, Sequence, Type

from ..exceptions import InvalidConfigError
from ..scanning import Base
from .base import Metric
from .plugins import CAMC, LCOM, LCOM2, LCOM3, NHD, OCC

METRICS: List[Type[Metric]] = [
    CAMC,
    LCOM,
    OCC,
    NHD,
    LCOM2,
    LCOM3,
]


def get_metric_types() -> List[Type[Metric]]:
    """Return the registered metric classes, in report order."""
    return list(METRICS)


def get_metric_type(name: str) -> Type[Metric]:
    """Look up a metric class by name."""
    for metric in METRICS:
        if metric.name == name:
            return metric
    raise KeyError(f"Unknown metric: {name!r}")


def validate_metric_types(metric_types: Sequence[Type[Metric]]) -> None:
    """Reject an empty metric list or colliding metric names."""
    if not metric_types:
        raise InvalidConfigError("metrics", "[]", "at least one metric is required")
    seen: set = set()
    for metric in metric_types:
        if metric.name in seen:
            raise InvalidConfigError("metrics", metric.name, "duplicate metric name")
        seen.add(metric.name)


def build_metrics(
    base: Base, metric_types: Optional[Sequence[Type[Metric]]] = None
) -> List[Metric]:
    """Instantiate every metric against one Base snapshot."""
    types = list(METRICS if metric_types is None else metric_types)
    validate_metric_types(types)
    return [metric(base) for metric in types]

"""Cohesion metrics: the contract, the results and the fixed registry."""

from .base import Metric
from .models import ClassScore, MetricResult
from .registry import (
    METRICS,
    build_metrics,
    get_metric_type,
    get_metric_types,
    validate_metric_types,
)

__all__ = [
    "Metric",
    "ClassScore",
    "MetricResult",
    "METRICS",
    "build_metrics",
    "get_metric_type",
    "get_metric_types",
    "validate_metric_types",
]

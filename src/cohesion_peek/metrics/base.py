"""Base class for cohesion metric plugins."""

import math
from abc import ABC, abstractmethod
from typing import Dict, Tuple

from ..scanning import Base, ClassSkeleton
from .models import ClassScore, MetricResult


class Metric(ABC):
    """A cohesion metric over every class of a Base.

    ``reverse`` marks metrics where lower values mean better cohesion.
    ``colors`` holds the (low, high) thresholds separating red, yellow and
    green classes.
    """

    name: str
    title: str
    description: str
    reverse: bool = False
    colors: Tuple[float, float] = (0.3, 0.7)

    def __init__(self, base: Base):
        self.base = base

    def compute(self) -> MetricResult:
        """Score every class of the Base, in Base order."""
        scores = []
        for target in self.base.targets():
            value, variables = self.measure(target)
            scores.append(
                ClassScore(name=target.name, value=float(value), path=target.path, variables=variables)
            )
        return MetricResult(metric=self.name, scores=tuple(scores))

    @abstractmethod
    def measure(self, skeleton: ClassSkeleton) -> Tuple[float, Dict[str, float]]:
        """Return ``(value, variables)`` for one class; NaN when undefined."""
        ...

    @classmethod
    def color(cls, value: float) -> str:
        """Classify a value as green, yellow or red (gray when undefined)."""
        if math.isnan(value):
            return "gray"
        low, high = cls.colors
        if cls.reverse:
            if value <= low:
                return "green"
            if value <= high:
                return "yellow"
            return "red"
        if value >= high:
            return "green"
        if value >= low:
            return "yellow"
        return "red"

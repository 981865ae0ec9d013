"""Metric results: one score per analyzable class."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClassScore:
    """Score of one class under one metric.

    ``value`` is NaN when the metric is undefined for the class (for example
    a class without methods). ``variables`` carries the sub-measurements the
    value was derived from, for diagnostics.
    """

    name: str
    value: float
    path: str = ""
    variables: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class MetricResult:
    """Output of one metric applied to the whole Base."""

    metric: str
    scores: tuple[ClassScore, ...]

    def names(self) -> list[str]:
        return [score.name for score in self.scores]

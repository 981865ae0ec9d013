"""Descriptive statistics over metric values that may contain NaN."""

import math
from typing import Iterable, List

import numpy as np


class Statistics:
    """Statistical helpers for score aggregation."""

    @staticmethod
    def defined(values: Iterable[float]) -> List[float]:
        """Drop NaN entries (classes a metric cannot measure)."""
        return [v for v in values if not math.isnan(v)]

    @staticmethod
    def mean(values: List[float]) -> float:
        """Arithmetic mean; raises ValueError on an empty list."""
        if not values:
            raise ValueError("mean of an empty sequence is undefined")
        return float(np.mean(np.asarray(values, dtype=np.float64)))

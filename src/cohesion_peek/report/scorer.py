"""Scorer: the single project score, the mean of every metric's score."""

from __future__ import annotations

import copy
import math
import xml.etree.ElementTree as ET

from ..exceptions import AggregationError
from ..math import Statistics
from .documents import format_value


class Scorer:
    """Extracts ``metric/score`` values from an index and averages them."""

    @staticmethod
    def score(index: ET.Element) -> float:
        metrics = index.findall("metric")
        if not metrics:
            raise AggregationError("no metric scores to average; the metric set is empty")
        values = []
        for metric in metrics:
            nodes = metric.findall("score")
            if len(nodes) != 1:
                raise AggregationError(
                    f"metric {metric.get('name')} has {len(nodes)} score nodes, expected 1"
                )
            text = (nodes[0].text or "").strip()
            try:
                value = float(text)
            except ValueError:
                raise AggregationError(f"score {text!r} of metric {metric.get('name')} is not a number")
            if not math.isfinite(value):
                raise AggregationError(f"score of metric {metric.get('name')} is {text}")
            values.append(value)
        return Statistics.mean(values)

    @staticmethod
    def stamp(index: ET.Element, score: float) -> ET.Element:
        """Copy of ``index`` with the aggregate set as its ``score`` attribute."""
        stamped = copy.deepcopy(index)
        stamped.set("score", format_value(score))
        return stamped

"""LCOM3: Henderson-Sellers lack of cohesion, normalized by method count."""

from typing import Dict, Tuple

from ...math import Incidence
from ...scanning import ClassSkeleton
from ..base import Metric


class LCOM3(Metric):
    """LCOM3 = (m - sum(mu(A)) / a) / (m - 1). Ranges over [0, 2]."""

    name = "LCOM3"
    title = "Lack of Cohesion in Methods 3"
    description = "Henderson-Sellers cohesion lack; above 1 signals dead attributes"
    reverse = True
    colors = (0.5, 1.0)

    def measure(self, skeleton: ClassSkeleton) -> Tuple[float, Dict[str, float]]:
        matrix, attributes = Incidence.attributes(skeleton)
        m, a = matrix.shape
        touches = int(matrix.sum())
        variables = {"methods": m, "attributes": a, "touches": touches}
        if m < 2 or a == 0:
            return float("nan"), variables
        return (m - touches / a) / (m - 1), variables

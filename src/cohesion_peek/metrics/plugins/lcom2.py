"""LCOM2: Henderson-Sellers lack of cohesion."""

from typing import Dict, Tuple

from ...math import Incidence
from ...scanning import ClassSkeleton
from ..base import Metric


class LCOM2(Metric):
    """LCOM2 = 1 - sum(mu(A)) / (m * a)."""

    name = "LCOM2"
    title = "Lack of Cohesion in Methods 2"
    description = "Share of method/attribute pairs that are not connected"
    reverse = True
    colors = (0.3, 0.7)

    def measure(self, skeleton: ClassSkeleton) -> Tuple[float, Dict[str, float]]:
        matrix, attributes = Incidence.attributes(skeleton)
        m, a = matrix.shape
        touches = int(matrix.sum())
        variables = {"methods": m, "attributes": a, "touches": touches}
        if m == 0 or a == 0:
            return float("nan"), variables
        return 1.0 - touches / (m * a), variables

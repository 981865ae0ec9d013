"""LCOM: Chidamber-Kemerer lack of cohesion in methods, pair-normalized."""

from typing import Dict, Tuple

from ...math import Incidence
from ...scanning import ClassSkeleton
from ..base import Metric


class LCOM(Metric):
    """
    LCOM = max(P - Q, 0) / (P + Q), where P is the number of method pairs
    sharing no attribute and Q the number of pairs sharing at least one.

    Dividing by the pair count keeps the value in [0, 1] so it averages
    with the other metrics.
    """

    name = "LCOM"
    title = "Lack of Cohesion in Methods"
    description = "Excess of method pairs with disjoint attributes, per pair"
    reverse = True
    colors = (0.3, 0.7)

    def measure(self, skeleton: ClassSkeleton) -> Tuple[float, Dict[str, float]]:
        matrix, attributes = Incidence.attributes(skeleton)
        m = matrix.shape[0]
        sharing, disjoint = Incidence.shared_pairs(matrix)
        variables = {
            "methods": m,
            "attributes": len(attributes),
            "sharing": sharing,
            "disjoint": disjoint,
        }
        if m == 0:
            return float("nan"), variables
        if m == 1:
            return 0.0, variables
        return max(disjoint - sharing, 0) / (sharing + disjoint), variables

"""OCC: Opened Chain of Cohesion."""

from typing import Dict, List, Tuple

import numpy as np

from ...math import GraphMetrics, Incidence
from ...scanning import ClassSkeleton
from ..base import Metric


class OCC(Metric):
    """
    Methods are connected when they share an attribute or one calls the
    other. OCC is the largest share of other methods reachable from any
    single method: max_i reach(i) / (m - 1).
    """

    name = "OCC"
    title = "Opened Chain of Cohesion"
    description = "Widest reach of one method through shared attributes and calls"
    reverse = False
    colors = (0.4, 0.7)

    def measure(self, skeleton: ClassSkeleton) -> Tuple[float, Dict[str, float]]:
        matrix, _ = Incidence.attributes(skeleton)
        m = len(skeleton.methods)
        variables: Dict[str, float] = {"methods": m}
        if m < 2:
            return float("nan"), variables

        as_int = matrix.astype(np.int64)
        overlap = (as_int @ as_int.T) > 0
        # Nodes are method positions, so same-named methods stay distinct.
        edges = [(i, j) for i in range(m) for j in range(i + 1, m) if overlap[i, j]]
        positions: Dict[str, List[int]] = {}
        for i, method in enumerate(skeleton.methods):
            positions.setdefault(method.name, []).append(i)
        edges.extend(
            (i, j)
            for i, method in enumerate(skeleton.methods)
            for callee in method.calls
            for j in positions.get(callee, ())
        )
        graph = GraphMetrics.undirected(range(m), edges)
        reach = max(GraphMetrics.reachable_count(graph, i) for i in range(m))
        variables["reach"] = reach
        return reach / (m - 1), variables

"""CAMC: Cohesion Among Methods in Class (parameter-type based)."""

from typing import Dict, Tuple

from ...math import Incidence
from ...scanning import ClassSkeleton
from ..base import Metric


class CAMC(Metric):
    """
    Ratio of filled cells in the method x parameter-type matrix:

        CAMC = sum_i |P_i| / (k * l)

    where k is the number of methods, P_i the distinct parameter types of
    method i and l the number of distinct types across the class.
    """

    name = "CAMC"
    title = "Cohesion Among Methods in Class"
    description = "Overlap of annotated parameter types across methods"
    reverse = False
    colors = (0.3, 0.6)

    def measure(self, skeleton: ClassSkeleton) -> Tuple[float, Dict[str, float]]:
        matrix, _ = Incidence.parameter_types(skeleton)
        k, n_types = matrix.shape
        filled = int(matrix.sum())
        variables = {"methods": k, "types": n_types, "filled": filled}
        if k == 0 or n_types == 0:
            return float("nan"), variables
        return filled / (k * n_types), variables

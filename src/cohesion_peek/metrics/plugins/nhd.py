"""NHD: Normalized Hamming Distance over parameter types."""

from typing import Dict, Tuple

from ...math import Incidence
from ...scanning import ClassSkeleton
from ..base import Metric


class NHD(Metric):
    """
    NHD = 1 - 2 / (l * k * (k - 1)) * sum_j c_j * (k - c_j)

    where c_j is the number of methods taking a parameter of type j.
    """

    name = "NHD"
    title = "Normalized Hamming Distance"
    description = "Agreement of methods on parameter types"
    reverse = False
    colors = (0.4, 0.7)

    def measure(self, skeleton: ClassSkeleton) -> Tuple[float, Dict[str, float]]:
        matrix, _ = Incidence.parameter_types(skeleton)
        k, n_types = matrix.shape
        variables = {"methods": k, "types": n_types}
        if k < 2 or n_types == 0:
            return float("nan"), variables
        counts = matrix.sum(axis=0)
        disagreement = float((counts * (k - counts)).sum())
        return 1.0 - 2.0 * disagreement / (n_types * k * (k - 1)), variables

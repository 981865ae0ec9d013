"""Incidence matrices over class skeletons: methods x attributes, methods x types."""

from typing import List, Tuple

import numpy as np

from ..scanning.models import ClassSkeleton


class Incidence:
    """Boolean incidence matrices that the cohesion formulas are written against."""

    @staticmethod
    def attributes(skeleton: ClassSkeleton) -> Tuple[np.ndarray, List[str]]:
        """
        Method x attribute matrix: ``M[i, j]`` is True when method i touches
        attribute j.

        Only the class's own attributes are columns; the column order is
        the sorted attribute name list, returned alongside the matrix.
        """
        names = sorted(skeleton.attributes)
        index = {name: j for j, name in enumerate(names)}
        matrix = np.zeros((len(skeleton.methods), len(names)), dtype=bool)
        for i, method in enumerate(skeleton.methods):
            for attr in method.attributes:
                j = index.get(attr)
                if j is not None:
                    matrix[i, j] = True
        return matrix, names

    @staticmethod
    def parameter_types(skeleton: ClassSkeleton) -> Tuple[np.ndarray, List[str]]:
        """
        Method x parameter-type matrix: ``M[i, j]`` is True when method i
        has at least one parameter annotated with type j.
        """
        names = sorted({t for method in skeleton.methods for t in method.params})
        index = {name: j for j, name in enumerate(names)}
        matrix = np.zeros((len(skeleton.methods), len(names)), dtype=bool)
        for i, method in enumerate(skeleton.methods):
            for t in method.params:
                matrix[i, index[t]] = True
        return matrix, names

    @staticmethod
    def shared_pairs(matrix: np.ndarray) -> Tuple[int, int]:
        """
        Count unordered row pairs that share / do not share any column.

        Returns:
            (sharing, disjoint)
        """
        rows = matrix.shape[0]
        if rows < 2:
            return 0, 0
        as_int = matrix.astype(np.int64)
        overlap = (as_int @ as_int.T) > 0
        upper = np.triu_indices(rows, k=1)
        sharing = int(np.count_nonzero(overlap[upper]))
        total = rows * (rows - 1) // 2
        return sharing, total - sharing

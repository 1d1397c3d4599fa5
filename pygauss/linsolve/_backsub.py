"""
Back substitution on the upper-triangular system left by forward elimination.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pygauss.core.exceptions import SingularMatrixError
from pygauss.linsolve._storage import DenseMatrix, DenseVector


def back_substitute(matrix: DenseMatrix, rhs: DenseVector) -> NDArray[np.float64]:
    """
    Solve U·x = c where U is `matrix` (upper triangular in logical order).

    Runs from the last column to the first: x[i] = c[i] / U[i][i], then
    c[k] -= U[k][i] * x[i] for every k < i. Each step depends on the fully
    updated c[i], so the outer loop is sequential; the inner update is a
    single vectorized operation that finishes before step i-1.

    `rhs` is consumed.

    Raises:
        SingularMatrixError: If a diagonal entry is exactly zero (cannot
            happen after a successful forward elimination)
    """
    n = matrix.n
    data = matrix.data
    perm = matrix.perm
    c = rhs.values
    x = np.empty(n, dtype=np.float64)

    for i in range(n - 1, -1, -1):
        diag = data[perm[i], i]
        if diag == 0.0:
            raise SingularMatrixError(
                f"Upper-triangular factor has a zero diagonal at column {i}.",
                matrix_name='U',
                column=i,
                magnitude=0.0,
            )
        x[i] = c[i] / diag
        if i > 0:
            c[:i] -= data[perm[:i], i] * x[i]
    return x

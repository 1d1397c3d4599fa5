"""
Partial-pivot selection.

For pivot column i the selector finds the row r >= i with the largest
|A[r][i]|. Rows below the diagonal are scanned as a parallel max-reduction
seeded with the diagonal candidate. The combine step prefers the larger
magnitude and, on equal magnitude, the lower row index; it is associative
and commutative, so the chosen row does not depend on the worker count.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pygauss.core.compute.parallel import RowPool
from pygauss.core.exceptions import SingularMatrixError
from pygauss.linsolve._storage import DenseMatrix


@dataclass(frozen=True)
class PivotRecord:
    """Candidate pivot: logical row index and |A[row][column]|."""
    row: int
    magnitude: float


def pick_better(a: PivotRecord, b: PivotRecord) -> PivotRecord:
    """Larger magnitude wins; ties go to the lower row index."""
    if a.magnitude > b.magnitude:
        return a
    if b.magnitude > a.magnitude:
        return b
    return a if a.row <= b.row else b


def select_pivot(matrix: DenseMatrix, column: int, pool: RowPool) -> PivotRecord:
    """
    Find the pivot row for `column`.

    Args:
        matrix: Matrix whose columns < `column` are already eliminated
        column: Pivot column i (0 <= i < n)
        pool: Row pool used for the reduction over rows (i, n)

    Returns:
        PivotRecord with row >= column

    Raises:
        SingularMatrixError: If every candidate at or below the diagonal is
            exactly zero
    """
    data = matrix.data
    diagonal = PivotRecord(column, abs(matrix[column, column]))

    def local_best(start: int, stop: int) -> PivotRecord:
        magnitudes = np.abs(data[matrix.rows(start, stop), column])
        # argmax returns the first maximum, i.e. the lowest row in the chunk
        j = int(np.argmax(magnitudes))
        return PivotRecord(start + j, float(magnitudes[j]))

    best = pool.reduce(local_best, pick_better, diagonal, column + 1, matrix.n)

    if best.magnitude == 0.0:
        raise SingularMatrixError(
            f"The matrix is singular: column {column} has no nonzero entry "
            f"at or below the diagonal.",
            matrix_name='A',
            column=column,
            magnitude=best.magnitude,
        )
    return best

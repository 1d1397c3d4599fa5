"""
Forward elimination with partial pivoting.

Columns are processed strictly in increasing order. For each column the
pivot search (a blocking reduce) and the row update (a blocking map) both
finish before the next column starts, because the next pivot search reads
column values written by this column's update.
"""

from __future__ import annotations

from contextlib import nullcontext

from pygauss.core.compute.parallel import RowPool
from pygauss.core.compute.timing import Timer
from pygauss.linsolve._pivot import PivotRecord, select_pivot
from pygauss.linsolve._storage import DenseMatrix, DenseVector


def eliminate_below(
    matrix: DenseMatrix,
    rhs: DenseVector,
    column: int,
    pool: RowPool,
) -> None:
    """
    Zero column `column` in every row below the pivot row.

    For each row k in (i, n), with c = -A[k][i] / A[i][i]:
        A[k][j] += c * A[i][j]   for j > i
        A[k][i]  = 0.0           (assigned, not computed)
        B[k]    += c * B[i]

    Rows are independent for a fixed pivot column; each chunk reads the
    pivot row and writes only its own rows.
    """
    i = column
    data = matrix.data
    b = rhs.values
    pivot_row = matrix.row(i)
    pivot = pivot_row[i]
    pivot_tail = pivot_row[i + 1:]
    pivot_rhs = b[i]

    def update(start: int, stop: int) -> None:
        rows = matrix.rows(start, stop)
        c = -data[rows, i] / pivot
        data[rows, i + 1:] += c[:, None] * pivot_tail
        data[rows, i] = 0.0
        b[start:stop] += c * pivot_rhs

    pool.map(update, i + 1, matrix.n)


def forward_eliminate(
    matrix: DenseMatrix,
    rhs: DenseVector,
    pool: RowPool,
    timer: Timer | None = None,
) -> list[PivotRecord]:
    """
    Reduce `matrix` to upper-triangular form in place, updating `rhs` alongside.

    Args:
        matrix: Working matrix (consumed)
        rhs: Working right-hand side (consumed)
        pool: Row pool for the per-column reduce and map
        timer: Optional timer; accumulates 'pivot_search' and 'row_elimination'

    Returns:
        The pivot chosen for every column, in column order

    Raises:
        SingularMatrixError: At the first column without a nonzero pivot
    """
    def section(name: str):
        return timer.section(name) if timer is not None else nullcontext()

    pivots = []
    for i in range(matrix.n):
        with section('pivot_search'):
            pivot = select_pivot(matrix, i, pool)
        matrix.swap_rows(i, pivot.row)
        rhs.swap(i, pivot.row)
        with section('row_elimination'):
            eliminate_below(matrix, rhs, i, pool)
        pivots.append(pivot)
    return pivots

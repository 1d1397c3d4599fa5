"""
CPU backends for Gaussian elimination with partial pivoting.

CPUGaussBackend: Serial reference; every stage runs on the calling thread.
CPUParallelGaussBackend: Row-parallel pivot search and elimination on a
    thread pool, bulk-synchronous per pivot column.

Both run the same engine and differ only in the RowPool they hand it, so
the chosen pivots are identical and the solutions agree up to
floating-point summation-order noise.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pygauss.core.compute.device import get_cpu_info
from pygauss.core.compute.parallel import RowPool, DEFAULT_GRAIN
from pygauss.core.compute.timing import Timer
from pygauss.core.result import Result
from pygauss.core.validation import check_positive_int
from pygauss.linsolve._backsub import back_substitute
from pygauss.linsolve._common import GaussParams
from pygauss.linsolve._eliminate import forward_eliminate
from pygauss.linsolve._storage import DenseMatrix, DenseVector
from pygauss.linsolve.design import SystemDesign


class CPUGaussBackend:
    """
    Serial CPU backend.

    Implements the Backend protocol for SystemDesign -> GaussParams.

    Args:
        overwrite: Eliminate directly in the design's float64 buffers
            instead of working copies. The design's A and b are consumed.
    """

    def __init__(self, *, overwrite: bool = False):
        self._overwrite = bool(overwrite)

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    @property
    def n_workers(self) -> int:
        return 1

    @property
    def grain(self) -> int:
        return DEFAULT_GRAIN

    def solve(self, design: SystemDesign) -> Result[GaussParams]:
        """
        Solve A·x = b by Gaussian elimination with partial pivoting.

        Algorithm:
            1. For each column: pivot search, row/rhs swap, eliminate below
            2. Back substitution on the upper-triangular result

        Args:
            design: Validated system

        Returns:
            Result containing GaussParams

        Raises:
            SingularMatrixError: If some pivot column has no nonzero candidate
        """
        timer = Timer()
        timer.start()

        copy = not self._overwrite
        matrix = DenseMatrix.from_array(design.A, copy=copy)
        rhs = DenseVector.from_array(design.b, copy=copy)

        consumed = (
            np.shares_memory(matrix.data, design.A)
            or np.shares_memory(rhs.values, design.b)
        )
        if consumed:
            # A singular column aborts with A already partly eliminated
            design.mark_consumed()

        with RowPool(self.n_workers, self.grain) as pool:
            with timer.section('forward_elimination'):
                pivots = forward_eliminate(matrix, rhs, pool, timer)

        with timer.section('back_substitution'):
            x = back_substitute(matrix, rhs)

        timer.stop()

        n_swaps = sum(1 for i, p in enumerate(pivots) if p.row != i)
        params = GaussParams(
            x=x,
            permutation=matrix.permutation,
            pivot_magnitudes=np.array([p.magnitude for p in pivots], dtype=np.float64),
            n_swaps=n_swaps,
        )

        info: dict[str, Any] = {
            'method': 'gauss_partial_pivot',
            'n': design.n,
            'n_workers': self.n_workers,
            'grain': self.grain,
            'overwrite': self._overwrite,
            'consumed': bool(consumed),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            n=design.n,
        )


class CPUParallelGaussBackend(CPUGaussBackend):
    """
    Row-parallel CPU backend.

    Args:
        n_workers: Worker threads; None uses every usable CPU
        grain: Minimum rows per chunk handed to a worker
        overwrite: See CPUGaussBackend
    """

    def __init__(
        self,
        n_workers: int | None = None,
        *,
        grain: int = DEFAULT_GRAIN,
        overwrite: bool = False,
    ):
        super().__init__(overwrite=overwrite)
        if n_workers is None:
            n_workers = get_cpu_info().n_cores
        self._n_workers = check_positive_int(n_workers, 'n_workers')
        self._grain = check_positive_int(grain, 'grain')

    @property
    def name(self) -> str:
        return 'cpu_gauss_parallel'

    @property
    def n_workers(self) -> int:
        return self._n_workers

    @property
    def grain(self) -> int:
        return self._grain

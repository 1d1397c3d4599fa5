"""
Solver dispatch for dense linear systems.

This module provides the solve() and verify() functions (public API) and
backend selection.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pygauss.core.capabilities import CAPABILITY_REPEATABLE
from pygauss.core.compute.device import get_cpu_info
from pygauss.core.compute.parallel import DEFAULT_GRAIN
from pygauss.core.compute.tolerances import RatioBand, DEFAULT_BAND, resolve_band
from pygauss.core.exceptions import ValidationError
from pygauss.core.validation import (
    check_array,
    check_1d,
    check_consistent_length,
    check_positive_int,
)
from pygauss.linsolve._verify import run_verification
from pygauss.linsolve.backends.cpu import CPUGaussBackend, CPUParallelGaussBackend
from pygauss.linsolve.design import SystemDesign
from pygauss.linsolve.solution import GaussSolution, VerificationSolution


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_parallel']

# Below this dimension 'auto' stays serial; thread dispatch per column
# costs more than the row updates it splits
PARALLEL_THRESHOLD = 256


def solve(
    A: ArrayLike | SystemDesign,
    b: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'auto',
    n_workers: int | None = None,
    grain: int = DEFAULT_GRAIN,
    overwrite: bool = False,
) -> GaussSolution:
    """
    Solve the dense linear system A·x = b.

    Gaussian elimination with partial pivoting: for each column the row
    with the largest magnitude at or below the diagonal becomes the pivot,
    all rows below it are eliminated (in parallel for 'cpu_parallel'), and
    back substitution recovers x.

    Args:
        A: Square coefficient matrix (n x n) or a SystemDesign.
        b: Right-hand side (n,). Required unless A is a SystemDesign.
        backend: Computational backend to use:
            - 'auto': 'cpu_parallel' when more than one worker is available
              and n >= PARALLEL_THRESHOLD, else 'cpu'
            - 'cpu': Serial elimination on the calling thread
            - 'cpu_parallel': Row-parallel elimination on a thread pool
        n_workers: Worker threads for the parallel backend (None = all CPUs).
            Passing n_workers > 1 with backend='cpu' is an error.
        grain: Minimum rows per worker chunk.
        overwrite: Eliminate in the caller's float64 buffers instead of
            copies. A and b are consumed and the design is marked so; a
            seeded design passed again is regenerated first.

    Returns:
        GaussSolution with x, pivoting record, timing and verify()

    Raises:
        ValidationError: If inputs are invalid, or A is an array-built design
            already consumed by an overwrite=True solve
        DimensionError: If A is not square or b does not match A
        SingularMatrixError: If some pivot column has no nonzero candidate

    Example:
        >>> import numpy as np
        >>> from pygauss import solve
        >>> result = solve(np.array([[0.0, 1.0], [1.0, 0.0]]), [3.0, 4.0])
        >>> result.x
        array([4., 3.])
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(A, SystemDesign):
        if b is not None:
            raise ValueError("b must be None when A is a SystemDesign")
        design = _usable_design(A)
    else:
        if b is None:
            raise ValueError("b required when A is not a SystemDesign")
        design = SystemDesign.from_arrays(A, b)

    # === Select Backend ===
    backend_impl = _get_backend(backend, design, n_workers, grain, overwrite)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return GaussSolution(_result=result, _design=design)


def verify(
    A: ArrayLike | SystemDesign,
    b: ArrayLike | None,
    x: ArrayLike,
    *,
    band: RatioBand | str = DEFAULT_BAND,
) -> VerificationSolution:
    """
    Check that x satisfies A·x = b within a relative-ratio band.

    For each row, ratio = max(|ans/b|, |b/ans|) with ans = sum_j A[i][j]·x[j]
    must lie in [band.lower, band.upper]. Rows with b[i] == 0 use the
    absolute fallback |ans| <= band.zero_atol · sum_j |A[i][j]·x[j]|.

    Every row is checked. Failure is non-fatal: a VerificationWarning names
    the first failing row and the result lists all of them.

    Args:
        A: Original matrix (n x n) or a SystemDesign (then b must be None)
        b: Original right-hand side (n,)
        x: Candidate solution (n,)
        band: Acceptance band, or the name of a predefined one
            ('fp64_default', 'fp64_relaxed', 'fp64_symmetric')

    Returns:
        VerificationSolution
    """
    if isinstance(A, SystemDesign):
        if b is not None:
            raise ValueError("b must be None when A is a SystemDesign")
        design = _usable_design(A)
    else:
        if b is None:
            raise ValueError("b required when A is not a SystemDesign")
        design = SystemDesign.from_arrays(A, b)

    band = resolve_band(band)

    x_arr = check_array(x, 'x')
    check_1d(x_arr, 'x')
    check_consistent_length(design.b, x_arr, names=('b', 'x'))

    return VerificationSolution(
        _result=run_verification(design.A, design.b, x_arr, band)
    )


def _get_backend(
    choice: BackendChoice,
    design: SystemDesign,
    n_workers: int | None,
    grain: int,
    overwrite: bool,
):
    """
    Select and instantiate the appropriate backend.

    Args:
        choice: User's backend preference
        design: The system (its dimension drives 'auto')
        n_workers: Requested worker count, or None
        grain: Minimum rows per chunk
        overwrite: Whether the backend may consume the design's buffers

    Returns:
        Backend instance ready to solve

    Raises:
        ValidationError: If the worker count conflicts with the backend
        ValueError: If unknown backend specified
    """
    if n_workers is not None:
        n_workers = check_positive_int(n_workers, 'n_workers')

    if choice == 'auto':
        workers = n_workers if n_workers is not None else get_cpu_info().n_cores
        if workers > 1 and design.n >= PARALLEL_THRESHOLD:
            return CPUParallelGaussBackend(workers, grain=grain, overwrite=overwrite)
        return CPUGaussBackend(overwrite=overwrite)

    elif choice == 'cpu':
        if n_workers is not None and n_workers != 1:
            raise ValidationError(
                f"backend 'cpu' is serial; got n_workers={n_workers}. "
                f"Use backend='cpu_parallel' for multiple workers."
            )
        return CPUGaussBackend(overwrite=overwrite)

    elif choice == 'cpu_parallel':
        return CPUParallelGaussBackend(n_workers, grain=grain, overwrite=overwrite)

    else:
        raise ValueError(f"Unknown backend: {choice!r}")


def _usable_design(design: SystemDesign) -> SystemDesign:
    """
    Return a design whose A and b still hold the system.

    A design consumed by an earlier overwrite=True solve is rebuilt from its
    seed; an array-built one cannot be, and is rejected.
    """
    if not design.consumed:
        return design
    if design.supports(CAPABILITY_REPEATABLE):
        return design.regenerate()
    raise ValidationError(
        "SystemDesign was consumed by an overwrite=True solve and was built "
        "from arrays, so it cannot be regenerated; build a new design from "
        "a copy of A and b."
    )

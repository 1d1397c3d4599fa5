"""
Verification of a candidate solution.

Checks that x actually satisfies A·x = b. Even in double precision the
recomputed right-hand side loses some significant digits, so a naive
equality check will not pass. Each equation is instead accepted when the
ratio max(|ans/b|, |b/ans|) lies inside a RatioBand around 1.

When b[i] is exactly zero the ratio is undefined (division by zero). Those
rows are checked absolutely: |ans| <= zero_atol * sum_j |A[i][j] * x[j]|,
i.e. the residual must be small relative to the terms that were summed.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pygauss.core.compute.timing import Timer
from pygauss.core.compute.tolerances import RatioBand
from pygauss.core.exceptions import VerificationWarning
from pygauss.core.result import Result
from pygauss.linsolve._common import VerificationMismatch, VerificationParams


def verify_system(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    x: NDArray[np.floating[Any]],
    band: RatioBand,
) -> VerificationParams:
    """
    Check every equation of A·x = b against `band`.

    Args:
        A: Original matrix (n x n)
        b: Original right-hand side (n,)
        x: Candidate solution (n,)
        band: Acceptance band

    Returns:
        VerificationParams with per-row ratios and all mismatches
    """
    computed = A @ x
    term_scale = np.abs(A) @ np.abs(x)
    finite = np.isfinite(computed)
    zero = b == 0.0

    with np.errstate(divide='ignore', invalid='ignore'):
        ratios = np.maximum(np.abs(computed / b), np.abs(b / computed))
        ratios = np.where(zero, np.nan, ratios)
        in_band = band.accepts(ratios)
        absolute_ok = np.abs(computed) <= band.zero_atol * term_scale
    passed_rows = finite & np.where(zero, absolute_ok, in_band)

    mismatches = tuple(
        VerificationMismatch(
            row=int(i),
            computed=float(computed[i]),
            expected=float(b[i]),
            ratio=float(ratios[i]),
        )
        for i in np.flatnonzero(~passed_rows)
    )

    return VerificationParams(
        computed=computed,
        expected=np.array(b, dtype=np.float64, copy=True),
        ratios=ratios,
        zero_rows=np.flatnonzero(zero),
        passed_rows=passed_rows,
        mismatches=mismatches,
    )


def run_verification(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    x: NDArray[np.floating[Any]],
    band: RatioBand,
    *,
    stacklevel: int = 3,
) -> Result[VerificationParams]:
    """
    Verify x and wrap the outcome in a Result.

    A failed verification is non-fatal: it emits a VerificationWarning
    naming the first failing row and records the same message in the
    result's warnings.
    """
    timer = Timer()
    timer.start()
    with timer.section('verification'):
        params = verify_system(A, b, x, band)
    timer.stop()

    warnings_list: list[str] = []
    if not params.passed:
        first = params.mismatches[0]
        message = first.describe()
        if len(params.mismatches) > 1:
            message += f" ({len(params.mismatches)} of {len(b)} rows failed)"
        warnings_list.append(message)
        warnings.warn(message, VerificationWarning, stacklevel=stacklevel)

    info: dict[str, Any] = {
        'method': 'ratio_band',
        'band': band.name,
        'lower': band.lower,
        'upper': band.upper,
        'n_zero_rows': int(params.zero_rows.size),
        'n_failed': len(params.mismatches),
    }

    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name='cpu_verify',
        n=len(b),
        warnings=tuple(warnings_list),
    )

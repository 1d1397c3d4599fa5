"""
Shared parameter payloads for the linear solver.

These are the immutable data computed by backends and by verification;
user-facing wrappers live in solution.py.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class GaussParams:
    """
    Parameter payload for a Gaussian elimination solve.

    Attributes:
        x: Solution vector (n,)
        permutation: Final row order; position k holds the original index of
            the row used as pivot row k
        pivot_magnitudes: |pivot| chosen for each column, in column order
        n_swaps: Number of columns whose pivot row differed from the diagonal
    """
    x: NDArray[np.floating[Any]]
    permutation: NDArray[np.intp]
    pivot_magnitudes: NDArray[np.floating[Any]]
    n_swaps: int


@dataclass(frozen=True)
class VerificationMismatch:
    """One equation that failed verification."""
    row: int
    computed: float
    expected: float
    ratio: float

    def describe(self) -> str:
        return (
            f"Verification failed for index = {self.row}: "
            f"{self.computed!r} != {self.expected!r}"
        )


@dataclass(frozen=True)
class VerificationParams:
    """
    Parameter payload for a verification pass.

    Attributes:
        computed: A·x for every row
        expected: The original right-hand side b
        ratios: max(|computed/expected|, |expected/computed|) per row; NaN
            for rows whose expected value is zero (checked absolutely)
        zero_rows: Indices of rows checked with the absolute fallback
        passed_rows: Boolean acceptance per row
        mismatches: Every failing row, in row order
    """
    computed: NDArray[np.floating[Any]]
    expected: NDArray[np.floating[Any]]
    ratios: NDArray[np.floating[Any]]
    zero_rows: NDArray[np.intp]
    passed_rows: NDArray[np.bool_]
    mismatches: tuple[VerificationMismatch, ...]

    @property
    def passed(self) -> bool:
        return len(self.mismatches) == 0

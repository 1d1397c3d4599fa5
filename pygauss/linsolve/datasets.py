"""
Seeded synthetic systems.

Elimination destroys A and b, so the original system is recovered for
verification by regenerating it from the same (seed, n, value_range)
triple rather than by keeping a copy. Both generators draw from a single
MT19937 stream: first the n*n entries of A in row-major order, then the
n entries of b, uniform in [-value_range, value_range). The same triple
always yields bit-identical arrays.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pygauss.core.exceptions import ValidationError
from pygauss.core.validation import check_positive_int


def _check_seed(seed: Any) -> int:
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise ValidationError(f"seed: expected an integer, got {type(seed).__name__}")
    if seed < 0:
        raise ValidationError(f"seed: must be >= 0, got {seed}")
    return int(seed)


def _check_range(value_range: Any) -> float:
    value_range = float(value_range)
    if not np.isfinite(value_range) or value_range <= 0.0:
        raise ValidationError(f"value_range: must be finite and > 0, got {value_range}")
    return value_range


def random_system(
    seed: int,
    n: int,
    value_range: float = 65536,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Uniform random system A (n x n), b (n,).

    Random matrices can be singular (in principle); callers solving them
    must be ready for SingularMatrixError.

    Args:
        seed: Non-negative integer seed
        n: Dimension (>= 1)
        value_range: Entries lie in [-value_range, value_range)

    Returns:
        (A, b) as fresh float64 arrays
    """
    seed = _check_seed(seed)
    n = check_positive_int(n, 'n')
    value_range = _check_range(value_range)

    rng = np.random.Generator(np.random.MT19937(seed))
    values = rng.uniform(-value_range, value_range, size=n * n + n)
    A = values[:n * n].reshape(n, n).copy()
    b = values[n * n:].copy()
    return A, b


def diagonally_dominant_system(
    seed: int,
    n: int,
    value_range: float = 65536,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Strictly diagonally dominant variant of random_system().

    Same stream as random_system(); afterwards each diagonal entry keeps its
    sign and is replaced by (sum of the row's off-diagonal magnitudes +
    value_range). Such matrices are nonsingular and well conditioned, which
    makes them the default input for tests and benchmarks.
    """
    A, b = random_system(seed, n, value_range)
    diag = np.diag(A).copy()
    off_diagonal = np.abs(A).sum(axis=1) - np.abs(diag)
    sign = np.where(diag < 0.0, -1.0, 1.0)
    np.fill_diagonal(A, sign * (off_diagonal + float(value_range)))
    return A, b


GENERATORS = {
    'uniform': random_system,
    'diagonally_dominant': diagonally_dominant_system,
}

"""
Dense linear systems by Gaussian elimination with partial pivoting.

Public API:
    solve(A, b, ...) -> GaussSolution
    verify(A, b, x, ...) -> VerificationSolution

solve() handles:
    - Input validation
    - Design construction
    - Backend selection (serial or row-parallel)
    - Result wrapping

Example:
    >>> from pygauss.linsolve import solve, SystemDesign
    >>> design = SystemDesign.from_seed(411, 256, kind='diagonally_dominant')
    >>> result = solve(design, backend='cpu_parallel', n_workers=4)
    >>> result.verify().passed
    True
"""

from pygauss.linsolve.design import SystemDesign
from pygauss.linsolve.datasets import random_system, diagonally_dominant_system
from pygauss.linsolve._common import GaussParams, VerificationParams, VerificationMismatch
from pygauss.linsolve.solution import GaussSolution, VerificationSolution
from pygauss.linsolve.solvers import solve, verify

__all__ = [
    "solve",
    "verify",
    "SystemDesign",
    "GaussSolution",
    "GaussParams",
    "VerificationSolution",
    "VerificationParams",
    "VerificationMismatch",
    "random_system",
    "diagonally_dominant_system",
]

"""
pygauss: parallel dense linear solver for Python.

Solves A·x = b by Gaussian elimination with partial pivoting, running the
pivot search and the row updates of each column across a pool of worker
threads, and checks solutions with a relative-ratio verification pass.

Submodules:
    linsolve: Solver, verification, seeded problem generation
    core: Exceptions, result envelope, validation, timing, row pool
    cli: Command-line benchmark driver
"""

__version__ = "0.1.0"

from pygauss import linsolve
from pygauss.linsolve import (
    solve,
    verify,
    SystemDesign,
    GaussSolution,
    VerificationSolution,
    random_system,
    diagonally_dominant_system,
)
from pygauss.core.exceptions import (
    PyGaussError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    VerificationWarning,
)

__all__ = [
    "__version__",
    "linsolve",
    "solve",
    "verify",
    "SystemDesign",
    "GaussSolution",
    "VerificationSolution",
    "random_system",
    "diagonally_dominant_system",
    "PyGaussError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "VerificationWarning",
]

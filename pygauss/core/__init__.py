"""
Core infrastructure for pygauss.

This module provides shared abstractions, utilities, and backend infrastructure
used by the solver package.

Key components:
    protocols: Design, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Hardware detection, timing, row pool, tolerance bands
"""

from pygauss.core.protocols import Design, Backend
from pygauss.core.result import Result
from pygauss.core.exceptions import (
    PyGaussError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    VerificationWarning,
)

__all__ = [
    # Protocols
    "Design",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyGaussError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "VerificationWarning",
]

"""
Exception hierarchy for pygauss.

All exceptions inherit from PyGaussError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyGaussError(Exception):
    """Base exception for all pygauss errors."""
    pass


class ValidationError(PyGaussError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when A is not square, or when b does not match the
    dimension of A.
    """
    pass


class NumericalError(PyGaussError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular for some pivot column.

    Raised by forward elimination when the largest candidate magnitude
    at or below the diagonal of a column is exactly zero. The solve is
    aborted; no partial solution is returned.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Pivot column at which elimination stopped
        magnitude: Best candidate magnitude found (0.0 for a singular column)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        column: int | None = None,
        magnitude: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column
        self.magnitude = magnitude


class VerificationWarning(UserWarning):
    """
    A candidate solution failed verification.

    Non-fatal: emitted through warnings.warn when one or more equations
    of A·x = b deviate from the expected right-hand side beyond the
    tolerance band. The solve itself is not altered or retried.
    """
    pass

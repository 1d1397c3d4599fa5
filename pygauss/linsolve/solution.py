"""
Linear solver solution types.

Contains the user-facing wrappers around solve and verification Results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pygauss.core.capabilities import CAPABILITY_REPEATABLE
from pygauss.core.compute.tolerances import RatioBand, DEFAULT_BAND, resolve_band
from pygauss.core.exceptions import ValidationError
from pygauss.core.result import Result
from pygauss.linsolve._common import GaussParams, VerificationMismatch, VerificationParams
from pygauss.linsolve._verify import run_verification

if TYPE_CHECKING:
    from pygauss.linsolve.design import SystemDesign


@dataclass
class VerificationSolution:
    """
    User-facing verification results.

    A failed verification is an observation, not an error: the solve it
    checks is left untouched.
    """
    _result: Result[VerificationParams]

    @property
    def passed(self) -> bool:
        return self._result.params.passed

    @property
    def n(self) -> int:
        return self._result.n

    @property
    def computed(self) -> NDArray[np.floating[Any]]:
        """A·x per row."""
        return self._result.params.computed

    @property
    def expected(self) -> NDArray[np.floating[Any]]:
        """Original right-hand side."""
        return self._result.params.expected

    @property
    def ratios(self) -> NDArray[np.floating[Any]]:
        return self._result.params.ratios

    @property
    def zero_rows(self) -> NDArray[np.intp]:
        """Rows whose expected value is zero (checked absolutely)."""
        return self._result.params.zero_rows

    @property
    def mismatches(self) -> tuple[VerificationMismatch, ...]:
        return self._result.params.mismatches

    @property
    def first_mismatch(self) -> VerificationMismatch | None:
        mismatches = self._result.params.mismatches
        return mismatches[0] if mismatches else None

    @property
    def n_failed(self) -> int:
        return len(self._result.params.mismatches)

    @property
    def max_ratio_error(self) -> float:
        """Largest |ratio - 1| over the ratio-checked rows (0.0 if none)."""
        ratios = self.ratios[~np.isnan(self.ratios)]
        if ratios.size == 0:
            return 0.0
        return float(np.max(np.abs(ratios - 1.0)))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Short report in the style of the command-line driver."""
        if self.passed:
            return "Verification succeeded"
        first = self.first_mismatch
        lines = [
            f"Verification failed for index = {first.row}.",
            f"{first.computed:g} != {first.expected:g}",
        ]
        if self.n_failed > 1:
            lines.append(f"({self.n_failed} of {self.n} rows failed)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"VerificationSolution(n={self.n}, passed={self.passed}, "
            f"n_failed={self.n_failed})"
        )


@dataclass
class GaussSolution:
    """
    User-facing solve results.

    Wraps the backend Result and provides accessors for the solution vector,
    the pivoting record and a verify() shortcut against the original system.
    """
    _result: Result[GaussParams]
    _design: 'SystemDesign'

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Solution vector (n,)."""
        return self._result.params.x

    @property
    def permutation(self) -> NDArray[np.intp]:
        return self._result.params.permutation

    @property
    def pivot_magnitudes(self) -> NDArray[np.floating[Any]]:
        return self._result.params.pivot_magnitudes

    @property
    def n_swaps(self) -> int:
        return self._result.params.n_swaps

    @property
    def n(self) -> int:
        return self._result.n

    @property
    def elapsed(self) -> float:
        """Wall-clock seconds of the whole solve."""
        return self._result.seconds()

    @property
    def design(self) -> 'SystemDesign':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def verify(self, band: RatioBand | str = DEFAULT_BAND) -> VerificationSolution:
        """
        Verify x against the original system.

        Seeded designs are regenerated from their seed; otherwise the
        design's arrays are used, which is only possible while no overwrite
        solve has consumed them.

        Args:
            band: Acceptance band, or the name of a predefined one

        Raises:
            ValidationError: If the original system was consumed by an
                overwrite solve and cannot be regenerated
        """
        if self._design.supports(CAPABILITY_REPEATABLE):
            original = self._design.regenerate()
        elif not self._design.consumed:
            original = self._design
        else:
            raise ValidationError(
                "The original system was consumed by an overwrite=True solve and "
                "cannot be regenerated; call pygauss.verify(A, b, x) with a copy."
            )
        return VerificationSolution(
            _result=run_verification(original.A, original.b, self.x, resolve_band(band))
        )

    def summary(self) -> str:
        """Human-readable solve report."""
        lines = [
            "Gaussian Elimination Results",
            "=" * 60,
            f"Dimension: {self.n}",
            f"Row swaps: {self.n_swaps}",
            f"Workers: {self.info.get('n_workers', 1)}",
        ]
        if self.n > 0:
            lines.append(
                f"Pivot magnitude range: [{np.min(self.pivot_magnitudes):g}, "
                f"{np.max(self.pivot_magnitudes):g}]"
            )
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.elapsed:.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GaussSolution(n={self.n}, backend={self.backend_name!r}, "
            f"n_swaps={self.n_swaps})"
        )

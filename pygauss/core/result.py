"""
Result envelope shared by solves and verification passes.

Every backend and the verifier return a Result[P]: the stage payload P
(GaussParams, VerificationParams) plus what the stage measured about
itself. User-facing wrappers in linsolve.solution read from it.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result of one solve or verification pass.

    Attributes:
        params: Stage payload (solution vector, verification ratios)
        info: Metadata (method, worker count, overwrite mode, band)
        timing: Timer.result() of the stage, or None if not measured
        backend_name: 'cpu_gauss', 'cpu_gauss_parallel' or 'cpu_verify'
        n: Dimension of the system the stage worked on
        warnings: Non-fatal issues, e.g. the first failed equation

    Example:
        >>> Result(
        ...     params=GaussParams(x=x, permutation=perm,
        ...                        pivot_magnitudes=mags, n_swaps=3),
        ...     info={'method': 'gauss_partial_pivot', 'n_workers': 4},
        ...     timing={'total_seconds': 0.01, 'forward_elimination': 0.009},
        ...     backend_name='cpu_gauss_parallel',
        ...     n=256,
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    n: int | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def seconds(self, section: str = 'total_seconds') -> float:
        """Time spent in a timer section; 0.0 if it was not timed."""
        if self.timing is None:
            return 0.0
        return self.timing.get(section, 0.0)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

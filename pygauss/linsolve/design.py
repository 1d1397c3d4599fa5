"""
SystemDesign: a validated linear system A·x = b.

Design owns the original A and b handed to a backend. A design built from
a seed also remembers how to rebuild them, which is how the original
system is recovered for verification once elimination has consumed it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pygauss.core.capabilities import CAPABILITY_MATERIALIZED, CAPABILITY_REPEATABLE
from pygauss.core.exceptions import ValidationError
from pygauss.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_square,
    check_finite,
    check_consistent_length,
)
from pygauss.linsolve.datasets import GENERATORS


@dataclass(frozen=True)
class SystemDesign:
    """
    Square linear system specification.

    Immutable after construction apart from the consumed flag. The arrays
    are not copied: a solve with overwrite=True eliminates in them and marks
    the design consumed, after which its A and b no longer hold the system.

    Construction:
        SystemDesign.from_arrays(A, b)                   # caller-owned arrays
        SystemDesign.from_seed(411, 256)                 # uniform random system
        SystemDesign.from_seed(7, 3, kind='diagonally_dominant')
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _n: int
    _seed: int | None = None
    _value_range: float | None = None
    _kind: str | None = None
    _consumed: bool = field(default=False, compare=False, repr=False)

    @classmethod
    def from_arrays(cls, A: ArrayLike, b: ArrayLike) -> SystemDesign:
        """Build a design directly from arrays."""
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')
        return cls._build(A_arr, b_arr)

    @classmethod
    def from_seed(
        cls,
        seed: int,
        n: int,
        value_range: float = 65536,
        *,
        kind: str = 'uniform',
    ) -> SystemDesign:
        """
        Build a repeatable design from a (seed, n, value_range) triple.

        Args:
            seed: Non-negative integer seed
            n: Dimension
            value_range: Entries lie in [-value_range, value_range)
            kind: 'uniform' or 'diagonally_dominant'
        """
        if kind not in GENERATORS:
            raise ValidationError(
                f"kind must be one of {sorted(GENERATORS)}, got {kind!r}"
            )
        A, b = GENERATORS[kind](seed, n, value_range)
        return cls._build(
            A, b, seed=int(seed), value_range=float(value_range), kind=kind,
        )

    @classmethod
    def _build(
        cls,
        A: NDArray,
        b: NDArray,
        *,
        seed: int | None = None,
        value_range: float | None = None,
        kind: str | None = None,
    ) -> SystemDesign:
        """Internal builder with validation."""
        if b.ndim == 2 and b.shape[1] == 1:
            b = b.ravel()

        check_2d(A, 'A')
        check_square(A, 'A')
        check_1d(b, 'b')
        check_consistent_length(A, b, names=('A', 'b'))
        check_finite(A, 'A')
        check_finite(b, 'b')

        return cls(
            _A=A, _b=b, _n=A.shape[0],
            _seed=seed, _value_range=value_range, _kind=kind,
        )

    # === Properties ===

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n)."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,)."""
        return self._b

    @property
    def n(self) -> int:
        """Dimension of the system."""
        return self._n

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def value_range(self) -> float | None:
        return self._value_range

    @property
    def kind(self) -> str | None:
        return self._kind

    @property
    def consumed(self) -> bool:
        """True once an overwrite solve has eliminated in A and b."""
        return self._consumed

    def mark_consumed(self) -> None:
        object.__setattr__(self, '_consumed', True)

    def supports(self, capability: str) -> bool:
        """Check if this design supports a capability."""
        if capability == CAPABILITY_MATERIALIZED:
            return not self._consumed
        if capability == CAPABILITY_REPEATABLE:
            return self._seed is not None
        return False

    def regenerate(self) -> SystemDesign:
        """
        Rebuild the original system from its seed.

        Returns:
            A fresh design with bit-identical A and b

        Raises:
            ValidationError: If the design was not built from a seed
        """
        if not self.supports(CAPABILITY_REPEATABLE):
            raise ValidationError(
                "SystemDesign was built from arrays and cannot be regenerated; "
                "keep a copy of A and b or build it with SystemDesign.from_seed()"
            )
        return SystemDesign.from_seed(
            self._seed, self._n, self._value_range, kind=self._kind,
        )

    def __repr__(self) -> str:
        if self._seed is not None:
            return (
                f"SystemDesign(n={self._n}, seed={self._seed}, "
                f"value_range={self._value_range:g}, kind={self._kind!r})"
            )
        return f"SystemDesign(n={self._n})"

"""
Tolerance bands for solution verification.

A candidate solution x of A·x = b is checked one equation at a time by
comparing the recomputed right-hand side with the expected one. A direct
equality or absolute-difference test is wrong here: rounding across n
multiply-adds makes exact agreement unreachable at realistic sizes. The
ratio max(|ans/b|, |b/ans|) is compared against a band around 1 instead.

The band is a fixed constant; it does not scale with n or with the
condition number of A.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygauss.core.exceptions import ValidationError


@dataclass(frozen=True)
class RatioBand:
    """
    Acceptance band for the per-equation verification ratio.

    Attributes:
        lower: Smallest accepted ratio
        upper: Largest accepted ratio
        zero_atol: Absolute tolerance used when the expected value is exactly
            zero, relative to the summed magnitude of the row's terms
        name: Identifier
        description: Human-readable description
    """
    lower: float
    upper: float
    zero_atol: float
    name: str
    description: str

    def __post_init__(self):
        if not (0.0 < self.lower <= 1.0 <= self.upper):
            raise ValidationError(
                f"RatioBand: need 0 < lower <= 1 <= upper, "
                f"got lower={self.lower}, upper={self.upper}"
            )
        if self.zero_atol < 0.0:
            raise ValidationError(
                f"RatioBand: zero_atol must be >= 0, got {self.zero_atol}"
            )

    def accepts(self, ratio):
        """
        True where ratio lies inside the band (NaN is never accepted).

        Works elementwise on arrays; a scalar ratio gives a scalar result.
        """
        return (ratio >= self.lower) & (ratio <= self.upper)


# Default band for double-precision Gaussian elimination
DEFAULT_BAND = RatioBand(
    lower=0.999999,
    upper=1.00001,
    zero_atol=1e-9,
    name='fp64_default',
    description='Double precision, partial pivoting, well-scaled systems',
)

# Looser band for stress runs on large or poorly conditioned systems
RELAXED_BAND = RatioBand(
    lower=0.9999,
    upper=1.0001,
    zero_atol=1e-6,
    name='fp64_relaxed',
    description='Double precision, large or ill-conditioned systems',
)

# Symmetric band matching the documented property |ratio - 1| <= 1e-5
SYMMETRIC_BAND = RatioBand(
    lower=1.0 - 1e-5,
    upper=1.0 + 1e-5,
    zero_atol=1e-9,
    name='fp64_symmetric',
    description='Double precision, symmetric 1e-5 band',
)


BANDS = {band.name: band for band in (DEFAULT_BAND, RELAXED_BAND, SYMMETRIC_BAND)}


def select_band(name: str) -> RatioBand:
    """Look up a predefined band by name."""
    try:
        return BANDS[name]
    except KeyError:
        raise ValidationError(
            f"Unknown tolerance band {name!r}; expected one of {sorted(BANDS)}"
        ) from None


def resolve_band(band: RatioBand | str) -> RatioBand:
    """Accept a RatioBand or the name of a predefined one."""
    if isinstance(band, str):
        return select_band(band)
    if not isinstance(band, RatioBand):
        raise ValidationError(
            f"band: expected a RatioBand or band name, got {type(band).__name__}"
        )
    return band

"""
Tolerance tiers for approximate matrix comparison.

Element-wise closeness uses |a - b| <= atol + rtol * |b|, the same rule as
numpy.isclose.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision, a handful of roundings away from exact
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, few accumulated roundings',
)

DEFAULT_TOLERANCE = FP64

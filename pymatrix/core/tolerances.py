"""
Precision constants and tolerance tiers.

Defines precision expectations for comparing matrices:
- integer tables: exact comparison
- float64 tables: relative/absolute tolerance for values produced by
  division (inverse, divided)

Used by Matrix.isclose() and the test suite.
"""

from dataclasses import dataclass

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Default tolerance for float comparisons (relative)
DEFAULT_RTOL: float = 1e-9

# Default tolerance for float comparisons (absolute)
DEFAULT_ATOL: float = 1e-12

# Laplace expansion is O(n!). Expanding anything larger than this
# emits a RuntimeWarning.
LAPLACE_WARNING_SIZE: int = 9


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer tables: no rounding can occur
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer arithmetic, compared exactly',
)

# Float tables
FP64 = ToleranceTier(
    rtol=DEFAULT_RTOL,
    atol=DEFAULT_ATOL,
    name='fp64',
    description='Double precision, rounding from division allowed',
)


def select_tolerance(*dtypes: np.dtype) -> ToleranceTier:
    """Select the tolerance tier for comparing tables of the given dtypes."""
    if all(np.issubdtype(dtype, np.integer) for dtype in dtypes):
        return EXACT
    return FP64

"""
Core infrastructure for pymatrix.

This module provides the shared pieces the dense Matrix is built on.

Key components:
    exceptions: Exception hierarchy
    validation: Input and dimension validators
    flags: Dimension-check flag constants
    tolerances: Precision constants and tolerance tiers
    cache: Version-stamped memoization of derived values
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    OutOfRangeError,
    NumericalError,
    SingularMatrixError,
    DivisionByZeroError,
)
from pymatrix.core.flags import NONE, SQUARE, SAME, REFLECT, INVERTIBLE
from pymatrix.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "OutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "DivisionByZeroError",
    # Flags
    "NONE",
    "SQUARE",
    "SAME",
    "REFLECT",
    "INVERTIBLE",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]

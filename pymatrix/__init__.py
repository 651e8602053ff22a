"""
pymatrix: dense matrices and linear-algebra primitives for Python.

Construction, indexed access, element-wise and matrix-wise arithmetic,
structural predicates and the determinant / cofactor / adjugate / inverse
chain, on a numpy-backed table.

Submodules:
    core: Exceptions, validators, dimension flags, tolerances, caching
    dense: The Matrix class
"""

__version__ = "0.1.0"

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
from pymatrix.dense import Matrix

__all__ = [
    "__version__",
    "Matrix",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "OutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "DivisionByZeroError",
    # Dimension flags
    "NONE",
    "SQUARE",
    "SAME",
    "REFLECT",
    "INVERTIBLE",
]

"""
Dense matrices.

Public API:
    Matrix -- dense two-dimensional matrix of real numbers

Example:
    >>> from pymatrix.dense import Matrix
    >>> m = Matrix([[1, 3, 3], [1, 4, 3], [1, 3, 4]])
    >>> m.get_inverse().to_array()
    [[7.0, -3.0, -3.0], [-1.0, 1.0, 0.0], [-1.0, 0.0, 1.0]]
"""

from pymatrix.dense.matrix import Matrix

__all__ = [
    "Matrix",
]

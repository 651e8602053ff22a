"""
Dimension-check flag constants for pymatrix.

This module is the SINGLE SOURCE OF TRUTH for the validation modes accepted
by check_dimensions(), apply_matrix() and map_matrix(). Flags are bits and
combine with ``|``.

Usage:
    from pymatrix.core.flags import SQUARE, INVERTIBLE

    check_dimensions(matrix, matrix, SQUARE | INVERTIBLE)
"""

# No requirement
NONE = 1

# Target must have as many rows as columns
SQUARE = 2

# Target must have the reference's width and height
SAME = 4

# Target's rows must match the reference's columns and vice versa
REFLECT = 8

# Target must have a non-zero determinant
INVERTIBLE = 16

# All flags as a frozenset for validation
ALL_FLAGS = frozenset({
    NONE,
    SQUARE,
    SAME,
    REFLECT,
    INVERTIBLE,
})

FLAG_MASK = NONE | SQUARE | SAME | REFLECT | INVERTIBLE

__all__ = [
    'NONE',
    'SQUARE',
    'SAME',
    'REFLECT',
    'INVERTIBLE',
    'ALL_FLAGS',
    'FLAG_MASK',
]

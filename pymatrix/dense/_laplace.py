"""
Determinant by Laplace (cofactor) expansion.

    det(A) = sum_x (-1)^x * A[x, 0] * det(minor(A, x, 0))

Base cases are the empty matrix (det = 1, the empty product), 1x1 and 2x2.
The recursion is O(n!) and kept that way: exact integer results for integer
tables matter more here than speed. Leaf arithmetic happens on Python
scalars, so integer determinants never overflow int64.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.tolerances import LAPLACE_WARNING_SIZE


def minor(table: NDArray[Any], column: int, row: int = 0) -> NDArray[Any]:
    """Table with the given column and row removed, order preserved."""
    return np.delete(np.delete(table, row, axis=0), column, axis=1)


def determinant(table: NDArray[Any]) -> Any:
    """Determinant of a square table. Caller guarantees squareness."""
    size = table.shape[0]
    if size == 0:
        return 1
    if size == 1:
        return table[0, 0].item()
    if size == 2:
        (a, b), (c, d) = table.tolist()
        return a * d - b * c

    result = 0
    for x, cell in enumerate(table[0].tolist()):
        if cell == 0:
            continue
        term = cell * determinant(minor(table, x, 0))
        if x % 2 == 0:
            result += term
        else:
            result -= term
    return result


def cofactor(table: NDArray[Any], x: int, y: int) -> Any:
    """Signed minor determinant at column x, row y."""
    sign = 1 if (x + y) % 2 == 0 else -1
    return sign * determinant(minor(table, x, y))


def warn_expansion_cost(size: int, stacklevel: int = 3) -> None:
    """Warn when a Laplace expansion is large enough to be very slow."""
    if size > LAPLACE_WARNING_SIZE:
        warnings.warn(
            f"Laplace expansion of a {size}x{size} matrix takes O(n!) operations "
            f"(warning threshold: {LAPLACE_WARNING_SIZE}x{LAPLACE_WARNING_SIZE})",
            RuntimeWarning,
            stacklevel=stacklevel,
        )

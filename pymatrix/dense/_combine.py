"""
Two-matrix combination.

Two combination semantics:
    - combine_cells: same-shape operands, result[x, y] = f(a[x, y], b[x, y], x, y)
    - combine_dot: row-times-column accumulation used by matrix
      multiplication, result[x, y] = sum_z f(a[z, y], b[x, z], x, y, z)

Both work on ndarrays and return nested lists of Python scalars; shape
validation is the caller's job.
"""

from __future__ import annotations

from typing import Any, Callable

from numpy.typing import NDArray

PairFunc = Callable[..., Any]


def combine_cells(left: NDArray[Any], right: NDArray[Any], func: PairFunc) -> list[list[Any]]:
    """Combine corresponding cells of two same-shape tables."""
    return [
        [func(a, b, x, y) for x, (a, b) in enumerate(zip(left_row, right_row))]
        for y, (left_row, right_row) in enumerate(zip(left.tolist(), right.tolist()))
    ]


def combine_dot(left: NDArray[Any], right: NDArray[Any], func: PairFunc) -> list[list[Any]]:
    """
    Accumulate func over the shared dimension of left (h x n) and right (n x w).

    Returns an h x w nested list. Every output cell starts from 0 so func's
    results are summed onto the additive identity.
    """
    left_rows = left.tolist()
    right_rows = right.tolist()
    shared = left.shape[1]
    width = right.shape[1]

    result = []
    for y, left_row in enumerate(left_rows):
        row = []
        for x in range(width):
            total = 0
            for z in range(shared):
                total += func(left_row[z], right_rows[z][x], x, y, z)
            row.append(total)
        result.append(row)
    return result


def cell_sum(a, b, *coords):
    return a + b


def cell_difference(a, b, *coords):
    return a - b


def cell_product(a, b, *coords):
    return a * b

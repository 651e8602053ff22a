"""
Cell-wise transforms.

Backs Matrix.apply()/map() and the scalar arithmetic built on them. Cell
functions always receive ``(value, x, y)`` with value as a Python scalar,
x the column and y the row.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.validation import check_table

CellFunc = Callable[[Any, int, int], Any]


def map_cells(table: NDArray[Any], func: CellFunc) -> list[list[Any]]:
    """Evaluate func over every cell in row-major order."""
    return [
        [func(value, x, y) for x, value in enumerate(row)]
        for y, row in enumerate(table.tolist())
    ]


def build_table(cells: list[list[Any]], shape: tuple[int, int], name: str) -> NDArray[Any]:
    """
    Validate computed cells and give them the expected shape.

    Rows of an empty result carry no width information, so an empty result
    is reshaped to ``shape`` explicitly.
    """
    table = check_table(cells, name)
    if table.size == 0:
        table = np.zeros(shape, dtype=table.dtype)
    return table


def scalar_cell(op: Callable[[Any, Any], Any], scalar: int | float) -> CellFunc:
    """Cell function applying ``op(value, scalar)``."""
    def cell(value, x, y):
        return op(value, scalar)
    return cell


def negate_cell(value, x, y):
    return operator.neg(value)

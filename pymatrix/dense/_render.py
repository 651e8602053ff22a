"""
Text and JSON rendering of matrix rows.
"""

from __future__ import annotations

import json
from typing import Any


def to_json(rows: list[list[Any]]) -> str:
    """Compact row-major JSON: ``[[4,-2,8],[1,9,-2]]``."""
    return json.dumps(rows, separators=(',', ':'))


def render_table(rows: list[list[Any]]) -> str:
    """
    One bracketed row per line, each column right-aligned to its widest cell.

        [ 7,  8,  9]
        [ 2, -4,  0]
        [-1,  3, 16]
    """
    cells = [[str(value) for value in row] for row in rows]
    widths = [max(len(cell) for cell in column) for column in zip(*cells)]
    lines = []
    for row in cells:
        padded = (cell.rjust(width) for cell, width in zip(row, widths))
        lines.append('[' + ', '.join(padded) + ']')
    return '\n'.join(lines)

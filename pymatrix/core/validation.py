"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - Rows must agree in length (no padding, no truncation)
    - No silent type coercion beyond np.asarray on numeric rows
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    DivisionByZeroError,
    OutOfRangeError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.flags import FLAG_MASK, INVERTIBLE, REFLECT, SAME, SQUARE

if TYPE_CHECKING:
    from pymatrix.dense.matrix import Matrix


def _rows_of(rows: Any, name: str) -> list[list[Any]]:
    """Materialize an iterable of iterables into a list of lists."""
    if isinstance(rows, Mapping):
        rows = rows.values()
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Iterable):
        raise ValidationError(
            f"{name}: expected an iterable of rows, got {type(rows).__name__}"
        )

    table = []
    width = None
    for y, row in enumerate(rows):
        if isinstance(row, Mapping):
            row = row.values()
        if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
            raise ValidationError(
                f"{name}: row {y} is not iterable ({type(row).__name__})"
            )
        row = list(row)
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise ValidationError(
                f"{name}: row {y} has {len(row)} columns but {width} was expected"
            )
        table.append(row)
    return table


def _promote_to_float(
    table: list[list[Any]], name: str, fallback: NDArray[Any] | None = None
) -> NDArray[Any]:
    """
    Store real cells too wide for any integer dtype as float64.

    Exact integer arithmetic can outgrow int64. Such tables are kept as
    floats rather than rejected. Anything that is not a real number is left
    in fallback for check_numeric_dtype() to report.
    """
    real = all(
        isinstance(cell, numbers.Real) and not isinstance(cell, (bool, np.bool_))
        for row in table
        for cell in row
    )
    if not real:
        if fallback is None:
            raise ValidationError(f"{name}: cannot convert to array: non-numeric cells")
        return fallback
    try:
        return np.array(table, dtype=np.float64)
    except OverflowError as e:
        raise ValidationError(
            f"{name}: cell values exceed the float64 range"
        ) from e


def check_numeric_dtype(array: NDArray[Any], name: str) -> None:
    """
    Verify an array holds real numbers.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If the dtype is object, boolean, complex or
            otherwise non-numeric
    """
    if array.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if np.issubdtype(array.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")
    if not (np.issubdtype(array.dtype, np.integer) or np.issubdtype(array.dtype, np.floating)):
        raise ValidationError(
            f"{name}: non-numeric dtype {array.dtype}, expected numeric data"
        )


def check_table(rows: Any, name: str = 'rows') -> NDArray[Any]:
    """
    Validate and convert rows of cells to a 2-D numeric array.

    Accepts any iterable of iterables. Mappings are read through values(),
    in their iteration order, at both levels. ndarrays must already be 2-D.
    The result never aliases the input. Integer cells too wide for
    int64 or uint64 are stored as float64.

    Args:
        rows: Input to validate
        name: Parameter name for error messages

    Returns:
        2-D numpy.ndarray with integer or floating dtype

    Raises:
        ValidationError: If rows disagree in length or cells are not real numbers
    """
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2:
            raise ValidationError(
                f"{name}: expected 2D array, got {rows.ndim}D with shape {rows.shape}"
            )
        check_numeric_dtype(rows, name)
        return rows.copy()

    table = _rows_of(rows, name)
    if not table:
        return np.zeros((0, 0), dtype=np.int64)

    try:
        result = np.array(table)
    except OverflowError:
        result = _promote_to_float(table, name)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        result = _promote_to_float(table, name, result)

    if result.ndim != 2:
        raise ValidationError(
            f"{name}: cells must be scalars, got array of shape {result.shape}"
        )
    check_numeric_dtype(result, name)
    return result


def check_index(index: Any, size: int, axis: str, name: str) -> int:
    """
    Verify an index addresses an existing row or column.

    Args:
        index: Requested index
        size: Number of rows or columns along the axis
        axis: 'x' for columns, 'y' for rows
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If index is not an integer
        OutOfRangeError: If index is negative or >= size
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer index, got {index!r}")
    index = int(index)
    if index < 0 or index >= size:
        noun = 'columns' if axis == 'x' else 'rows'
        raise OutOfRangeError(
            f"{name}: attempted to access {axis} index {index} on matrix with {size} {noun}",
            axis=axis,
            index=index,
            size=size,
        )
    return index


def check_scalar(value: Any, name: str) -> int | float:
    """
    Verify a value is a real number.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int or float

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    if isinstance(value, np.generic):
        return value.item()
    return value


def check_size(value: Any, name: str) -> int:
    """
    Verify a matrix dimension is a non-negative integer.

    Args:
        value: Requested width, height or size
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not integral or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
        raise ValidationError(f"{name}: expected a non-negative integer, got {value!r}")
    return int(value)


def check_storable(value: int | float, dtype: np.dtype, name: str) -> np.dtype:
    """
    Find the dtype a table of the given dtype needs to hold value.

    Integer tables keep their dtype when value is an integer in range.
    Floats and out-of-range integers need float64, the same promotion
    check_table() applies to wide integer cells.

    Args:
        value: Real number about to be written
        dtype: Current dtype of the table
        name: Parameter name for error messages

    Returns:
        dtype to store the table in

    Raises:
        ValidationError: If value exceeds the float64 range
    """
    if isinstance(value, numbers.Integral) and np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        if info.min <= value <= info.max:
            return dtype
    try:
        float(value)
    except OverflowError as e:
        raise ValidationError(f"{name}: {value!r} exceeds the float64 range") from e
    if np.issubdtype(dtype, np.floating):
        return dtype
    return np.dtype(np.float64)


def check_nonzero(value: int | float, name: str) -> None:
    """
    Verify a divisor is not zero.

    Raises:
        DivisionByZeroError: If value == 0
    """
    if value == 0:
        raise DivisionByZeroError(f"{name}: division by zero")


def check_power(power: Any) -> int:
    """
    Verify an exponent is an integer >= 1.

    Args:
        power: Requested exponent

    Returns:
        The exponent as a Python int

    Raises:
        ValidationError: If power is not integral or is < 1
    """
    if isinstance(power, bool) or not isinstance(power, numbers.Integral):
        raise ValidationError(
            f"power: must be an integer, got {type(power).__name__} {power!r}"
        )
    if power < 1:
        raise ValidationError(f"power: must be >= 1, got {power}")
    return int(power)


def check_dimensions(reference: Matrix, target: Matrix, flags: int) -> None:
    """
    Verify target's shape (and determinant) against reference.

    Checks run in the order SQUARE, SAME, REFLECT, INVERTIBLE and the first
    failure raises. NONE requests no checks.

    Args:
        reference: The matrix the operation is invoked on
        target: The matrix being validated (may be reference itself)
        flags: Bitwise OR of pymatrix.core.flags constants

    Raises:
        ValidationError: If flags contains unknown bits
        DimensionError: If a shape requirement fails
        SingularMatrixError: If INVERTIBLE is requested and det(target) == 0
    """
    if isinstance(flags, bool) or not isinstance(flags, numbers.Integral) or flags & ~FLAG_MASK:
        raise ValidationError(f"flags: unknown dimension flags {flags!r}")

    if flags & SQUARE and target.width != target.height:
        raise DimensionError(
            f"matrix must be square, got {target.height}x{target.width}",
            actual=target.shape,
        )
    if flags & SAME and target.shape != reference.shape:
        raise DimensionError(
            f"matrices must have the same dimensions: "
            f"{reference.height}x{reference.width} vs {target.height}x{target.width}",
            expected=reference.shape,
            actual=target.shape,
        )
    if flags & REFLECT and (target.height, target.width) != (reference.width, reference.height):
        raise DimensionError(
            f"matrix dimension mismatch: column count must match row count "
            f"({reference.height}x{reference.width} vs {target.height}x{target.width})",
            expected=(reference.width, reference.height),
            actual=target.shape,
        )
    if flags & INVERTIBLE:
        determinant = target.determinant()
        if determinant == 0:
            raise SingularMatrixError(
                "matrix must have a non-zero determinant (invertible)",
                determinant=determinant,
            )

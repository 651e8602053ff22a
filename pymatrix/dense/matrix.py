"""
Dense two-dimensional matrix.

Matrix owns a 2-D numpy table and exposes cell access, element-wise and
matrix-wise arithmetic, structural predicates and the determinant /
cofactor / adjugate / inverse chain.

Coordinates are always ``(x, y)``: x is the column, y is the row.

Operations come in pairs:
    - mutative (apply, add, multiply, transpose, inverse, ...) replace the
      receiver's table in place and return the receiver
    - non-mutative (map, added, multiplied, get_transpose, get_inverse, ...)
      return a new Matrix and leave the receiver untouched

Each pair shares one algorithm: the mutative form validates, computes the
new table with the non-mutative form, then swaps it in. Nothing is
mutated if validation or computation raises.

Example:
    >>> m = Matrix([[1, 2], [3, 4]])
    >>> m.determinant()
    -2
    >>> m.exponentiated(2).to_array()
    [[7, 10], [15, 22]]
"""

from __future__ import annotations

import numbers
import operator
from typing import Any, Callable, Iterator

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.cache import VersionedCache, cached
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.flags import INVERTIBLE, REFLECT, SAME, SQUARE
from pymatrix.core.tolerances import select_tolerance
from pymatrix.core.validation import (
    check_dimensions,
    check_index,
    check_nonzero,
    check_power,
    check_scalar,
    check_size,
    check_storable,
    check_table,
)
from pymatrix.dense import _combine, _laplace, _render
from pymatrix.dense._transform import (
    CellFunc,
    build_table,
    map_cells,
    negate_cell,
    scalar_cell,
)


class Matrix:
    """
    Dense matrix of real numbers.

    Construction:
        Matrix([[1, 2], [3, 4]])          # rows of cells
        Matrix(other_matrix)              # copy
        Matrix({'a': {'x': 1, 'y': 2}})   # mappings, read in iteration order
        Matrix.create(3, 2, fill=7)       # 2 rows of 3 sevens
        Matrix.identity(3)
        Matrix.random(4)

    Every row must have as many cells as the first one; ragged input raises
    ValidationError. Cells read back as Python ints or floats.
    """

    __hash__ = None

    # Keep numpy scalars from broadcasting over rows; defer to the
    # reflected operators instead.
    __array_ufunc__ = None

    def __init__(self, rows: Any = ()):
        self._cache = VersionedCache()
        self._table = self._coerce(rows)

    @classmethod
    def _from_table(cls, table: NDArray[Any]) -> Matrix:
        """Wrap an already validated table without copying it."""
        matrix = cls.__new__(cls)
        matrix._cache = VersionedCache()
        matrix._table = table
        return matrix

    @staticmethod
    def _coerce(rows: Any) -> NDArray[Any]:
        if isinstance(rows, Matrix):
            return rows._table.copy()
        return check_table(rows, 'rows')

    def _replace(self, table: NDArray[Any]) -> Matrix:
        """Swap in a new table. Every mutation funnels through here or set()."""
        self._cache.invalidate()
        self._table = table
        return self

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, width: int, height: int | None = None, fill: int | float = 0) -> Matrix:
        """Matrix of the given shape with every cell equal to fill."""
        width = check_size(width, 'width')
        height = width if height is None else check_size(height, 'height')
        fill = check_scalar(fill, 'fill')
        dtype = check_storable(fill, np.dtype(np.int64), 'fill')
        return cls._from_table(np.full((height, width), fill, dtype=dtype))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Square matrix with 1 on the main diagonal and 0 elsewhere."""
        size = check_size(size, 'size')
        return cls._from_table(np.eye(size, dtype=np.int64))

    @classmethod
    def random(
        cls,
        size: int,
        *,
        rng: np.random.Generator | None = None,
        low: int = -9,
        high: int = 9,
    ) -> Matrix:
        """Square matrix of random integers in [low, high]."""
        size = check_size(size, 'size')
        if rng is None:
            rng = np.random.default_rng()
        return cls._from_table(rng.integers(low, high, size=(size, size), endpoint=True))

    # ------------------------------------------------------------------
    # Dense table
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._table.shape[1]

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._table.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width), numpy order."""
        return self._table.shape

    @property
    def dtype(self) -> np.dtype:
        return self._table.dtype

    def get(self, x: int, y: int) -> int | float:
        """Cell at column x, row y."""
        x = check_index(x, self.width, 'x', 'x')
        y = check_index(y, self.height, 'y', 'y')
        return self._table[y, x].item()

    def set(self, x: int, y: int, value: int | float) -> None:
        """
        Set the cell at column x, row y. Mutative.

        A float, or an integer outside the range of an integer table,
        promotes the table to float64.
        """
        x = check_index(x, self.width, 'x', 'x')
        y = check_index(y, self.height, 'y', 'y')
        value = check_scalar(value, 'value')
        dtype = check_storable(value, self._table.dtype, 'value')
        if dtype == self._table.dtype:
            table = self._table
        else:
            table = self._table.astype(dtype)
        table[y, x] = value
        self._replace(table)

    def set_data(self, rows: Any = ()) -> Matrix:
        """Replace the whole table, recomputing width and height. Mutative."""
        return self._replace(self._coerce(rows))

    def get_data(self) -> NDArray[Any]:
        """Copy of the backing table."""
        return self._table.copy()

    def get_row(self, y: int) -> list[Any]:
        y = check_index(y, self.height, 'y', 'y')
        return self._table[y].tolist()

    def get_column(self, x: int) -> list[Any]:
        x = check_index(x, self.width, 'x', 'x')
        return self._table[:, x].tolist()

    def get_diagonal(self) -> list[Any]:
        """Cells where x == y, from the top-left corner."""
        return np.diagonal(self._table).tolist()

    def get_antidiagonal(self) -> list[Any]:
        """Cells from the top-right corner down and to the left."""
        return np.diagonal(np.fliplr(self._table)).tolist()

    def to_array(self) -> list[list[Any]]:
        """Row-major nested lists of Python scalars."""
        return self._table.tolist()

    def to_json(self) -> str:
        return _render.to_json(self.to_array())

    def copy(self) -> Matrix:
        """Deep copy; the clone never shares storage with the original."""
        return Matrix._from_table(self._table.copy())

    clone = copy

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def __iter__(self) -> Iterator[list[Any]]:
        return iter(self._table.tolist())

    def __len__(self) -> int:
        return self.height

    def __str__(self) -> str:
        return _render.render_table(self.to_array())

    def __repr__(self) -> str:
        return f"Matrix({self.to_array()!r})"

    # ------------------------------------------------------------------
    # Element-wise transforms
    # ------------------------------------------------------------------

    def map(self, func: CellFunc) -> Matrix:
        """New matrix with func(value, x, y) in every cell."""
        cells = map_cells(self._table, func)
        return Matrix._from_table(build_table(cells, self.shape, 'map'))

    def apply(self, func: CellFunc) -> Matrix:
        """Replace every cell with func(value, x, y). Mutative."""
        return self._replace(self.map(func)._table)

    def get_negative(self) -> Matrix:
        return self.map(negate_cell)

    # ------------------------------------------------------------------
    # Matrix combination
    # ------------------------------------------------------------------

    def map_matrix(self, other: Matrix, func: Callable[..., Any], flags: int = SAME) -> Matrix:
        """
        New matrix combining this matrix with other.

        With REFLECT in flags, cells are accumulated row-times-column:
        result[x, y] = sum over z of func(self[z, y], other[x, z], x, y, z),
        giving a self.height x other.width result.

        Otherwise cells are combined pairwise, func(self[x, y], other[x, y], x, y),
        and the two matrices must have the same shape whatever flags says.

        Args:
            other: The second operand
            func: Combination function
            flags: Bitwise OR of pymatrix.core.flags constants

        Raises:
            ValidationError: If other is not a Matrix
            DimensionError: If the shapes fail the requested checks
            SingularMatrixError: If INVERTIBLE is requested and other is singular
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected a Matrix, got {type(other).__name__}"
            )
        check_dimensions(self, other, flags)

        if flags & REFLECT:
            cells = _combine.combine_dot(self._table, other._table, func)
            shape = (self.height, other.width)
        else:
            check_dimensions(self, other, SAME)
            cells = _combine.combine_cells(self._table, other._table, func)
            shape = self.shape
        return Matrix._from_table(build_table(cells, shape, 'map_matrix'))

    def apply_matrix(self, other: Matrix, func: Callable[..., Any], flags: int = SAME) -> Matrix:
        """In-place form of map_matrix(). Mutative."""
        return self._replace(self.map_matrix(other, func, flags)._table)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def added(self, operand: Matrix | int | float) -> Matrix:
        """New matrix of this plus a same-shape matrix or a scalar."""
        if isinstance(operand, Matrix):
            return self.map_matrix(operand, _combine.cell_sum)
        scalar = check_scalar(operand, 'operand')
        return self.map(scalar_cell(operator.add, scalar))

    def add(self, operand: Matrix | int | float) -> Matrix:
        """Mutative."""
        return self._replace(self.added(operand)._table)

    def subtracted(self, operand: Matrix | int | float) -> Matrix:
        """New matrix of this minus a same-shape matrix or a scalar."""
        if isinstance(operand, Matrix):
            return self.map_matrix(operand, _combine.cell_difference)
        scalar = check_scalar(operand, 'operand')
        return self.map(scalar_cell(operator.sub, scalar))

    def subtract(self, operand: Matrix | int | float) -> Matrix:
        """Mutative."""
        return self._replace(self.subtracted(operand)._table)

    def multiplied(self, operand: Matrix | int | float) -> Matrix:
        """
        New matrix of this times a scalar, or the matrix product with operand.

        The matrix product requires operand's rows to match this matrix's
        columns and operand's columns to match this matrix's rows.
        """
        if isinstance(operand, Matrix):
            return self.map_matrix(operand, _combine.cell_product, REFLECT)
        scalar = check_scalar(operand, 'operand')
        return self.map(scalar_cell(operator.mul, scalar))

    def multiply(self, operand: Matrix | int | float) -> Matrix:
        """Mutative."""
        return self._replace(self.multiplied(operand)._table)

    def divided(self, operand: Matrix | int | float) -> Matrix:
        """
        New matrix of this divided by a scalar or by a matrix.

        Dividing by a matrix multiplies by its inverse; operand must be square
        and invertible and is left unchanged.

        Raises:
            DivisionByZeroError: If operand is the scalar 0
            DimensionError: If operand is a non-square matrix
            SingularMatrixError: If operand is a singular matrix
        """
        if isinstance(operand, Matrix):
            check_dimensions(self, operand, SQUARE | INVERTIBLE)
            return self.multiplied(operand.get_inverse())
        scalar = check_scalar(operand, 'operand')
        check_nonzero(scalar, 'operand')
        return self.map(scalar_cell(operator.truediv, scalar))

    def divide(self, operand: Matrix | int | float) -> Matrix:
        """Mutative."""
        return self._replace(self.divided(operand)._table)

    def exponentiated(self, power: int) -> Matrix:
        """New matrix of this multiplied by itself power - 1 times."""
        power = check_power(power)
        result = self.copy()
        for _ in range(power - 1):
            result.multiply(self)
        return result

    def exponential(self, power: int) -> Matrix:
        """Mutative."""
        return self._replace(self.exponentiated(power)._table)

    pow = exponential

    # ------------------------------------------------------------------
    # Transpose
    # ------------------------------------------------------------------

    def get_transpose(self) -> Matrix:
        """New matrix flipped along the main diagonal, width and height swapped."""
        table = self._table
        return Matrix.create(self.height, self.width).map(
            lambda value, x, y: table[x, y].item()
        )

    transposed = get_transpose

    def transpose(self) -> Matrix:
        """Mutative."""
        return self._replace(self.get_transpose()._table)

    # ------------------------------------------------------------------
    # Determinant / cofactors / adjugate / inverse
    # ------------------------------------------------------------------

    @cached
    def determinant(self) -> int | float:
        """
        Determinant by Laplace expansion along the first row.

        Raises:
            DimensionError: If the matrix is not square
        """
        check_dimensions(self, self, SQUARE)
        _laplace.warn_expansion_cost(self.height, stacklevel=4)
        return _laplace.determinant(self._table)

    def get_minors(self, column: int, row: int = 0) -> Matrix:
        """New matrix without the given column and row."""
        column = check_index(column, self.width, 'x', 'column')
        row = check_index(row, self.height, 'y', 'row')
        return Matrix._from_table(_laplace.minor(self._table, column, row))

    def get_cofactors(self) -> Matrix:
        """Same-shape matrix of signed minor determinants."""
        check_dimensions(self, self, SQUARE)
        _laplace.warn_expansion_cost(self.height - 1)
        table = self._table
        return self.map(lambda value, x, y: _laplace.cofactor(table, x, y))

    def get_adjugate(self) -> Matrix:
        """Transpose of the cofactor matrix."""
        return self.get_cofactors().transpose()

    get_adjoint = get_adjugate

    def get_inverse(self) -> Matrix:
        """
        New matrix holding the inverse, adjugate / determinant.

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the determinant is zero
        """
        check_dimensions(self, self, SQUARE | INVERTIBLE)
        if self.height == 1:
            return Matrix([[1 / self.get(0, 0)]])
        return self.get_adjugate().divide(self.determinant())

    inverted = get_inverse
    inversed = get_inverse

    def inverse(self) -> Matrix:
        """Mutative."""
        return self._replace(self.get_inverse()._table)

    invert = inverse

    # ------------------------------------------------------------------
    # Structural predicates
    # ------------------------------------------------------------------

    def is_square(self) -> bool:
        return self.width == self.height

    @cached
    def is_upper_triangular(self) -> bool:
        """Square with only zeros below the main diagonal."""
        if not self.is_square():
            return False
        return not np.any(np.tril(self._table, k=-1))

    @cached
    def is_lower_triangular(self) -> bool:
        """Square with only zeros above the main diagonal."""
        if not self.is_square():
            return False
        return not np.any(np.triu(self._table, k=1))

    def is_triangular(self) -> bool:
        return self.is_upper_triangular() or self.is_lower_triangular()

    def is_diagonal(self) -> bool:
        return self.is_upper_triangular() and self.is_lower_triangular()

    @cached
    def is_invertible(self) -> bool:
        """Non-zero determinant. Raises DimensionError if not square."""
        return self.determinant() != 0

    @cached
    def is_symmetric(self) -> bool:
        return self.is_square() and self.equals(self.get_transpose())

    @cached
    def is_skew_symmetric(self) -> bool:
        return self.is_square() and self.get_negative().equals(self.get_transpose())

    def trace(self) -> int | float:
        """Sum of the main diagonal. Raises DimensionError if not square."""
        check_dimensions(self, self, SQUARE)
        return sum(self.get_diagonal())

    def equals(self, other: Matrix) -> bool:
        """Same shape and equal cell values (1 == 1.0)."""
        if not isinstance(other, Matrix):
            return False
        return self.shape == other.shape and bool(np.array_equal(self._table, other._table))

    def isclose(self, other: Matrix, rtol: float | None = None, atol: float | None = None) -> bool:
        """
        Same shape and cells equal within tolerance.

        Tolerances default to the tier selected for the two tables' dtypes:
        exact for integer tables, DEFAULT_RTOL/DEFAULT_ATOL otherwise.
        """
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        tier = select_tolerance(self.dtype, other.dtype)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        return bool(np.allclose(self._table, other._table, rtol=rtol, atol=atol))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __neg__(self) -> Matrix:
        return self.get_negative()

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.added(other)

    __radd__ = __add__

    def __iadd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtracted(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.get_negative().added(other)

    def __isub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiplied(other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiplied(other)

    def __imul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiplied(other)

    def __imatmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.divided(other)

    def __itruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, power):
        return self.exponentiated(power)

    def __ipow__(self, power):
        return self.exponential(power)


def _is_operand(value: Any) -> bool:
    """Matrix or real scalar: the operands arithmetic dispatches on."""
    if isinstance(value, Matrix):
        return True
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))

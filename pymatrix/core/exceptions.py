"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. The concrete classes also inherit from the matching
builtin (ValueError, IndexError, ZeroDivisionError) so generic handlers keep
working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Raised before the receiver is mutated
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError, ValueError):
    """
    Input validation failed.

    Raised for malformed construction input (ragged rows, non-numeric
    cells), non-numeric operands and invalid exponents.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix shape is wrong for the requested operation.

    Raised when an operation needs a square matrix, two matrices of the same
    shape, or a multiplication-conformable pair and does not get one.

    Attributes:
        expected: Expected (height, width), if a single shape applies
        actual: Actual (height, width) of the offending matrix
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, int] | None = None,
        actual: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class OutOfRangeError(ValidationError, IndexError):
    """
    Coordinate outside the matrix.

    Attributes:
        axis: 'x' (column) or 'y' (row)
        index: The requested index
        size: Number of columns or rows along that axis
    """

    def __init__(
        self,
        message: str,
        axis: str | None = None,
        index: int | None = None,
        size: int | None = None,
    ):
        super().__init__(message)
        self.axis = axis
        self.index = index
        self.size = size


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from the values of a matrix rather than
    its shape.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix has a zero determinant.

    Raised when inversion or division by a matrix is attempted on a
    singular matrix.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was found, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """Scalar division by zero."""
    pass

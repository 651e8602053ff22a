"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_table: conversion, strict row lengths, dtype rejection, mappings
    - check_index: integer indices inside [0, size)
    - check_scalar / check_nonzero / check_power: operand checks
    - check_size / check_storable: factory sizes and cell writes
    - check_dimensions: SQUARE, SAME, REFLECT, INVERTIBLE and combinations
"""

from collections import OrderedDict

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import (
    DimensionError,
    DivisionByZeroError,
    OutOfRangeError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.flags import INVERTIBLE, NONE, REFLECT, SAME, SQUARE
from pymatrix.core.validation import (
    check_dimensions,
    check_index,
    check_nonzero,
    check_numeric_dtype,
    check_power,
    check_scalar,
    check_size,
    check_storable,
    check_table,
)


# ═══════════════════════════════════════════════════════════════════════
# check_table
# ═══════════════════════════════════════════════════════════════════════


class TestCheckTable:
    """check_table converts rows to a 2D numeric ndarray."""

    def test_nested_list(self):
        result = check_table([[1, 2, 3], [4, 5, 6]])
        assert isinstance(result, np.ndarray)
        assert result.shape == (2, 3)
        np.testing.assert_array_equal(result, [[1, 2, 3], [4, 5, 6]])

    def test_integers_stay_integer(self):
        result = check_table([[1, 2], [3, 4]])
        assert np.issubdtype(result.dtype, np.integer)

    def test_mixed_int_float_becomes_float(self):
        result = check_table([[1, 2.5], [3, 4]])
        assert np.issubdtype(result.dtype, np.floating)

    def test_tuples_and_generators(self):
        result = check_table((range(3), (4, 5, 6)))
        np.testing.assert_array_equal(result, [[0, 1, 2], [4, 5, 6]])

    def test_empty_gives_0x0(self):
        assert check_table([]).shape == (0, 0)

    def test_rows_without_columns(self):
        assert check_table([[], []]).shape == (2, 0)

    def test_mapping_rows_read_in_order(self):
        rows = OrderedDict([
            ('b', OrderedDict([('z', 1), ('a', 2)])),
            ('a', OrderedDict([('z', 3), ('a', 4)])),
        ])
        np.testing.assert_array_equal(check_table(rows), [[1, 2], [3, 4]])

    def test_ndarray_is_copied(self):
        source = np.array([[1, 2], [3, 4]])
        result = check_table(source)
        result[0, 0] = 99
        assert source[0, 0] == 1

    def test_list_input_not_aliased(self):
        source = [[1, 2], [3, 4]]
        result = check_table(source)
        source[0][0] = 99
        assert result[0, 0] == 1

    def test_rejects_ragged_rows(self):
        with pytest.raises(ValidationError, match="row 1 has 1 columns but 2 was expected"):
            check_table([[1, 2], [3]])

    def test_rejects_empty_row_after_full_row(self):
        with pytest.raises(ValidationError, match="row 2 has 0 columns"):
            check_table([[1, 2], [3, 4], []])

    def test_rejects_nonempty_row_after_empty_row(self):
        with pytest.raises(ValidationError, match="row 1 has 2 columns but 0 was expected"):
            check_table([[], [1, 2]])

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_table([["a", "b"], ["c", "d"]])

    def test_rejects_none_cells(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_table([[1, None], [3, 4]])

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_table([[1 + 2j, 0], [0, 1]])

    def test_rejects_booleans(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_table([[True, False], [False, True]])

    def test_rejects_scalar_rows(self):
        with pytest.raises(ValidationError, match="row 0 is not iterable"):
            check_table([1, 2, 3])

    def test_rejects_string_input(self):
        with pytest.raises(ValidationError, match="expected an iterable of rows"):
            check_table("1234")

    def test_rejects_nested_cells(self):
        with pytest.raises(ValidationError):
            check_table([[[1], [2]], [[3], [4]]])

    def test_rejects_1d_ndarray(self):
        with pytest.raises(ValidationError, match="expected 2D array"):
            check_table(np.array([1, 2, 3]))

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_rows"):
            check_table([[1], [2, 3]], "my_rows")

    def test_integers_wider_than_int64_become_float(self):
        result = check_table([[2 ** 70, 1], [1, 1]])
        assert result.dtype == np.float64
        assert result[0, 0] == 2.0 ** 70

    def test_wide_negative_integers_become_float(self):
        result = check_table([[-(2 ** 63) - 1, 0], [0, 2 ** 64]])
        assert result.dtype == np.float64
        assert result[1, 1] == 2.0 ** 64

    def test_rejects_integers_beyond_float_range(self):
        with pytest.raises(ValidationError, match="float64 range"):
            check_table([[2 ** 1100]])

    def test_wide_integers_with_none_still_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_table([[2 ** 70, None]])


class TestCheckNumericDtype:

    def test_int_passes(self):
        check_numeric_dtype(np.array([[1, 2]]), "X")

    def test_float_passes(self):
        check_numeric_dtype(np.array([[1.0, 2.0]]), "X")

    def test_object_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_numeric_dtype(np.array([[1, "a"]], dtype=object), "X")


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_valid_index_returned(self):
        assert check_index(2, 3, 'x', 'x') == 2

    def test_numpy_integer_accepted(self):
        result = check_index(np.int64(1), 3, 'y', 'y')
        assert result == 1
        assert type(result) is int

    def test_index_equal_to_size_rejected(self):
        with pytest.raises(OutOfRangeError, match="x index 3 on matrix with 3 columns") as exc_info:
            check_index(3, 3, 'x', 'x')
        assert exc_info.value.axis == 'x'
        assert exc_info.value.index == 3
        assert exc_info.value.size == 3

    def test_row_message(self):
        with pytest.raises(OutOfRangeError, match="y index 5 on matrix with 2 rows"):
            check_index(5, 2, 'y', 'y')

    def test_negative_rejected(self):
        with pytest.raises(OutOfRangeError):
            check_index(-1, 3, 'x', 'x')

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="integer index"):
            check_index(1.0, 3, 'x', 'x')

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_index(True, 3, 'x', 'x')


# ═══════════════════════════════════════════════════════════════════════
# check_scalar / check_nonzero / check_power
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:

    @pytest.mark.parametrize("value", [0, 3, -2.5, 1e300])
    def test_real_numbers_pass(self, value):
        assert check_scalar(value, "v") == value

    def test_numpy_scalar_unwrapped(self):
        result = check_scalar(np.float64(2.5), "v")
        assert type(result) is float

    @pytest.mark.parametrize("value", ["1", None, [1], 1j, True])
    def test_non_real_rejected(self, value):
        with pytest.raises(ValidationError, match="expected a real number"):
            check_scalar(value, "v")


class TestCheckNonzero:

    def test_nonzero_passes(self):
        check_nonzero(0.5, "d")

    @pytest.mark.parametrize("value", [0, 0.0, -0.0])
    def test_zero_rejected(self, value):
        with pytest.raises(DivisionByZeroError, match="division by zero"):
            check_nonzero(value, "d")


class TestCheckPower:

    @pytest.mark.parametrize("power", [1, 2, 10, np.int32(3)])
    def test_positive_integers_pass(self, power):
        assert check_power(power) == int(power)

    @pytest.mark.parametrize("power", [0, -1])
    def test_non_positive_rejected(self, power):
        with pytest.raises(ValidationError, match=">= 1"):
            check_power(power)

    @pytest.mark.parametrize("power", [2.0, 1.5, "2", None])
    def test_non_integer_rejected(self, power):
        with pytest.raises(ValidationError, match="must be an integer"):
            check_power(power)


class TestCheckSize:

    @pytest.mark.parametrize("value", [0, 3, np.int64(5)])
    def test_non_negative_integers_pass(self, value):
        assert check_size(value, "width") == int(value)

    @pytest.mark.parametrize("value", [-1, 2.5, "3", None, True])
    def test_invalid_rejected(self, value):
        with pytest.raises(ValidationError, match="width: expected a non-negative integer"):
            check_size(value, "width")


class TestCheckStorable:

    def test_integer_in_range_keeps_dtype(self):
        assert check_storable(-43, np.dtype(np.int64), "value") == np.int64

    def test_float_into_integer_table(self):
        assert check_storable(0.5, np.dtype(np.int64), "value") == np.float64

    def test_integer_beyond_int64(self):
        assert check_storable(2 ** 70, np.dtype(np.int64), "value") == np.float64

    def test_negative_into_unsigned(self):
        assert check_storable(-1, np.dtype(np.uint64), "value") == np.float64

    def test_float_table_keeps_dtype(self):
        assert check_storable(2 ** 70, np.dtype(np.float64), "value") == np.float64

    def test_beyond_float_range(self):
        with pytest.raises(ValidationError, match="exceeds the float64 range"):
            check_storable(2 ** 1100, np.dtype(np.int64), "value")


# ═══════════════════════════════════════════════════════════════════════
# check_dimensions
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimensions:

    def test_none_flag_checks_nothing(self, rect2x3):
        check_dimensions(rect2x3, Matrix.create(5, 1), NONE)

    def test_square_passes(self, square3):
        check_dimensions(square3, square3, SQUARE)

    def test_square_fails(self, rect2x3):
        with pytest.raises(DimensionError, match="must be square") as exc_info:
            check_dimensions(rect2x3, rect2x3, SQUARE)
        assert exc_info.value.actual == (2, 3)

    def test_square_checks_target_not_reference(self, rect2x3, square3):
        check_dimensions(rect2x3, square3, SQUARE)

    def test_same_passes(self, rect2x3):
        check_dimensions(rect2x3, Matrix.create(3, 2), SAME)

    def test_same_fails(self, rect2x3):
        with pytest.raises(DimensionError, match="same dimensions") as exc_info:
            check_dimensions(rect2x3, Matrix.create(2, 3), SAME)
        assert exc_info.value.expected == (2, 3)
        assert exc_info.value.actual == (3, 2)

    def test_reflect_passes(self, rect2x3):
        check_dimensions(rect2x3, Matrix.create(2, 3), REFLECT)

    def test_reflect_fails(self, rect2x3):
        with pytest.raises(DimensionError, match="column count must match row count"):
            check_dimensions(rect2x3, Matrix.create(3, 2), REFLECT)

    def test_reflect_requires_both_dimensions(self, rect2x3):
        """Rows of target match columns of reference, but target is 3x4."""
        with pytest.raises(DimensionError):
            check_dimensions(rect2x3, Matrix.create(4, 3), REFLECT)

    def test_invertible_passes(self, square3):
        check_dimensions(square3, square3, INVERTIBLE)

    def test_invertible_fails(self, singular):
        with pytest.raises(SingularMatrixError, match="non-zero determinant") as exc_info:
            check_dimensions(singular, singular, INVERTIBLE)
        assert exc_info.value.determinant == 0

    def test_combined_flags_all_checked(self, singular):
        with pytest.raises(SingularMatrixError):
            check_dimensions(singular, singular, SQUARE | INVERTIBLE)

    def test_first_failure_wins(self, rect2x3):
        """SQUARE fails before INVERTIBLE would raise its own shape error."""
        with pytest.raises(DimensionError, match="must be square"):
            check_dimensions(rect2x3, rect2x3, SQUARE | INVERTIBLE)

    def test_unknown_bits_rejected(self, square3):
        with pytest.raises(ValidationError, match="unknown dimension flags"):
            check_dimensions(square3, square3, 64)

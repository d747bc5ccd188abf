"""
Tests for contract checks.

Validates every function in core/validation.py against objects that only
expose what the checks rely on, plus real matrices where a method is used.
"""

from types import SimpleNamespace

import numpy as np
import pytest

from pydense.core.exceptions import (
    DimensionError,
    MatrixIndexError,
    ValidationError,
)
from pydense.core.validation import (
    check_column_vector,
    check_dimensions,
    check_index,
    check_inner_dimensions,
    check_length,
    check_lower_triangular,
    check_max_iter,
    check_rows_available,
    check_same_shape,
    check_square,
    check_tall,
    check_unique,
    check_upper_triangular,
)
from pydense.matrix import Matrix


def shaped(m, n):
    return SimpleNamespace(shape=(m, n))


# ═══════════════════════════════════════════════════════════════════════
# Indices and dimensions
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    @pytest.mark.parametrize("row,col", [(1, 1), (3, 2), (2, 1)])
    def test_inside(self, row, col):
        check_index(row, col, (3, 2))

    @pytest.mark.parametrize("row,col", [(0, 1), (1, 0), (4, 1), (1, 3), (-1, 1)])
    def test_outside(self, row, col):
        with pytest.raises(MatrixIndexError, match="1-based"):
            check_index(row, col, (3, 2))

    def test_carries_index_and_shape(self):
        with pytest.raises(MatrixIndexError) as exc_info:
            check_index(5, 1, (3, 2))
        assert exc_info.value.index == (5, 1)
        assert exc_info.value.shape == (3, 2)


class TestCheckDimensions:

    def test_positive(self):
        check_dimensions(1, 5)

    def test_numpy_ints_accepted(self):
        check_dimensions(np.int64(2), np.int32(3))

    def test_zero_rejected(self):
        with pytest.raises(DimensionError, match="nrows"):
            check_dimensions(0, 3)

    def test_float_rejected(self):
        with pytest.raises(DimensionError, match="ncols"):
            check_dimensions(2, 2.0)

    def test_bool_rejected(self):
        with pytest.raises(DimensionError):
            check_dimensions(True, 2)


# ═══════════════════════════════════════════════════════════════════════
# Shapes
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_square(self):
        check_square(shaped(3, 3), "A")
        with pytest.raises(DimensionError, match="A: expected square matrix, got 3x2"):
            check_square(shaped(3, 2), "A")

    def test_same_shape(self):
        check_same_shape(shaped(2, 3), shaped(2, 3), ("A", "B"))
        with pytest.raises(DimensionError, match="A is 2x3, B is 3x2"):
            check_same_shape(shaped(2, 3), shaped(3, 2), ("A", "B"))

    def test_inner_dimensions(self):
        check_inner_dimensions(shaped(2, 3), shaped(3, 4))
        with pytest.raises(DimensionError, match="2x3 @ 2x4"):
            check_inner_dimensions(shaped(2, 3), shaped(2, 4))

    def test_column_vector(self):
        check_column_vector(shaped(4, 1), "v")
        with pytest.raises(DimensionError, match="v: expected column vector"):
            check_column_vector(shaped(4, 2), "v")

    def test_length(self):
        check_length(shaped(4, 1), 4, "b")
        with pytest.raises(DimensionError, match="b: expected 4 rows, got 3"):
            check_length(shaped(3, 1), 4, "b")

    def test_tall(self):
        check_tall(shaped(4, 4), "A")
        check_tall(shaped(5, 4), "A")
        with pytest.raises(DimensionError, match="nrows >= ncols"):
            check_tall(shaped(3, 4), "A")

    def test_rows_available(self):
        check_rows_available(shaped(4, 2), 4, "top_n_rows")
        with pytest.raises(DimensionError, match="first 5"):
            check_rows_available(shaped(4, 2), 5, "top_n_rows")
        with pytest.raises(DimensionError):
            check_rows_available(shaped(4, 2), 0, "top_n_rows")


# ═══════════════════════════════════════════════════════════════════════
# Structure
# ═══════════════════════════════════════════════════════════════════════


class TestTriangularChecks:

    def test_upper(self):
        check_upper_triangular(Matrix.from_rows([[1, 2], [0, 3]]), "A")
        with pytest.raises(ValidationError, match="upper-triangular"):
            check_upper_triangular(Matrix.from_rows([[1, 2], [1e-300, 3]]), "A")

    def test_lower(self):
        check_lower_triangular(Matrix.from_rows([[1, 0], [2, 3]]), "L")
        with pytest.raises(ValidationError, match="lower-triangular"):
            check_lower_triangular(Matrix.from_rows([[1, 2], [0, 3]]), "L")


class TestCheckUnique:

    def test_unique(self):
        check_unique([-2.0, 0.0, 1.0, 2.0], "xs")

    def test_repeat(self):
        with pytest.raises(ValidationError, match="xs: values must be unique"):
            check_unique([1.0, 2.0, 1.0], "xs")


class TestCheckMaxIter:

    def test_none_is_unbounded(self):
        check_max_iter(None)

    def test_positive(self):
        check_max_iter(1)

    @pytest.mark.parametrize("bad", [0, -3, 2.5, True])
    def test_rejected(self, bad):
        with pytest.raises(ValidationError, match="max_iter"):
            check_max_iter(bad)

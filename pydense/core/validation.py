"""
Contract checks for PyDense operations.

These validators follow the "fail fast, fail loud" principle. A failed
check is a bug at the call site, so they raise immediately with the actual
and expected values rather than coercing anything.

Design principles:
    - Operate on anything exposing a ``shape`` tuple, so the checks do not
      depend on the Matrix class
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from numbers import Integral
from typing import Any, Sequence

from pydense.core.exceptions import (
    DimensionError,
    MatrixIndexError,
    ValidationError,
)


def check_index(row: int, col: int, shape: tuple[int, int]) -> None:
    """
    Verify a 1-based (row, col) index lies inside a matrix.

    Args:
        row: 1-based row index
        col: 1-based column index
        shape: (nrows, ncols) of the matrix

    Raises:
        MatrixIndexError: If 1 <= row <= nrows and 1 <= col <= ncols fails
    """
    m, n = shape
    if not (1 <= row <= m and 1 <= col <= n):
        raise MatrixIndexError(
            f"index ({row}, {col}) out of range for {m}x{n} matrix "
            f"(indices are 1-based)",
            index=(row, col),
            shape=shape,
        )


def check_dimensions(nrows: int, ncols: int) -> None:
    """
    Verify requested matrix dimensions are positive integers.

    Raises:
        DimensionError: If either dimension is not a positive int
    """
    for name, value in (("nrows", nrows), ("ncols", ncols)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise DimensionError(f"{name}: expected int, got {type(value).__name__}")
        if value < 1:
            raise DimensionError(f"{name}: must be >= 1, got {value}")


def check_square(A: Any, name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If nrows != ncols
    """
    m, n = A.shape
    if m != n:
        raise DimensionError(f"{name}: expected square matrix, got {m}x{n}")


def check_same_shape(A: Any, B: Any, names: tuple[str, str]) -> None:
    """
    Verify two matrices have identical shape.

    Raises:
        DimensionError: If shapes differ
    """
    if A.shape != B.shape:
        raise DimensionError(
            f"Shape mismatch: {names[0]} is {A.shape[0]}x{A.shape[1]}, "
            f"{names[1]} is {B.shape[0]}x{B.shape[1]}"
        )


def check_inner_dimensions(A: Any, B: Any) -> None:
    """
    Verify (M x P) @ (P x N) is well formed.

    Raises:
        DimensionError: If A.ncols != B.nrows
    """
    if A.shape[1] != B.shape[0]:
        raise DimensionError(
            f"Inner dimensions do not match: "
            f"{A.shape[0]}x{A.shape[1]} @ {B.shape[0]}x{B.shape[1]}"
        )


def check_column_vector(v: Any, name: str) -> None:
    """
    Verify a matrix is a column vector (exactly one column).

    Raises:
        DimensionError: If ncols != 1
    """
    m, n = v.shape
    if n != 1:
        raise DimensionError(f"{name}: expected column vector, got {m}x{n}")


def check_length(v: Any, length: int, name: str) -> None:
    """
    Verify a column vector has the given number of rows.

    Raises:
        DimensionError: If nrows != length
    """
    if v.shape[0] != length:
        raise DimensionError(
            f"{name}: expected {length} rows, got {v.shape[0]}"
        )


def check_tall(A: Any, name: str) -> None:
    """
    Verify a matrix has at least as many rows as columns.

    Raises:
        DimensionError: If nrows < ncols
    """
    m, n = A.shape
    if m < n:
        raise DimensionError(
            f"{name}: requires nrows >= ncols, got {m}x{n}"
        )


def check_rows_available(A: Any, rows: int, name: str) -> None:
    """
    Verify a matrix has at least ``rows`` rows to take.

    Raises:
        DimensionError: If rows < 1 or rows > nrows
    """
    m = A.shape[0]
    if rows < 1 or rows > m:
        raise DimensionError(
            f"{name}: not enough rows in matrix to take first {rows} "
            f"(matrix has {m})"
        )


def check_upper_triangular(A: Any, name: str) -> None:
    """
    Verify every entry below the diagonal is exactly zero.

    Raises:
        ValidationError: If A is not upper-triangular
    """
    if not A.is_upper_triangular():
        raise ValidationError(f"{name}: needs to be upper-triangular:\n{A}")


def check_lower_triangular(A: Any, name: str) -> None:
    """
    Verify every entry above the diagonal is exactly zero.

    Raises:
        ValidationError: If A is not lower-triangular
    """
    if not A.is_lower_triangular():
        raise ValidationError(f"{name}: needs to be lower-triangular:\n{A}")


def check_unique(values: Sequence[float], name: str) -> None:
    """
    Verify no value repeats.

    Raises:
        ValidationError: If any two values are equal
    """
    seen = set()
    for value in values:
        if value in seen:
            raise ValidationError(
                f"{name}: values must be unique, {value} appears more than once"
            )
        seen.add(value)


def check_max_iter(max_iter: int | None, name: str = "max_iter") -> None:
    """
    Verify an iteration cap is None (unbounded) or a positive int.

    Raises:
        ValidationError: If max_iter is not None and not >= 1
    """
    if max_iter is None:
        return
    if isinstance(max_iter, bool) or not isinstance(max_iter, Integral) or max_iter < 1:
        raise ValidationError(f"{name}: must be a positive int or None, got {max_iter!r}")

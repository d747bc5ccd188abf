"""
Dense matrix container.

Matrix wraps a column-major (Fortran-ordered) float64 numpy array whose
shape is fixed at construction. Indexing is 1-based to stay in line with
the notation of common maths texts; column-major storage keeps the
column-wise work of projections and reflections contiguous.

Dimensions are runtime fields, so every binary operation checks them and
raises DimensionError on a mismatch instead of broadcasting. Numerical
equality is only ever tested through ``eq(other, abs_tol)``; Python's
``==`` keeps its identity semantics.

Column vectors are plain Matrix instances with one column. They accept a
single index ``v[i]`` and the vector methods (``dot``, ``project``,
``l2_normalize`` ...) which raise DimensionError on anything wider.
"""

from __future__ import annotations

import operator
from numbers import Real
from typing import Any, Callable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.exceptions import DimensionError
from pydense.core.validation import (
    check_column_vector,
    check_dimensions,
    check_index,
    check_inner_dimensions,
    check_rows_available,
    check_same_shape,
    check_square,
)

EigenEstimator = Callable[['Matrix'], Any]


class Matrix:
    """
    Real-valued dense M x N matrix with 1-based indexing.

    Construction:
        Matrix(3, 2)                          # zeros
        Matrix.eye(3)                         # identity
        Matrix.rand(3, 2, rng=rng)            # uniform [0, 1) entries
        Matrix.from_rows([[1, 2], [3, 4]])    # literal data, row by row
        Matrix.from_columns([[1, 3], [2, 4]]) # literal data, column by column
        Matrix.from_fn(3, 3, lambda i, j: i + j)
    """

    __slots__ = ('_data',)

    # Make numpy defer to our reflected operators, so np.float64(2) * A
    # produces a Matrix instead of an object array.
    __array_ufunc__ = None

    def __init__(self, nrows: int, ncols: int):
        check_dimensions(nrows, ncols)
        self._data: NDArray[np.float64] = np.zeros(
            (nrows, ncols), dtype=np.float64, order='F'
        )

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def _wrap(cls, array: ArrayLike) -> Matrix:
        """Build a Matrix owning a column-major copy of a 2D array."""
        data = np.array(array, dtype=np.float64, order='F')
        if data.ndim != 2:
            raise DimensionError(
                f"expected 2D data, got {data.ndim}D with shape {data.shape}"
            )
        check_dimensions(*data.shape)
        m = cls.__new__(cls)
        m._data = data
        return m

    @classmethod
    def zeros(cls, nrows: int, ncols: int) -> Matrix:
        """Matrix of zeros."""
        return cls(nrows, ncols)

    @classmethod
    def eye(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        check_dimensions(n, n)
        return cls._wrap(np.eye(n))

    @classmethod
    def rand(
        cls,
        nrows: int,
        ncols: int,
        rng: np.random.Generator | None = None,
    ) -> Matrix:
        """
        Matrix populated with uniform random values in [0, 1).

        Args:
            nrows: Number of rows
            ncols: Number of columns
            rng: Random generator to draw from. A fresh
                 ``np.random.default_rng()`` is used when None.
        """
        check_dimensions(nrows, ncols)
        if rng is None:
            rng = np.random.default_rng()
        return cls._wrap(rng.random((nrows, ncols)))

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """Build a matrix from row-major literal data."""
        return cls._wrap(rows)

    @classmethod
    def from_columns(cls, columns: ArrayLike) -> Matrix:
        """Build a matrix from a sequence of columns."""
        data = np.asarray(columns, dtype=np.float64)
        if data.ndim != 2:
            raise DimensionError(
                f"expected a sequence of columns, got {data.ndim}D data"
            )
        return cls._wrap(data.T)

    @classmethod
    def from_numpy(cls, array: NDArray[Any]) -> Matrix:
        """Build a matrix from a 2D numpy array (copied)."""
        return cls._wrap(array)

    @classmethod
    def from_fn(
        cls,
        nrows: int,
        ncols: int,
        f: Callable[[int, int], float],
    ) -> Matrix:
        """Build a matrix whose (i, j) entry is f(i, j), indices 1-based."""
        m = cls(nrows, ncols)
        for j in range(1, ncols + 1):
            for i in range(1, nrows + 1):
                m._data[i - 1, j - 1] = f(i, j)
        return m

    def copy(self) -> Matrix:
        """Independent clone of this matrix."""
        return Matrix._wrap(self._data)

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the backing store as a (nrows, ncols) array."""
        return self._data.copy()

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def nrows(self) -> int:
        return self._data.shape[0]

    @property
    def ncols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self._data.shape[0], self._data.shape[1])

    def dimensions(self) -> tuple[int, int]:
        return self.shape

    @property
    def is_square(self) -> bool:
        return self.nrows == self.ncols

    @property
    def is_column_vector(self) -> bool:
        return self.ncols == 1

    def row_iter(self) -> range:
        """1-based row indices."""
        return range(1, self.nrows + 1)

    def col_iter(self) -> range:
        """1-based column indices."""
        return range(1, self.ncols + 1)

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    def _resolve(self, key: Any) -> tuple[int, int]:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"expected (row, col) index, got {key!r}")
            row, col = operator.index(key[0]), operator.index(key[1])
        else:
            check_column_vector(self, "single-index access")
            row, col = operator.index(key), 1
        check_index(row, col, self.shape)
        return row - 1, col - 1

    def __getitem__(self, key: Any) -> float:
        return float(self._data[self._resolve(key)])

    def __setitem__(self, key: Any, value: float) -> None:
        self._data[self._resolve(key)] = value

    def __iter__(self) -> Iterator[float]:
        """Iterate over the entries of a column vector."""
        check_column_vector(self, "iteration")
        return iter(self.as_list())

    def row(self, i: int) -> Matrix:
        """Copy of the i-th row as a 1 x N matrix."""
        check_index(i, 1, self.shape)
        return Matrix._wrap(self._data[i - 1:i, :])

    def col(self, j: int) -> Matrix:
        """Copy of the j-th column as an M x 1 column vector."""
        check_index(1, j, self.shape)
        return Matrix._wrap(self._data[:, j - 1:j])

    def set_row(self, i: int, row: Matrix) -> None:
        check_index(i, 1, self.shape)
        if row.shape != (1, self.ncols):
            raise DimensionError(
                f"row: expected 1x{self.ncols}, got {row.nrows}x{row.ncols}"
            )
        self._data[i - 1, :] = row._data[0, :]

    def set_col(self, j: int, col: Matrix) -> None:
        check_index(1, j, self.shape)
        if col.shape != (self.nrows, 1):
            raise DimensionError(
                f"col: expected {self.nrows}x1, got {col.nrows}x{col.ncols}"
            )
        self._data[:, j - 1] = col._data[:, 0]

    def swap_columns(self, a: int, b: int) -> None:
        """Swap columns a and b (1-based) in place."""
        check_index(1, a, self.shape)
        check_index(1, b, self.shape)
        self._data[:, [a - 1, b - 1]] = self._data[:, [b - 1, a - 1]]

    # ------------------------------------------------------------------
    # Transpose
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._data.T)

    def t(self) -> Matrix:
        """(alias: transpose())"""
        return self.transpose()

    def transpose_in_place(self) -> None:
        """Transpose a square matrix by swapping symmetric pairs."""
        check_square(self, "transpose_in_place")
        n = self.nrows
        for i in range(n):
            for j in range(i + 1, n):
                tmp = self._data[i, j]
                self._data[i, j] = self._data[j, i]
                self._data[j, i] = tmp

    # ------------------------------------------------------------------
    # Elementwise
    # ------------------------------------------------------------------

    def on_each(self, f: Callable[[float], float]) -> Matrix:
        """Apply a function element-wise, and create a new matrix."""
        m = self.copy()
        m.on_each_mut(f)
        return m

    def on_each_mut(self, f: Callable[[float], float]) -> None:
        """Apply a function element-wise, in place."""
        for idx, value in np.ndenumerate(self._data):
            self._data[idx] = f(float(value))

    def on_each2(self, other: Matrix, f: Callable[[float, float], float]) -> Matrix:
        """Zip up two same-dimension matrices with a function."""
        check_same_shape(self, other, ("self", "other"))
        m = Matrix(*self.shape)
        for idx, value in np.ndenumerate(self._data):
            m._data[idx] = f(float(value), float(other._data[idx]))
        return m

    def powf(self, x: float) -> None:
        """Raise each element to the exponent x, in place."""
        self._data **= x

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self, other, ("left", "right"))
        return Matrix._wrap(self._data + other._data)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self, other, ("left", "right"))
        return Matrix._wrap(self._data - other._data)

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self, other, ("left", "right"))
        self._data += other._data
        return self

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self, other, ("left", "right"))
        self._data -= other._data
        return self

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_inner_dimensions(self, other)
        return Matrix._wrap(self._data @ other._data)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        if isinstance(other, Real):
            return Matrix._wrap(self._data * float(other))
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, Real):
            return Matrix._wrap(float(other) * self._data)
        return NotImplemented

    def __imul__(self, other: Any) -> Matrix:
        if isinstance(other, Real):
            self._data *= float(other)
            return self
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix:
        if isinstance(other, Real):
            return Matrix._wrap(self._data / float(other))
        return NotImplemented

    def __itruediv__(self, other: Any) -> Matrix:
        if isinstance(other, Real):
            self._data /= float(other)
            return self
        return NotImplemented

    def __float__(self) -> float:
        """Convert a 1x1 matrix into a scalar."""
        if self.shape != (1, 1):
            raise DimensionError(
                f"only 1x1 matrices convert to float, got {self.nrows}x{self.ncols}"
            )
        return float(self._data[0, 0])

    # ------------------------------------------------------------------
    # Comparison and inspection
    # ------------------------------------------------------------------

    def eq(self, other: Matrix, abs_tol: float) -> bool:
        """
        True iff every pair of cells differs by at most abs_tol.

        A NaN cell never matches.
        """
        check_same_shape(self, other, ("self", "other"))
        return bool(np.all(np.abs(self._data - other._data) <= abs_tol))

    def contains_nan(self) -> bool:
        """Returns true if any entry of this matrix is NaN."""
        return bool(np.isnan(self._data).any())

    def is_upper_triangular(self) -> bool:
        return bool(np.all(np.tril(self._data, -1) == 0))

    def is_lower_triangular(self) -> bool:
        return bool(np.all(np.triu(self._data, 1) == 0))

    def to_upper_triangular(self) -> None:
        """Zeros-out entries below the diagonal."""
        self._data[...] = np.triu(self._data)

    def to_lower_triangular(self) -> None:
        """Zeros-out entries above the diagonal."""
        self._data[...] = np.tril(self._data)

    def upper_triangular(self) -> Matrix:
        """Extracts the upper triangular portion of the matrix."""
        m = self.copy()
        m.to_upper_triangular()
        return m

    def lower_triangular(self) -> Matrix:
        """Extracts the lower triangular portion of the matrix."""
        m = self.copy()
        m.to_lower_triangular()
        return m

    def top_n_rows(self, rows: int) -> Matrix:
        """First ``rows`` rows as a (rows x N) matrix."""
        check_rows_available(self, rows, "top_n_rows")
        return Matrix._wrap(self._data[:rows, :])

    def top_square(self) -> Matrix:
        """Extracts the top N x N sub-matrix."""
        return self.top_n_rows(self.ncols)

    def trace(self) -> float:
        """Sum of elements on the diagonal."""
        check_square(self, "trace")
        return float(np.trace(self._data))

    # ------------------------------------------------------------------
    # Column vectors
    # ------------------------------------------------------------------

    def dot(self, rhs: Matrix) -> float:
        """Standard dot product."""
        check_column_vector(self, "dot")
        check_same_shape(self, rhs, ("self", "rhs"))
        return float(self._data[:, 0] @ rhs._data[:, 0])

    def project(self, u: Matrix) -> Matrix:
        """Orthogonal projection of this vector onto u."""
        return (u.dot(self) / u.dot(u)) * u

    def l2_normalize(self) -> None:
        """Scale this vector to unit l2-norm, in place."""
        check_column_vector(self, "l2_normalize")
        self._data /= self.l2_norm()

    def canonical_basis(self, k: int) -> None:
        """Overwrite this vector with the k-th column of the identity."""
        check_column_vector(self, "canonical_basis")
        check_index(k, 1, self.shape)
        self._data[:, 0] = 0.0
        self._data[k - 1, 0] = 1.0

    def as_list(self) -> list[float]:
        """Entries of a column vector as floats."""
        check_column_vector(self, "as_list")
        return [float(x) for x in self._data[:, 0]]

    def has_unique_elements(self) -> bool:
        """Returns true if no two entries of this vector are equal."""
        values = self.as_list()
        return len(set(values)) == len(values)

    def is_eigenvector_of(self, A: Matrix, tolerance: float) -> bool:
        """
        Checks if this vector is an eigenvector of A.

        The vector is normalised, its Rayleigh quotient taken as the
        eigenvalue estimate, and the residual ||Av - lambda v|| compared
        against tolerance.
        """
        check_column_vector(self, "is_eigenvector_of")
        v = self / self.l2_norm()
        Av = A @ v
        lam = v.dot(Av)
        return (Av - lam * v).l2_norm() < tolerance

    # ------------------------------------------------------------------
    # Norms
    # ------------------------------------------------------------------

    def l1_norm(self) -> float:
        """
        For column vectors, the l1-norm (Manhattan distance).
        For matrices, the operator 1-norm: maximum absolute column sum.
        """
        return float(np.abs(self._data).sum(axis=0).max())

    def l2_norm(self, eigen_estimator: EigenEstimator | None = None) -> float:
        """
        For column vectors, the Euclidean norm.

        For matrices, the spectral norm: the square root of the largest
        eigenvalue of A'A, obtained from ``eigen_estimator`` (any callable
        returning an ``(eigenvalue, eigenvector)`` pair). Defaults to
        power iteration.
        """
        if self.ncols == 1:
            return float(np.sqrt(self.dot(self)))
        if eigen_estimator is None:
            from pydense.eigen.power import power_iteration
            eigen_estimator = power_iteration
        eigenvalue, _ = eigen_estimator(self.t() @ self)
        return float(np.sqrt(eigenvalue))

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def backward_sub(self, b: Matrix) -> Matrix:
        """Solve self @ x = b for upper-triangular self."""
        from pydense.solve.triangular import backward_sub
        return backward_sub(self, b)

    def qr_householder(self) -> tuple[Matrix, Matrix]:
        """QR decomposition via Householder reflections. Requires M >= N."""
        from pydense.decomposition.qr import householder
        Q, R = householder(self)
        return Q, R

    def solve_lls(self, b: Matrix) -> Matrix:
        """Linear least squares: minimise ||self @ x - b||."""
        from pydense.solve.least_squares import solve_lls
        return solve_lls(self, b)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        lines = ["Matrix"]
        for i in range(self.nrows):
            lines.append("  " + "".join(f"{x:>8.4f}" for x in self._data[i, :]))
        return "\n".join(lines)

    __repr__ = __str__


def colv(values: Sequence[float]) -> Matrix:
    """Initialize a column vector."""
    return Matrix.from_columns([list(values)])

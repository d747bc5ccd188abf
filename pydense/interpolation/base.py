"""
Common interface for polynomial interpolators.

An interpolant through N nodes is written as sum_k c_k * phi_k(x); each
scheme supplies its own basis functions phi_k and coefficients c_k.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from pydense.core.validation import (
    check_column_vector,
    check_length,
    check_unique,
)
from pydense.matrix.matrix import Matrix, colv


def as_nodes(
    xs: Matrix | Sequence[float],
    ys: Matrix | Sequence[float],
) -> tuple[Matrix, Matrix]:
    """
    Validate interpolation data and return it as two column vectors.

    Raises:
        DimensionError: If xs and ys differ in length or are not vectors
        ValidationError: If the x-values are not unique
    """
    xs = xs.copy() if isinstance(xs, Matrix) else colv(xs)
    ys = ys.copy() if isinstance(ys, Matrix) else colv(ys)
    check_column_vector(xs, "xs")
    check_column_vector(ys, "ys")
    check_length(ys, xs.nrows, "ys")
    check_unique(xs.as_list(), "xs")
    return xs, ys


class Interpolator(ABC):
    """Polynomial interpolant through a fixed set of nodes."""

    xs: Matrix

    @property
    def n_nodes(self) -> int:
        return self.xs.nrows

    @abstractmethod
    def basis_fn_eval(self, k: int, x: float) -> float:
        """Evaluates the k-th basis function (1-based) at x."""

    @abstractmethod
    def coeff(self, k: int) -> float:
        """Gets the k-th coefficient (1-based) of the interpolant."""

    def estimate(self, x: float) -> float:
        """Estimate f(x) from the known data points."""
        return sum(
            self.coeff(k) * self.basis_fn_eval(k, x)
            for k in range(1, self.n_nodes + 1)
        )

    def __call__(self, x: float) -> float:
        return self.estimate(x)

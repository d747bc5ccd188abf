"""Newton interpolation via divided differences."""

from typing import Sequence

from pydense.interpolation.base import Interpolator, as_nodes
from pydense.matrix.matrix import Matrix


def divided_differences(xs: Matrix, ys: Matrix) -> Matrix:
    """
    Newton coefficients f[x_1], f[x_1, x_2], ..., f[x_1, ..., x_N].

    Computed in place over a copy of ys, one order per sweep.
    """
    b = ys.copy()
    n = xs.nrows
    for j in range(1, n + 1):
        for k in range(n, j, -1):
            b[k] = (b[k] - b[k - 1]) / (xs[k] - xs[k - j])
    return b


class NewtonInterpolation(Interpolator):
    """
    Interpolant in the Newton basis N_k(x) = prod_{j<k} (x - x_j).

    Args:
        xs: Node x-values, must be unique
        ys: Sampled values at the nodes

    Raises:
        ValidationError: If xs contains repeated values
        DimensionError: If xs and ys differ in length
    """

    def __init__(
        self,
        xs: Matrix | Sequence[float],
        ys: Matrix | Sequence[float],
    ):
        self.xs, ys = as_nodes(xs, ys)
        self.coeffs = divided_differences(self.xs, ys)

    def basis_fn_eval(self, k: int, x: float) -> float:
        """Evaluate N_k(x)."""
        v = 1.0
        for j in range(1, k):
            v *= x - self.xs[j]
        return v

    def coeff(self, k: int) -> float:
        return self.coeffs[k]

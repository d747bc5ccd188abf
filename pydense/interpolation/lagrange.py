"""Lagrange interpolation."""

from typing import Sequence

from pydense.interpolation.base import Interpolator, as_nodes
from pydense.matrix.matrix import Matrix


class LagrangeInterpolation(Interpolator):
    """
    Interpolant in the Lagrange basis.

    The coefficients are the sampled y-values themselves; L_k(x) is 1 at
    the k-th node and 0 at every other node.

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
        self.xs, self.ys = as_nodes(xs, ys)

    def basis_fn_eval(self, k: int, x: float) -> float:
        """Evaluate L_k(x)."""
        xs = self.xs
        v = 1.0
        for j in range(1, self.n_nodes + 1):
            if j == k:
                continue
            if x == xs[j]:
                return 0.0
            v *= (x - xs[j]) / (xs[k] - xs[j])
        return v

    def coeff(self, k: int) -> float:
        return self.ys[k]

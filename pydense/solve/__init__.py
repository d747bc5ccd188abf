"""
Linear system solvers.

Submodules:
    triangular: Backward and forward substitution
    least_squares: QR least squares, Cholesky solve
"""

from pydense.solve.triangular import backward_sub, forward_sub
from pydense.solve.least_squares import solve_lls, cholesky_solve

__all__ = [
    "backward_sub",
    "forward_sub",
    "solve_lls",
    "cholesky_solve",
]

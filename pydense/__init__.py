"""
PyDense: dense linear algebra on fixed-size matrices.

A matrix container with 1-based indexing plus the decomposition, solving
and eigen-iteration algorithms built on it.

Submodules:
    matrix: The Matrix container and constructors
    decomposition: QR (Gram-Schmidt, Householder) and Cholesky
    solve: Triangular solves, least squares, SPD solves
    eigen: Power, inverse and Rayleigh-quotient iteration
    interpolation: Lagrange and Newton interpolation
"""

__version__ = "0.1.0"

from pydense.matrix import Matrix, colv, symmetric, symmetric_positive_definite
from pydense.decomposition import (
    QRResult,
    gram_schmidt,
    householder,
    qr,
    cholesky,
    cholesky_factor,
)
from pydense.solve import backward_sub, forward_sub, solve_lls, cholesky_solve
from pydense.eigen import (
    EigenResult,
    power_iteration,
    inverse_iteration,
    rayleigh_quotient,
    rayleigh_quotient_iteration,
)
from pydense import interpolation

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "colv",
    "symmetric",
    "symmetric_positive_definite",
    # Decomposition
    "QRResult",
    "gram_schmidt",
    "householder",
    "qr",
    "cholesky",
    "cholesky_factor",
    # Solve
    "backward_sub",
    "forward_sub",
    "solve_lls",
    "cholesky_solve",
    # Eigen
    "EigenResult",
    "power_iteration",
    "inverse_iteration",
    "rayleigh_quotient",
    "rayleigh_quotient_iteration",
    # Interpolation
    "interpolation",
]

"""
Dense matrix container and constructors.

Public API:
    Matrix                          the M x N container, 1-based indexing
    colv(values)                    column vector from a sequence
    symmetric(n, rng)               random symmetric matrix
    symmetric_positive_definite(n, rng)
"""

from pydense.matrix.matrix import Matrix, colv
from pydense.matrix.inits import symmetric, symmetric_positive_definite

__all__ = [
    "Matrix",
    "colv",
    "symmetric",
    "symmetric_positive_definite",
]

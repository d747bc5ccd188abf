"""
Matrix decompositions.

Submodules:
    qr: QR decomposition (Gram-Schmidt, Householder)
    cholesky: Cholesky factorization
"""

from pydense.decomposition.qr import (
    QRResult,
    gram_schmidt,
    householder,
    qr,
)
from pydense.decomposition.cholesky import cholesky, cholesky_factor

__all__ = [
    # QR decomposition
    "QRResult",
    "gram_schmidt",
    "householder",
    "qr",
    # Cholesky
    "cholesky",
    "cholesky_factor",
]

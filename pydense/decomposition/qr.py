"""
QR decomposition implementations.

Provides Gram-Schmidt (reduced) and Householder (full) QR factorization
with a consistent result type. Householder is the default: it stays
orthogonal to working precision where Gram-Schmidt loses orthogonality on
nearly dependent columns.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Iterator, Literal

import numpy as np

from pydense.core.exceptions import ValidationError
from pydense.core.validation import check_tall
from pydense.matrix.matrix import Matrix

QRMethod = Literal['householder', 'gram_schmidt']


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Unpacks as ``Q, R = result``.

    Attributes:
        Q: Orthogonal factor (M x M for Householder, M x N for Gram-Schmidt)
        R: Upper triangular factor (M x N for Householder, N x N for Gram-Schmidt)
        method: Algorithm that produced the factors
    """
    Q: Matrix
    R: Matrix
    method: QRMethod

    def __iter__(self) -> Iterator[Matrix]:
        return iter((self.Q, self.R))


def gram_schmidt(A: Matrix) -> QRResult:
    """
    Reduced QR factorization via the Gram-Schmidt process.

    Each column has its projections onto all previously orthogonalised
    columns removed; the columns are normalised after the full pass.
    Since A = QR and Q'Q = I, R is recovered as Q'A, and only its upper
    triangle is computed.

    A column that orthogonalises to exactly zero leaves NaN in the
    matching column of Q and issues a RuntimeWarning.

    Args:
        A: Matrix to decompose (M x N), must have M >= N

    Returns:
        QRResult with Q (M x N) and R (N x N)

    Raises:
        DimensionError: If M < N
    """
    check_tall(A, "A")
    Q = A.copy()

    for i in A.col_iter():
        q = Q.col(i)
        for j in range(1, i):
            u = Q.col(j)
            if u.l1_norm() > 0.0:
                q -= A.col(i).project(u)
        Q.set_col(i, q)

    for j in A.col_iter():
        q = Q.col(j)
        if q.l1_norm() == 0.0:
            warnings.warn(
                f"gram_schmidt: column {j} is linearly dependent on the columns "
                f"before it; Q will contain NaN. Use householder() instead.",
                RuntimeWarning,
                stacklevel=2,
            )
        with np.errstate(invalid='ignore'):
            q.l2_normalize()
        Q.set_col(j, q)

    n = A.ncols
    R = Matrix.from_fn(
        n, n, lambda i, j: Q.col(i).dot(A.col(j)) if i <= j else 0.0
    )
    return QRResult(Q=Q, R=R, method='gram_schmidt')


def householder(A: Matrix) -> QRResult:
    """
    Full QR factorization via Householder reflections.

    For each column j the reflector is built from the sub-diagonal part x
    of R's j-th column as v = x + s * ||x|| * e_j with s the sign of the
    pivot R(j, j), which avoids cancellation when forming v. The pivot is
    then set to -s * ||x||, the rest of the column is zeroed explicitly,
    and (I - 2vv') is applied to the remaining columns of R and
    accumulated into Q by right-multiplication.

    Args:
        A: Matrix to decompose (M x N), must have M >= N

    Returns:
        QRResult with orthogonal Q (M x M) and upper triangular R (M x N)

    Raises:
        DimensionError: If M < N
    """
    check_tall(A, "A")
    m, n = A.shape

    I = Matrix.eye(m)
    Q = Matrix.eye(m)
    R = A.copy()

    for j in range(1, n + 1):
        # np.copysign rather than np.sign: a zero pivot must still pick a side
        s = float(np.copysign(1.0, R[j, j]))

        x = R.col(j)
        for i in range(1, j):
            x[i] = 0.0
        norm = x.l2_norm()
        if norm == 0.0:
            # Column is already zero from the pivot down
            continue

        u = x + s * norm * I.col(j)

        R[j, j] = -s * norm
        for i in range(j + 1, m + 1):
            R[i, j] = 0.0

        v = u / u.l2_norm()
        vt = v.t()

        for i in range(j + 1, n + 1):
            col = R.col(i)
            col -= 2.0 * v * float(vt @ col)
            R.set_col(i, col)

        Q = Q @ (I - 2.0 * v @ vt)

    return QRResult(Q=Q, R=R, method='householder')


def qr(A: Matrix, method: QRMethod = 'householder') -> QRResult:
    """
    QR decomposition dispatch.

    Args:
        A: Matrix to decompose (M x N), must have M >= N
        method: 'householder' (full, default) or 'gram_schmidt' (reduced)

    Returns:
        QRResult

    Raises:
        ValidationError: If method is unknown
        DimensionError: If M < N
    """
    if method == 'householder':
        return householder(A)
    if method == 'gram_schmidt':
        return gram_schmidt(A)
    raise ValidationError(
        f"method: expected 'householder' or 'gram_schmidt', got {method!r}"
    )

"""
Exception hierarchy for PyDense.

All exceptions inherit from PyDenseError to allow catching any
library-specific error.

Design principles:
    - Contract violations (bad index, wrong shape) are ValidationErrors and
      indicate a bug at the call site; they are not meant to be retried
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Round-off is never an error
"""


class PyDenseError(Exception):
    """Base exception for all PyDense errors."""
    pass


class ValidationError(PyDenseError):
    """
    Input validation failed.

    Raised when a caller breaks an operation's precondition.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised for mismatched inner dimensions in a product, unequal shapes in
    an elementwise operation, non-square operands where a square is
    required, and M < N given to Householder QR or least squares.
    """
    pass


class MatrixIndexError(ValidationError, IndexError):
    """
    A 1-based index lies outside the matrix.

    Attributes:
        index: The offending (row, col) pair
        shape: The (nrows, ncols) of the matrix
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(PyDenseError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when a Cholesky factor contains NaN, i.e. some pivot went
    negative during factorization.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot: 1-based index of the first NaN diagonal entry, if located
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot = pivot


class ConvergenceError(PyDenseError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative eigensolver exceeds its iteration cap.

    Attributes:
        iterations: Number of iterations completed
        final_residual: Last value of the convergence measure
        reason: Why convergence failed ('max_iterations' or 'nan')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_residual: float | None = None,
        reason: str | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_residual = final_residual
        self.reason = reason
        self.threshold = threshold


class NoEigenvalueFound(ConvergenceError):
    """
    Rayleigh-quotient iteration gave up.

    Either the iteration cap was reached or the iterate became NaN.
    """
    pass

"""
Core infrastructure for PyDense.

This module provides shared utilities used by all algorithm families
(matrix, decomposition, solve, eigen, interpolation).

Key components:
    exceptions: Exception hierarchy
    validation: Contract checks
    tolerances: Convergence thresholds and tolerance tiers
    precision: Scalar comparison helpers
"""

from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    DimensionError,
    MatrixIndexError,
    NumericalError,
    NotPositiveDefiniteError,
    ConvergenceError,
    NoEigenvalueFound,
)

__all__ = [
    "PyDenseError",
    "ValidationError",
    "DimensionError",
    "MatrixIndexError",
    "NumericalError",
    "NotPositiveDefiniteError",
    "ConvergenceError",
    "NoEigenvalueFound",
]

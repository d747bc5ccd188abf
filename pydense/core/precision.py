"""
Scalar comparison helpers.

Provides machine epsilon and the absolute/relative difference functions
used when comparing computed scalars against reference values.
"""

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


def abs_diff(a: float, b: float) -> float:
    """Absolute difference |a - b|."""
    return abs(a - b)


def rel_diff(a: float, b: float) -> float:
    """
    Relative difference |a - b| / max(|a|, |b|).

    Returns 0.0 when both values are zero.
    """
    scale = max(abs(a), abs(b))
    if scale == 0:
        return 0.0
    return abs_diff(a, b) / scale


def is_close(a: float, b: float, atol: float) -> bool:
    """
    Check if two scalars agree within an absolute tolerance.

    NaN never compares close to anything.
    """
    return abs_diff(a, b) <= atol

"""
Polynomial interpolation.

Public API:
    LagrangeInterpolation(xs, ys)
    NewtonInterpolation(xs, ys)
    horner(coeffs, x)

Example:
    >>> from pydense.interpolation import NewtonInterpolation
    >>> p = NewtonInterpolation([-2, 0, 1, 2], [-5, 3, 1, 11])
    >>> p(0.5)
    1.25
"""

from pydense.interpolation.base import Interpolator
from pydense.interpolation.lagrange import LagrangeInterpolation
from pydense.interpolation.newton import NewtonInterpolation
from pydense.interpolation.horner import horner

__all__ = [
    "Interpolator",
    "LagrangeInterpolation",
    "NewtonInterpolation",
    "horner",
]

"""Polynomial evaluation."""

from typing import Sequence


def horner(coeffs: Sequence[float], x: float) -> float:
    """
    Evaluate a polynomial in linear time, using Horner's method.

    ``coeffs`` is read highest-degree first, so [2, 0, -4, 3] is
    2x^3 - 4x + 3. An empty sequence evaluates to 0.
    """
    if len(coeffs) == 0:
        return 0.0
    v = float(coeffs[0])
    for c in coeffs[1:]:
        v = c + x * v
    return v

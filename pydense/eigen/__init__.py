"""
Iterative eigensolvers.

Public API:
    power_iteration(A)                  dominant eigenpair
    inverse_iteration(A, shift)         eigenpair nearest the shift
    rayleigh_quotient_iteration(A)      some eigenpair, or NoEigenvalueFound
    rayleigh_quotient(v, A)             v'Av / v'v

Power and inverse iteration run until their convergence test passes unless
given ``max_iter``. Rayleigh-quotient iteration is always capped.

Example:
    >>> from pydense.eigen import power_iteration
    >>> eigenvalue, eigenvector = power_iteration(A)
"""

from pydense.eigen._common import EigenResult, rayleigh_quotient
from pydense.eigen.power import power_iteration
from pydense.eigen.inverse import inverse_iteration
from pydense.eigen.rayleigh import rayleigh_quotient_iteration

__all__ = [
    "EigenResult",
    "rayleigh_quotient",
    "power_iteration",
    "inverse_iteration",
    "rayleigh_quotient_iteration",
]

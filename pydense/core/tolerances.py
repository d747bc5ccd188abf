"""
Convergence thresholds and tolerance tiers.

The iterative solvers take their defaults from the constants below. The
tiers are the absolute tolerances each algorithm is expected to meet on
well-scaled random input (entries drawn uniformly from [0, 1)); they are
used by the test suite.

All tolerances are absolute, not scaled to the magnitude of the input.
"""

from dataclasses import dataclass


# Power iteration stops when successive unit iterates move less than this
POWER_ITERATION_TOL = 1e-15

# Residual ||Av - (v'Av)v|| below which v counts as an eigenvector
EIGENVECTOR_TOL = 1e-8

# Rayleigh-quotient iteration gives up after this many steps
RAYLEIGH_MAX_ITER = 100


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str


QR = ToleranceTier(
    atol=1e-9,
    name='qr',
    description='Q @ R reconstructs A, columns of Q have unit norm',
)

CHOLESKY = ToleranceTier(
    atol=1e-15,
    name='cholesky',
    description='L @ L\' reconstructs A',
)

BACKWARD_SUB = ToleranceTier(
    atol=1e-8,
    name='backward_sub',
    description='A @ x reproduces b',
)

LEAST_SQUARES = ToleranceTier(
    atol=1e-10,
    name='least_squares',
    description="normal equations A'A x = A'b",
)

POWER_ITERATION = ToleranceTier(
    atol=1e-10,
    name='power_iteration',
    description='A v = lambda v for the dominant pair',
)

INVERSE_ITERATION = ToleranceTier(
    atol=1e-8,
    name='inverse_iteration',
    description='A v = lambda v, agrees with power iteration up to sign',
)

RAYLEIGH_ITERATION = ToleranceTier(
    atol=1e-8,
    name='rayleigh_iteration',
    description='A v = lambda v when an eigenpair is found',
)

INTERPOLATION = ToleranceTier(
    atol=1e-4,
    name='interpolation',
    description='interpolant reproduces the sampled polynomial',
)

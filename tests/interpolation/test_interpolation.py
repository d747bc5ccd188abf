"""
Tests for polynomial interpolation.

Validates:
    - Lagrange and Newton interpolants reproduce a known cubic
    - Interpolants pass through their nodes
    - Both schemes agree on random data
    - Input validation (repeated nodes, length mismatch, non-vectors)
    - Horner evaluation
"""

import numpy as np
import pytest

from pydense.core import tolerances
from pydense.core.exceptions import DimensionError, ValidationError
from pydense.interpolation import (
    Interpolator,
    LagrangeInterpolation,
    NewtonInterpolation,
    horner,
)
from pydense.interpolation.newton import divided_differences
from pydense.matrix import Matrix, colv

REPS = 25

INTERPOLATION_TOL = tolerances.INTERPOLATION.atol

# Samples of 2x^3 - 4x + 3
CUBIC = [2.0, 0.0, -4.0, 3.0]
XS = [-2.0, 0.0, 1.0, 2.0]
YS = [-5.0, 3.0, 1.0, 11.0]

SCHEMES = [LagrangeInterpolation, NewtonInterpolation]


# ═══════════════════════════════════════════════════════════════════════
# Horner
# ═══════════════════════════════════════════════════════════════════════


class TestHorner:

    def test_cubic(self):
        assert horner(CUBIC, 0.5) == 1.25
        assert horner(CUBIC, -2.0) == -5.0

    def test_constant(self):
        assert horner([7.0], 123.0) == 7.0

    def test_empty(self):
        assert horner([], 3.0) == 0.0

    def test_matches_numpy_polyval(self, rng):
        for _ in range(REPS):
            coeffs = list(rng.uniform(-5, 5, size=6))
            x = float(rng.uniform(-2, 2))
            assert horner(coeffs, x) == pytest.approx(np.polyval(coeffs, x), abs=1e-10)


# ═══════════════════════════════════════════════════════════════════════
# Interpolants
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("scheme", SCHEMES)
class TestInterpolants:

    def test_reproduces_cubic(self, scheme, assert_eq_tol):
        p = scheme(XS, YS)
        for x in np.linspace(-3.0, 3.0, 25):
            assert_eq_tol(p.estimate(x), horner(CUBIC, x), INTERPOLATION_TOL)

    def test_known_value(self, scheme):
        assert scheme(XS, YS)(0.5) == pytest.approx(1.25)

    def test_passes_through_nodes(self, scheme):
        p = scheme(XS, YS)
        for x, y in zip(XS, YS):
            assert p(x) == pytest.approx(y, abs=1e-12)

    def test_single_node_is_constant(self, scheme):
        p = scheme([1.5], [4.0])
        assert p(-10.0) == 4.0
        assert p(10.0) == 4.0

    def test_matrix_input(self, scheme):
        p = scheme(colv(XS), colv(YS))
        assert p.n_nodes == 4
        assert p(0.5) == pytest.approx(1.25)

    def test_input_is_copied(self, scheme):
        xs = colv(XS)
        p = scheme(xs, YS)
        xs[1] = 100.0
        assert p(0.5) == pytest.approx(1.25)

    def test_repeated_node(self, scheme):
        with pytest.raises(ValidationError, match="unique"):
            scheme([1.0, 2.0, 1.0], [0.0, 1.0, 2.0])

    def test_length_mismatch(self, scheme):
        with pytest.raises(DimensionError):
            scheme([1.0, 2.0, 3.0], [0.0, 1.0])

    def test_row_vector_rejected(self, scheme):
        with pytest.raises(DimensionError, match="column vector"):
            scheme(Matrix.from_rows([XS]), YS)

    def test_is_interpolator(self, scheme):
        assert isinstance(scheme(XS, YS), Interpolator)


class TestAgreement:

    def test_lagrange_and_newton_agree(self, rng, assert_eq_tol):
        for _ in range(REPS):
            xs = list(np.sort(rng.uniform(-1, 1, size=5)))
            ys = list(rng.uniform(-1, 1, size=5))
            lagrange = LagrangeInterpolation(xs, ys)
            newton = NewtonInterpolation(xs, ys)
            for x in np.linspace(-1, 1, 11):
                assert_eq_tol(lagrange(x), newton(x), INTERPOLATION_TOL)


class TestBasis:

    def test_lagrange_basis_is_cardinal(self):
        p = LagrangeInterpolation(XS, YS)
        for k in range(1, 5):
            for j, x in enumerate(XS, start=1):
                assert p.basis_fn_eval(k, x) == (1.0 if j == k else 0.0)

    def test_newton_basis(self):
        p = NewtonInterpolation(XS, YS)
        assert p.basis_fn_eval(1, 5.0) == 1.0
        assert p.basis_fn_eval(3, 5.0) == (5.0 + 2.0) * (5.0 - 0.0)

    def test_divided_differences(self):
        coeffs = divided_differences(colv(XS), colv(YS))
        # f[x_1] is y_1; the top-order difference is the x^3 coefficient
        assert coeffs.as_list()[0] == -5.0
        assert coeffs.as_list()[-1] == pytest.approx(2.0)

    def test_abstract(self):
        with pytest.raises(TypeError):
            Interpolator()

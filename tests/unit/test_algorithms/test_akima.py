"""Unit tests for Akima splines."""

import pytest
import numpy as np

from pyinterplib.algorithms.akima import AKIMA, AKIMA_PERIODIC, AkimaState, PeriodicAkimaState
from pyinterplib.core.exceptions import DomainError
from pyinterplib.core.interpolant import Interpolant


def _fit(interp_type, x, y):
    interp = Interpolant(interp_type, len(x))
    interp.init(x, y)
    return interp


class TestAkimaSlopes:
    """Test cases for the ghost slopes beyond the table ends."""
    s = np.array([1.0, 2.0, 4.0, 7.0])

    def test_linear_extrapolation_of_slopes(self):
        m = AkimaState(5)._extend_slopes(self.s)
        np.testing.assert_allclose(m, [-1.0, 0.0, 1.0, 2.0, 4.0, 7.0, 10.0, 13.0])

    def test_periodic_wrap(self):
        m = PeriodicAkimaState(5)._extend_slopes(self.s)
        np.testing.assert_allclose(m, [4.0, 7.0, 1.0, 2.0, 4.0, 7.0, 1.0, 2.0])


class TestAkima:
    """Test cases for the natural Akima spline."""
    @pytest.mark.parametrize("x_query, integral", [(0.0, 0.0), (0.5, 0.125), (1.0, 0.5), (2.0, 2.0)])
    def test_line_is_reproduced(self, line_table, x_query, integral):
        """Test values, derivatives and integrals on y = x."""
        x, y = line_table
        interp = _fit(AKIMA, x, y)
        assert np.isclose(interp.eval(x, y, x_query), x_query)
        assert np.isclose(interp.eval_deriv(x, y, x_query), 1.0)
        assert np.isclose(interp.eval_integ(x, y, 0.0, x_query), integral)

    def test_cubic_coefficients_of_known_segment(self):
        """Test one segment against a hand computation of the Akima derivatives."""
        x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
        y = np.array([0.0, 1.0, 3.0, 6.0, 10.0])
        # Slopes 1, 2, 3, 4 extend to -1, 0 | 1, 2, 3, 4 | 5, 6; every weight is 1/2
        state = _fit(AKIMA, x, y).state
        a, b, c, d = state.segment_coefficients(1)
        # t_1 = 1.5, t_2 = 2.5 on a unit segment with slope 2
        assert np.isclose(c, 1.5)
        assert np.isclose(d, 1.0)
        assert np.isclose(b, 3 * 2.0 - 2 * 1.5 - 2.5)
        assert np.isclose(a, 1.5 + 2.5 - 2 * 2.0)

    def test_first_derivative_continuity(self, irregular_table):
        """Test C1 continuity at every interior sample."""
        x, y = irregular_table
        state = _fit(AKIMA, x, y).state
        for i in range(1, len(x) - 1):
            left = state.segment_polynomial(x, y, i - 1)
            right = state.segment_polynomial(x, y, i)
            h = x[i] - x[i - 1]
            assert np.isclose(left(h), right(0.0))
            assert np.isclose(left.deriv()(h), right.deriv()(0.0))

    def test_flat_neighbourhood_gives_line(self):
        """Test a segment surrounded by equal slopes is a straight line."""
        x = np.array([0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
        y = np.array([0.0, 0.0, 0.0, 0.0, 1.0, 5.0])
        state = _fit(AKIMA, x, y).state
        a, b, c, d = state.segment_coefficients(0)
        assert (a, b, c, d) == (0.0, 0.0, 0.0, 0.0)

    def test_needs_five_samples(self):
        with pytest.raises(DomainError, match="minimum required: 5"):
            Interpolant(AKIMA, 4)


class TestPeriodicAkima:
    """Test cases for the periodic Akima spline."""
    def test_sine_wraps_around(self):
        """Test the derivative matches across the period boundary."""
        x = np.linspace(0.0, 2.0 * np.pi, 13)
        y = np.sin(x)
        interp = _fit(AKIMA_PERIODIC, x, y)
        assert np.isclose(interp.eval_deriv(x, y, x[0]), interp.eval_deriv(x, y, x[-1]))
        assert np.isclose(interp.eval_deriv(x, y, x[0]), 1.0, atol=0.1)

    def test_differs_from_natural_at_ends(self):
        """Test the boundary treatment only changes the end segments."""
        x = np.linspace(0.0, 2.0 * np.pi, 13)
        y = np.sin(x)
        natural = _fit(AKIMA, x, y)
        periodic = _fit(AKIMA_PERIODIC, x, y)
        assert not np.isclose(natural.eval_deriv(x, y, x[0]), periodic.eval_deriv(x, y, x[0]), atol=1e-6)
        assert np.isclose(natural.eval(x, y, np.pi), periodic.eval(x, y, np.pi))

    def test_descriptor(self):
        assert AKIMA_PERIODIC.name == "akima-periodic"
        assert AKIMA_PERIODIC.min_size == 5

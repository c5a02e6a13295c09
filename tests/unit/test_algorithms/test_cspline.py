"""Unit tests for natural and periodic cubic splines."""

import pytest
import numpy as np

from pyinterplib.algorithms.cspline import CSPLINE, CSPLINE_PERIODIC, _CubicSplineState
from pyinterplib.algorithms.search import LookupAccelerator
from pyinterplib.core.interpolant import Interpolant


def _fit(interp_type, x, y):
    interp = Interpolant(interp_type, len(x))
    interp.init(x, y)
    return interp


def _check_reference(interp_type, x, y, test_x, test_y, test_dy, test_iy, atol=1e-9):
    interp = _fit(interp_type, x, y)
    accel = LookupAccelerator()
    for xq, yq, dyq, iyq in zip(test_x, test_y, test_dy, test_iy):
        assert abs(interp.eval(x, y, xq, accel) - yq) < atol
        assert abs(interp.eval_deriv(x, y, xq, accel) - dyq) < atol
        assert abs(interp.eval_integ(x, y, test_x[0], xq, accel) - iyq) < atol


class TestCubicSplineBase:
    """Test cases for the shared cubic spline base class."""
    def test_boundary_condition_is_required(self):
        with pytest.raises(TypeError, match="_solve_curvatures"):
            _CubicSplineState(4)


class TestNaturalCubicSpline:
    """Test cases for the natural cubic spline."""
    def test_line_is_reproduced(self):
        """Test three collinear samples give a straight line."""
        x = np.array([0.0, 1.0, 2.0])
        _check_reference(CSPLINE, x, x.copy(), [0.0, 0.5, 1.0, 2.0], [0.0, 0.5, 1.0, 2.0],
                         [1.0, 1.0, 1.0, 1.0], [0.0, 0.125, 0.5, 2.0])

    def test_runge_function_reference(self, runge_table):
        """Test reference values for samples of 1/(1+x^2) (Young & Gregory, 6.8)."""
        x, y = runge_table
        _check_reference(CSPLINE, x, y,
                         [0.00, 0.10, 0.20, 0.34, 0.50, 0.76, 0.98],
                         [1.000000000000000, 0.986183764184894, 0.961538461538461, 0.897012892252170,
                          0.799846963843167, 0.633709986144797, 0.510588599432241],
                         [-0.120113913432180, -0.174259247588814, -0.336695250058719, -0.557693334664512,
                          -0.638121834629033, -0.609069178796061, -0.529820891131095],
                         [0.000000000000000, 0.099354309321042, 0.196875783942601, 0.327335342246135,
                          0.463246950320456, 0.649448618342004, 0.774989397332469])

    def test_arbitrary_data_reference(self):
        """Test reference values on unevenly spaced data."""
        x = np.array([-1.2139767065644265, -0.792590494453907, -0.250954683125019, 0.665867809951305,
                      0.735655088722706, 0.827622053027153, 1.426592227816582])
        y = np.array([-0.00453877449035645, 0.49763182550668716, 0.17805472016334534, 0.40514493733644485,
                      -0.21595209836959839, 0.47405586764216423, 0.46561462432146072])
        test_x = [-1.2139767065644265, -1.0735146358609200, -0.6120452240109444, 0.0546528145670890,
                  0.6891302362084388, 0.7663107434908548, 1.2269355028867721, 1.4265922278165817]
        test_y = [-0.00453877449035645, 0.25816917628390590, 0.31389980410075147, 1.27633142487980233,
                  0.13322324792901385, -0.13551147728045118, 1.43594739539458649, 0.46561462432146072]
        test_dy = [1.955137555965937, 1.700662049790549, -1.401385073563169, 4.202528085784793,
                   -11.272731243226174, 6.373970868827501, -3.648527318598099, -5.465744514086432]
        test_iy = [0.000000000000000, 0.018231117234914, 0.213936442847744, 0.471372708120518,
                   1.483978291717981, 1.474315901028282, 2.057796448999396, 2.253662886537457]
        _check_reference(CSPLINE, x, y, test_x, test_y, test_dy, test_iy)

    def test_natural_boundary(self, irregular_table):
        """Test the second derivative vanishes at both ends."""
        x, y = irregular_table
        interp = _fit(CSPLINE, x, y)
        assert abs(interp.eval_deriv2(x, y, x[0])) < 1e-12
        assert abs(interp.eval_deriv2(x, y, x[-1])) < 1e-9

    def test_second_derivative_continuity(self, irregular_table):
        """Test C2 continuity at every interior sample."""
        x, y = irregular_table
        state = _fit(CSPLINE, x, y).state
        for i in range(1, len(x) - 1):
            left = state.segment_polynomial(x, y, i - 1)
            right = state.segment_polynomial(x, y, i)
            h = x[i] - x[i - 1]
            for order in (0, 1, 2):
                assert np.isclose(left.deriv(order)(h), right.deriv(order)(0.0), atol=1e-9)

    def test_min_size(self):
        assert CSPLINE.min_size == 3


class TestPeriodicCubicSpline:
    """Test cases for the periodic cubic spline."""
    def test_three_point_reference(self):
        """Test the 2x2 closed-form case against reference values."""
        x = np.array([0.123, 0.423, 1.123])
        y = np.array([0.456, 1.407056516295154, 0.456])
        _check_reference(CSPLINE_PERIODIC, x, y,
                         [0.123, 0.173, 0.273, 0.423, 0.446333333333333],
                         [0.456000000000000, 0.576769081434305, 0.931528258147577, 1.407056516295154,
                          1.442092968697928],
                         [1.8115362215145774, 2.9437463599611897, 3.8495144707184790, 1.8115362215145772,
                          1.1986331332354823],
                         [0.000000000000000, 0.025583349923681, 0.100243410143811, 0.279458477444273,
                          0.312726362409309])

    def test_three_point_derivative_at_far_end(self):
        """Test the derivative at the last sample equals the one at the first."""
        x = np.array([0.123, 0.423, 1.123])
        y = np.array([0.456, 1.407056516295154, 0.456])
        interp = _fit(CSPLINE_PERIODIC, x, y)
        assert np.isclose(interp.eval_deriv(x, y, 1.123), 1.8115362215145772, atol=1e-9)
        assert np.isclose(interp.eval(x, y, 0.773), 0.931528258147577, atol=1e-9)

    def test_two_points_give_a_line(self):
        """Test the smallest periodic table is the straight line through both samples."""
        x = np.array([0.0, 2.0])
        y = np.array([1.0, 1.0])
        interp = _fit(CSPLINE_PERIODIC, x, y)
        assert interp.eval(x, y, 0.7) == 1.0
        assert interp.eval_deriv2(x, y, 0.7) == 0.0

    def test_sine_wraps_around(self):
        """Test first and second derivatives match across the period boundary."""
        x = np.linspace(0.0, 2.0 * np.pi, 9)
        y = np.sin(x)
        interp = _fit(CSPLINE_PERIODIC, x, y)
        assert np.isclose(interp.eval_deriv(x, y, x[0]), interp.eval_deriv(x, y, x[-1]), atol=1e-9)
        assert np.isclose(interp.eval_deriv2(x, y, x[0]), interp.eval_deriv2(x, y, x[-1]), atol=1e-9)
        assert np.isclose(interp.eval(x, y, np.pi / 2), 1.0, atol=1e-2)
        assert np.isclose(interp.eval_integ(x, y, x[0], x[-1]), 0.0, atol=1e-9)

    def test_warns_when_end_values_differ(self, caplog):
        """Test a warning is logged for non-periodic data."""
        x = np.array([0.0, 1.0, 2.0, 3.0])
        with caplog.at_level("WARNING"):
            _fit(CSPLINE_PERIODIC, x, np.array([0.0, 1.0, 0.5, 2.0]))
        assert "end values differ" in caplog.text

    def test_min_size(self):
        assert CSPLINE_PERIODIC.min_size == 2

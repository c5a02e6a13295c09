"""End-to-end tests from configuration files to evaluated splines."""

import math

import pytest
import numpy as np
import sympy as sp

import pyinterplib
from pyinterplib import (AKIMA_PERIODIC, CSPLINE, LookupAccelerator, PiecewiseBuilder, STEFFEN,
                         Spline, create_spline, ensure_ascending_order, sample_function)


class TestEndToEnd:
    """Test cases combining parsing, fitting, evaluation and export."""
    def test_csv_table_to_symbolic_expression(self, tmp_path):
        (tmp_path / "cp.csv").write_text("T,cp\n300,450\n500,520\n700,560\n900,580\n1100,590\n")
        yaml_path = tmp_path / "steel.yaml"
        yaml_path.write_text("name: steel cp\ninterpolation: steffen\n"
                             "file_path: cp.csv\nx_column: T\ny_column: cp\n")
        spline = create_spline(yaml_path)
        assert spline.name == "steffen"
        # Monotonic data gives a monotonic interpolant
        values = [spline(t) for t in np.linspace(300.0, 1100.0, 81)]
        assert all(b >= a for a, b in zip(values, values[1:]))
        T = sp.Symbol('T')
        expr = PiecewiseBuilder.build_from_spline(spline, T)
        assert np.isclose(float(expr.subs(T, 650.0)), spline(650.0))

    def test_sampled_function(self):
        """Test a cubic spline of sin converges to sin and its integral."""
        x, y = sample_function(math.sin, np.linspace(0.0, math.pi, 41))
        spline = Spline(CSPLINE, x, y)
        accel = LookupAccelerator()
        for t in np.linspace(0.1, 3.0, 30):
            assert spline.eval(t, accel) == pytest.approx(math.sin(t), abs=1e-5)
            assert spline.eval_deriv(t, accel) == pytest.approx(math.cos(t), abs=1e-3)
        assert spline.eval_integ(0.0, math.pi) == pytest.approx(2.0, abs=1e-5)
        assert accel.hit_count > accel.miss_count

    def test_descending_data(self):
        x, y = ensure_ascending_order(np.array([4.0, 3.0, 2.0, 1.0, 0.0]), np.array([0.0, 1.0, 4.0, 9.0, 16.0]))
        spline = Spline(STEFFEN, x, y)
        assert spline(0.0) == 16.0

    def test_periodic_akima_over_one_period(self):
        x = np.linspace(0.0, 1.0, 21)
        y = np.cos(2.0 * np.pi * x)
        spline = Spline(AKIMA_PERIODIC, x, y)
        assert spline.eval_deriv(0.0) == pytest.approx(spline.eval_deriv(1.0))
        assert spline.eval_integ(0.0, 1.0) == pytest.approx(0.0, abs=1e-10)

    def test_version(self):
        assert isinstance(pyinterplib.__version__, str)

"""Cubic spline interpolation with natural and periodic boundary conditions."""

import logging
from abc import abstractmethod

import numpy as np

from pyinterplib.algorithms.piecewise_cubic import PiecewiseCubicState
from pyinterplib.algorithms.tridiagonal import solve_symm_tridiag, solve_symm_cyc_tridiag
from pyinterplib.core.typedefs import InterpolationType
from pyinterplib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class _CubicSplineState(PiecewiseCubicState):
    """Cubic spline parameterised by the half second derivatives c at the samples."""

    @abstractmethod
    def _solve_curvatures(self, h: np.ndarray, s: np.ndarray, y_array: np.ndarray) -> np.ndarray:
        """Return c at every sample, given segment widths h and slopes s."""
        pass

    def _compute_coefficients(self, x_array: np.ndarray, y_array: np.ndarray) -> None:
        x_array = np.asarray(x_array, dtype=float)
        y_array = np.asarray(y_array, dtype=float)
        h = np.diff(x_array)
        s = np.diff(y_array) / h
        c = self._solve_curvatures(h, s, y_array)
        self.a[:] = (c[1:] - c[:-1]) / (3.0 * h)
        self.b[:] = c[:-1]
        self.c[:] = s - h * (c[1:] + 2.0 * c[:-1]) / 3.0
        self.d[:] = y_array[:-1]


class CubicSplineState(_CubicSplineState):
    """Natural cubic spline: zero second derivative at both ends."""

    def _solve_curvatures(self, h, s, y_array):
        c = np.zeros(len(h) + 1)
        diag = 2.0 * (h[:-1] + h[1:])
        offdiag = h[1:-1]
        g = 3.0 * (s[1:] - s[:-1])
        c[1:-1] = solve_symm_tridiag(diag, offdiag, g)
        logger.debug("Solved natural spline system of size %d", len(diag))
        return c


class PeriodicCubicSplineState(_CubicSplineState):
    """Periodic cubic spline: first and second derivatives match at both ends."""

    def _solve_curvatures(self, h, s, y_array):
        if not np.isclose(y_array[0], y_array[-1], rtol=0.0, atol=ProcessingConstants.FLOATING_POINT_TOLERANCE):
            logger.warning("Periodic spline end values differ: y[0]=%g, y[-1]=%g; "
                           "the periodic extension will jump at the wrap-around", y_array[0], y_array[-1])
        n_segments = len(h)
        c = np.zeros(n_segments + 1)
        if n_segments == 1:
            # A single period through two samples is the straight line
            return c
        if n_segments == 2:
            h0, h1 = h
            big_a = 2.0 * (h0 + h1)
            big_b = h0 + h1
            g0 = 3.0 * ((y_array[2] - y_array[1]) / h1 - (y_array[1] - y_array[0]) / h0)
            g1 = 3.0 * ((y_array[1] - y_array[2]) / h0 - (y_array[2] - y_array[1]) / h1)
            det = 3.0 * big_b * big_b
            c[1] = (big_a * g0 - big_b * g1) / det
            c[2] = (-big_b * g0 + big_a * g1) / det
            c[0] = c[2]
            return c
        h_next = np.roll(h, -1)
        s_next = np.roll(s, -1)
        diag = 2.0 * (h + h_next)
        g = 3.0 * (s_next - s)
        c[1:] = solve_symm_cyc_tridiag(diag, h_next, g)
        c[0] = c[-1]
        logger.debug("Solved periodic spline system of size %d", len(diag))
        return c


CSPLINE = InterpolationType(
    name="cspline",
    min_size=3,
    state_class=CubicSplineState,
    description="Cubic spline with natural boundary conditions, C2 continuous",
)

CSPLINE_PERIODIC = InterpolationType(
    name="cspline-periodic",
    min_size=2,
    state_class=PeriodicCubicSplineState,
    description="Cubic spline with periodic boundary conditions, C2 continuous",
)

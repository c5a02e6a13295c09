"""
Steffen's monotonicity-preserving cubic interpolation.

M. Steffen, "A simple method for monotonic interpolation in one dimension",
Astron. Astrophys. 239, 443-450 (1990).

The interpolating function is monotonic between consecutive samples, so extrema
can only occur at the samples themselves. The function and its first derivative
are continuous; the second derivative is not.
"""

import logging

import numpy as np

from pyinterplib.algorithms.piecewise_cubic import PiecewiseCubicState
from pyinterplib.core.typedefs import InterpolationType

logger = logging.getLogger(__name__)


def steffen_derivatives(h: np.ndarray, s: np.ndarray) -> np.ndarray:
    """
    Derivative estimates at every sample.

    Args:
        h: Segment widths x[i+1] - x[i]
        s: Segment slopes (y[i+1] - y[i]) / h[i]
    Returns:
        Array of len(h) + 1 derivatives
    """
    y_prime = np.empty(len(h) + 1)
    # "Simplest possibility" boundary rule (section 2.2 of the paper)
    y_prime[0] = s[0]
    y_prime[-1] = s[-1]
    s_lo, s_hi = s[:-1], s[1:]
    h_lo, h_hi = h[:-1], h[1:]
    # Slope of the parabola through three neighbouring samples (eq. 8)
    p = (s_lo * h_hi + s_hi * h_lo) / (h_lo + h_hi)
    # Zero whenever the neighbouring slopes differ in sign (eq. 11)
    y_prime[1:-1] = ((np.copysign(1.0, s_lo) + np.copysign(1.0, s_hi))
                     * np.minimum(np.minimum(np.abs(s_lo), np.abs(s_hi)), 0.5 * np.abs(p)))
    return y_prime


class SteffenState(PiecewiseCubicState):
    """Cubic coefficients of the Steffen interpolant."""

    def _compute_coefficients(self, x_array: np.ndarray, y_array: np.ndarray) -> None:
        x_array = np.asarray(x_array, dtype=float)
        y_array = np.asarray(y_array, dtype=float)
        h = np.diff(x_array)
        s = np.diff(y_array) / h
        y_prime = steffen_derivatives(h, s)
        # Equations 2-5 of the paper
        self.a[:] = (y_prime[:-1] + y_prime[1:] - 2.0 * s) / (h * h)
        self.b[:] = (3.0 * s - 2.0 * y_prime[:-1] - y_prime[1:]) / h
        self.c[:] = y_prime[:-1]
        self.d[:] = y_array[:-1]
        logger.debug("Steffen derivatives: %d interior samples with zero slope",
                     int(np.count_nonzero(y_prime[1:-1] == 0.0)))


STEFFEN = InterpolationType(
    name="steffen",
    min_size=3,
    state_class=SteffenState,
    description="Steffen's method, monotonic between samples, C1 continuous",
)

"""Akima spline interpolation with natural and periodic boundary conditions."""

import logging

import numpy as np

from pyinterplib.algorithms.piecewise_cubic import PiecewiseCubicState
from pyinterplib.core.typedefs import InterpolationType

logger = logging.getLogger(__name__)


class AkimaState(PiecewiseCubicState):
    """Akima spline; the slopes beyond the table ends are extrapolated linearly."""

    def _extend_slopes(self, s: np.ndarray) -> np.ndarray:
        """Return the segment slopes padded with two ghost slopes on each side."""
        m = np.empty(len(s) + 4)
        m[2:-2] = s
        m[1] = 2.0 * s[0] - s[1]
        m[0] = 3.0 * s[0] - 2.0 * s[1]
        m[-2] = 2.0 * s[-1] - s[-2]
        m[-1] = 3.0 * s[-1] - 2.0 * s[-2]
        return m

    def _compute_coefficients(self, x_array: np.ndarray, y_array: np.ndarray) -> None:
        x_array = np.asarray(x_array, dtype=float)
        y_array = np.asarray(y_array, dtype=float)
        h = np.diff(x_array)
        m = self._extend_slopes(np.diff(y_array) / h)
        n_segments = len(h)
        m_im2 = m[0:n_segments]
        m_im1 = m[1:n_segments + 1]
        m_i = m[2:n_segments + 2]
        m_ip1 = m[3:n_segments + 3]
        m_ip2 = m[4:n_segments + 4]
        ne = np.abs(m_ip1 - m_i) + np.abs(m_im1 - m_im2)
        ne_next = np.abs(m_ip2 - m_ip1) + np.abs(m_i - m_im1)
        flat = ne == 0.0
        with np.errstate(divide='ignore', invalid='ignore'):
            alpha = np.where(flat, 0.0, np.abs(m_im1 - m_im2) / ne)
            alpha_next = np.where(ne_next == 0.0, 0.0, np.abs(m_i - m_im1) / ne_next)
        # Derivative at the right end of each segment
        slope_right = np.where(ne_next == 0.0, m_i, (1.0 - alpha_next) * m_i + alpha_next * m_ip1)
        # Derivative at the left end of each segment
        slope_left = (1.0 - alpha) * m_im1 + alpha * m_i
        self.a[:] = np.where(flat, 0.0, (slope_left + slope_right - 2.0 * m_i) / (h * h))
        self.b[:] = np.where(flat, 0.0, (3.0 * m_i - 2.0 * slope_left - slope_right) / h)
        self.c[:] = np.where(flat, m_i, slope_left)
        self.d[:] = y_array[:-1]
        logger.debug("Akima fit: %d of %d segments are straight lines", int(np.count_nonzero(flat)), n_segments)


class PeriodicAkimaState(AkimaState):
    """Akima spline; the ghost slopes wrap around the table."""

    def _extend_slopes(self, s: np.ndarray) -> np.ndarray:
        m = np.empty(len(s) + 4)
        m[2:-2] = s
        m[0] = s[-2]
        m[1] = s[-1]
        m[-2] = s[0]
        m[-1] = s[1]
        return m


AKIMA = InterpolationType(
    name="akima",
    min_size=5,
    state_class=AkimaState,
    description="Akima spline with natural boundary conditions, C1 continuous",
)

AKIMA_PERIODIC = InterpolationType(
    name="akima-periodic",
    min_size=5,
    state_class=PeriodicAkimaState,
    description="Akima spline with periodic boundary conditions, C1 continuous",
)

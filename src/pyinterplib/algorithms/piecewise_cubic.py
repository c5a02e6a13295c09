import logging
from abc import abstractmethod
from typing import Optional, Tuple

import numpy as np
from numpy.polynomial import Polynomial

from pyinterplib.algorithms.search import LookupAccelerator, find_index
from pyinterplib.core.exceptions import DegenerateSegmentError
from pyinterplib.core.interfaces import InterpolationState

logger = logging.getLogger(__name__)


def integrate_cubic(a: float, b: float, c: float, d: float, t1: float, t2: float) -> float:
    """Integral of a*t^3 + b*t^2 + c*t + d over the segment-local interval [t1, t2]."""
    return (0.25 * a * (t2 ** 4 - t1 ** 4)
            + b / 3.0 * (t2 ** 3 - t1 ** 3)
            + 0.5 * c * (t2 ** 2 - t1 ** 2)
            + d * (t2 - t1))


def check_segment_widths(x_array: np.ndarray) -> None:
    """Raise DegenerateSegmentError for the first pair of equal consecutive x values."""
    widths = np.diff(x_array)
    zero = np.flatnonzero(widths == 0.0)
    if zero.size:
        i = int(zero[0])
        raise DegenerateSegmentError(i, float(x_array[i]))


class PiecewiseCubicState(InterpolationState):
    """
    Piecewise cubic model shared by the spline family.

    Segment i covers [x_i, x_{i+1}] and holds p_i(t) = d_i + t*(c_i + t*(b_i + t*a_i))
    with t = x - x_i. Subclasses only have to compute the four coefficient arrays;
    evaluation, differentiation and integration are common.
    """

    def __init__(self, size: int):
        super().__init__(size)
        n_segments = size - 1
        self.a = np.empty(n_segments)
        self.b = np.empty(n_segments)
        self.c = np.empty(n_segments)
        self.d = np.empty(n_segments)

    @abstractmethod
    def _compute_coefficients(self, x_array: np.ndarray, y_array: np.ndarray) -> None:
        """Fill self.a, self.b, self.c and self.d from the sample table."""
        pass

    def init(self, x_array: np.ndarray, y_array: np.ndarray) -> None:
        check_segment_widths(x_array)
        self._compute_coefficients(x_array, y_array)
        logger.debug("Computed cubic coefficients for %d segments", len(self.a))

    def segment_coefficients(self, index: int) -> Tuple[float, float, float, float]:
        """Return (a, b, c, d) of segment index."""
        return float(self.a[index]), float(self.b[index]), float(self.c[index]), float(self.d[index])

    def _locate(self, x_array: np.ndarray, x: float,
                accel: Optional[LookupAccelerator]) -> Tuple[int, float]:
        index = find_index(x_array, x, accel)
        return index, x - float(x_array[index])

    def eval(self, x_array, y_array, x, accel=None) -> float:
        i, delx = self._locate(x_array, x, accel)
        # Horner's scheme
        return float(self.d[i] + delx * (self.c[i] + delx * (self.b[i] + delx * self.a[i])))

    def eval_deriv(self, x_array, y_array, x, accel=None) -> float:
        i, delx = self._locate(x_array, x, accel)
        return float(self.c[i] + delx * (2.0 * self.b[i] + delx * 3.0 * self.a[i]))

    def eval_deriv2(self, x_array, y_array, x, accel=None) -> float:
        i, delx = self._locate(x_array, x, accel)
        return float(2.0 * self.b[i] + 6.0 * self.a[i] * delx)

    def eval_integ(self, x_array, y_array, accel, a, b) -> float:
        index_a = find_index(x_array, a, accel)
        index_b = find_index(x_array, b, accel)
        result = 0.0
        for i in range(index_a, index_b + 1):
            x_lo = float(x_array[i])
            dx = float(x_array[i + 1]) - x_lo
            if dx == 0.0:
                # No partial sum is reported
                raise DegenerateSegmentError(i, x_lo)
            # Partial contribution on the first and last segment touched
            t1 = a - x_lo if i == index_a else 0.0
            t2 = b - x_lo if i == index_b else dx
            result += integrate_cubic(self.a[i], self.b[i], self.c[i], self.d[i], t1, t2)
        logger.debug("Integrated segments %d..%d over [%g, %g]", index_a, index_b, a, b)
        return float(result)

    def segment_polynomial(self, x_array, y_array, index) -> Polynomial:
        a, b, c, d = self.segment_coefficients(index)
        return Polynomial([d, c, b, a])

    def free(self) -> None:
        self.a = self.b = self.c = self.d = None

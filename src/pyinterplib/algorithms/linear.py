import logging

from numpy.polynomial import Polynomial

from pyinterplib.algorithms.search import find_index
from pyinterplib.core.exceptions import DegenerateSegmentError
from pyinterplib.core.interfaces import InterpolationState
from pyinterplib.core.typedefs import InterpolationType

logger = logging.getLogger(__name__)


class LinearState(InterpolationState):
    """
    Piecewise linear interpolation.

    The model is read straight from the sample table on every call, so no
    coefficients are stored.
    """

    def init(self, x_array, y_array) -> None:
        logger.debug("Linear interpolation over %d samples needs no precomputation", len(x_array))

    @staticmethod
    def _segment(x_array, y_array, index):
        x_lo = float(x_array[index])
        dx = float(x_array[index + 1]) - x_lo
        if dx == 0.0:
            raise DegenerateSegmentError(index, x_lo)
        y_lo = float(y_array[index])
        return x_lo, y_lo, (float(y_array[index + 1]) - y_lo) / dx

    def eval(self, x_array, y_array, x, accel=None) -> float:
        index = find_index(x_array, x, accel)
        x_lo, y_lo, slope = self._segment(x_array, y_array, index)
        return y_lo + (x - x_lo) * slope

    def eval_deriv(self, x_array, y_array, x, accel=None) -> float:
        index = find_index(x_array, x, accel)
        return self._segment(x_array, y_array, index)[2]

    def eval_deriv2(self, x_array, y_array, x, accel=None) -> float:
        index = find_index(x_array, x, accel)
        # Validates the segment even though the answer is always zero
        self._segment(x_array, y_array, index)
        return 0.0

    def segment_polynomial(self, x_array, y_array, index) -> Polynomial:
        _, y_lo, slope = self._segment(x_array, y_array, index)
        return Polynomial([y_lo, slope])

    def eval_integ(self, x_array, y_array, accel, a, b) -> float:
        index_a = find_index(x_array, a, accel)
        index_b = find_index(x_array, b, accel)
        result = 0.0
        for i in range(index_a, index_b + 1):
            x_lo, y_lo, slope = self._segment(x_array, y_array, i)
            t1 = a - x_lo if i == index_a else 0.0
            t2 = b - x_lo if i == index_b else float(x_array[i + 1]) - x_lo
            # Trapezoid over the covered part of the segment
            result += (t2 - t1) * (y_lo + 0.5 * slope * (t1 + t2))
        return float(result)


LINEAR = InterpolationType(
    name="linear",
    min_size=2,
    state_class=LinearState,
    description="Piecewise linear interpolation, C0 continuous",
)

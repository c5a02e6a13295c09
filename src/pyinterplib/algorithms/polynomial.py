"""Global polynomial interpolation through all samples (Newton form)."""

import logging

import numpy as np
from numpy.polynomial import Polynomial

from pyinterplib.algorithms.piecewise_cubic import check_segment_widths
from pyinterplib.core.interfaces import InterpolationState
from pyinterplib.core.typedefs import InterpolationType

logger = logging.getLogger(__name__)


def divided_differences(x_array: np.ndarray, y_array: np.ndarray) -> np.ndarray:
    """
    Newton divided-difference coefficients of the interpolating polynomial.

    Args:
        x_array: Distinct sample points
        y_array: Sample values
    Returns:
        Array dd with p(x) = dd[0] + (x - x0)*(dd[1] + (x - x1)*(dd[2] + ...))
    """
    x_array = np.asarray(x_array, dtype=float)
    dd = np.array(y_array, dtype=float)
    size = len(dd)
    for order in range(1, size):
        # Update from the top so lower-order entries are still available
        dd[order:] = (dd[order:] - dd[order - 1:-1]) / (x_array[order:] - x_array[:size - order])
    return dd


class PolynomialState(InterpolationState):
    """Interpolating polynomial of degree size - 1."""

    def __init__(self, size: int):
        super().__init__(size)
        self.dd = np.empty(size)

    def init(self, x_array, y_array) -> None:
        check_segment_widths(x_array)
        self.dd[:] = divided_differences(x_array, y_array)
        logger.debug("Computed %d divided differences", len(self.dd))

    def _taylor(self, x_array, center: float) -> Polynomial:
        """Expand the polynomial in powers of (x - center)."""
        x_array = np.asarray(x_array, dtype=float)
        expansion = Polynomial([float(self.dd[-1])])
        for i in range(len(self.dd) - 2, -1, -1):
            expansion = float(self.dd[i]) + Polynomial([center - x_array[i], 1.0]) * expansion
        return expansion

    def eval(self, x_array, y_array, x, accel=None) -> float:
        # Nested Newton evaluation
        result = self.dd[-1]
        for i in range(len(self.dd) - 2, -1, -1):
            result = self.dd[i] + (x - x_array[i]) * result
        return float(result)

    def eval_deriv(self, x_array, y_array, x, accel=None) -> float:
        return float(self._taylor(x_array, x).deriv(1)(0.0))

    def eval_deriv2(self, x_array, y_array, x, accel=None) -> float:
        return float(self._taylor(x_array, x).deriv(2)(0.0))

    def segment_polynomial(self, x_array, y_array, index) -> Polynomial:
        return self._taylor(x_array, float(x_array[index]))

    def eval_integ(self, x_array, y_array, accel, a, b) -> float:
        antiderivative = self._taylor(x_array, a).integ()
        return float(antiderivative(b - a) - antiderivative(0.0))

    def free(self) -> None:
        self.dd = None


POLYNOMIAL = InterpolationType(
    name="polynomial",
    min_size=3,
    state_class=PolynomialState,
    description="Single interpolating polynomial through all samples",
)

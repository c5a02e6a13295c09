import logging
from typing import Optional, Tuple

import numpy as np

from pyinterplib.algorithms.search import LookupAccelerator
from pyinterplib.core.interpolant import Interpolant
from pyinterplib.core.typedefs import InterpolationType

logger = logging.getLogger(__name__)


class Spline:
    """
    Interpolant bundled with its own copy of the sample table.

    The table is copied into read-only float64 arrays on construction, so later
    changes to the caller's arrays do not affect the spline.

    Args:
        interp_type: Interpolation algorithm
        x_array: Strictly increasing sample points
        y_array: Sample values
        name: Optional label used in logs and plots
    """

    def __init__(self, interp_type: InterpolationType, x_array, y_array, name: Optional[str] = None):
        self._x = np.array(x_array, dtype=np.float64)
        self._y = np.array(y_array, dtype=np.float64)
        self._x.flags.writeable = False
        self._y.flags.writeable = False
        self.label = name or interp_type.name
        self._interpolant = Interpolant(interp_type, len(self._x))
        self._interpolant.init(self._x, self._y)
        logger.debug("Created spline '%s' (%s) with %d samples", self.label, interp_type.name, len(self._x))

    @property
    def x(self) -> np.ndarray:
        return self._x

    @property
    def y(self) -> np.ndarray:
        return self._y

    @property
    def interpolant(self) -> Interpolant:
        return self._interpolant

    @property
    def name(self) -> str:
        """Name of the interpolation algorithm."""
        return self._interpolant.name

    @property
    def min_size(self) -> int:
        return self._interpolant.min_size

    @property
    def x_range(self) -> Tuple[float, float]:
        return self._interpolant.x_range

    def __len__(self) -> int:
        return len(self._x)

    def eval(self, x: float, accel: Optional[LookupAccelerator] = None) -> float:
        return self._interpolant.eval(self._x, self._y, x, accel)

    def eval_deriv(self, x: float, accel: Optional[LookupAccelerator] = None) -> float:
        return self._interpolant.eval_deriv(self._x, self._y, x, accel)

    def eval_deriv2(self, x: float, accel: Optional[LookupAccelerator] = None) -> float:
        return self._interpolant.eval_deriv2(self._x, self._y, x, accel)

    def eval_integ(self, a: float, b: float, accel: Optional[LookupAccelerator] = None) -> float:
        return self._interpolant.eval_integ(self._x, self._y, a, b, accel)

    def __call__(self, x: float, accel: Optional[LookupAccelerator] = None) -> float:
        return self.eval(x, accel)

    def free(self) -> None:
        self._interpolant.free()

    def __enter__(self) -> "Spline":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.free()

    def __repr__(self) -> str:
        return f"Spline(label='{self.label}', type='{self.name}', size={len(self._x)})"

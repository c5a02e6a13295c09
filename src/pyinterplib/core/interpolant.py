import logging
from typing import Optional, Tuple

import numpy as np

from pyinterplib.algorithms.search import LookupAccelerator
from pyinterplib.core.exceptions import DomainError, InterpolationError, InvalidArgumentError
from pyinterplib.core.interfaces import InterpolationState
from pyinterplib.core.typedefs import InterpolationType
from pyinterplib.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


class Interpolant:
    """
    One interpolation algorithm fitted to one sample table.

    The interpolant does not keep the table: the same x_array and y_array that were
    passed to init() must be passed to every evaluation. Use Spline for an object
    that owns a copy of its table.

    Example:
        >>> interp = Interpolant(STEFFEN, len(x))
        >>> interp.init(x, y)
        >>> interp.eval(x, y, 2.5)
    """

    def __init__(self, interp_type: InterpolationType, size: int):
        if not isinstance(interp_type, InterpolationType):
            raise InvalidArgumentError(f"interp_type must be an InterpolationType, got {type(interp_type).__name__}")
        self._type = interp_type
        self._size = int(size)
        self._state: Optional[InterpolationState] = interp_type.allocate(self._size)
        self._x_range: Optional[Tuple[float, float]] = None

    # --- Properties ---

    @property
    def interp_type(self) -> InterpolationType:
        return self._type

    @property
    def name(self) -> str:
        return self._type.name

    @property
    def min_size(self) -> int:
        return self._type.min_size

    @property
    def size(self) -> int:
        return self._size

    @property
    def is_initialized(self) -> bool:
        return self._x_range is not None and self._state is not None

    @property
    def x_range(self) -> Tuple[float, float]:
        """(x_0, x_{n-1}) of the table the interpolant was fitted to."""
        self._require_initialized()
        return self._x_range

    @property
    def state(self) -> InterpolationState:
        """Fitted algorithm state."""
        self._require_initialized()
        return self._state

    # --- Lifecycle ---

    def init(self, x_array, y_array) -> None:
        """
        Fit the interpolant to a sample table.
        Args:
            x_array: Strictly increasing sample points, exactly `size` of them
            y_array: Sample values
        Raises:
            InvalidArgumentError: If the arrays are not one-dimensional or their lengths do not match
            DomainError: If x is not strictly increasing or a sample is not finite
        """
        if self._state is None:
            raise InterpolationError(ErrorMessages.RELEASED.format(name=self.name))
        x_array = np.asarray(x_array, dtype=float)
        y_array = np.asarray(y_array, dtype=float)
        if x_array.ndim != 1 or y_array.ndim != 1:
            raise InvalidArgumentError(f"Sample arrays must be one-dimensional, "
                                       f"got shapes {x_array.shape} and {y_array.shape}")
        if len(x_array) != len(y_array):
            raise InvalidArgumentError(ErrorMessages.LENGTH_MISMATCH.format(
                x_len=len(x_array), y_len=len(y_array)))
        if len(x_array) != self._size:
            raise InvalidArgumentError(ErrorMessages.SIZE_MISMATCH.format(count=len(x_array), size=self._size))
        non_finite = np.flatnonzero(~(np.isfinite(x_array) & np.isfinite(y_array)))
        if non_finite.size:
            i = int(non_finite[0])
            raise DomainError(f"Non-finite sample at index {i}: x={x_array[i]}, y={y_array[i]}")
        not_increasing = np.flatnonzero(np.diff(x_array) <= 0.0)
        if not_increasing.size:
            i = int(not_increasing[0])
            raise DomainError(ErrorMessages.NOT_STRICTLY_INCREASING.format(
                index=i, previous=x_array[i], next_index=i + 1, current=x_array[i + 1]))
        self._type.init(self._state, x_array, y_array)
        self._x_range = (float(x_array[0]), float(x_array[-1]))
        logger.info("Initialized '%s' interpolant with %d samples on [%g, %g]",
                    self.name, self._size, self._x_range[0], self._x_range[1])

    def free(self) -> None:
        """Release the fitted state; the interpolant cannot be used afterwards."""
        if self._state is None:
            logger.debug("Interpolant '%s' already released", self.name)
            return
        self._type.free(self._state)
        self._state = None
        self._x_range = None
        logger.debug("Released '%s' interpolant", self.name)

    def __enter__(self) -> "Interpolant":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.free()

    # --- Evaluation ---

    def eval(self, x_array, y_array, x: float, accel: Optional[LookupAccelerator] = None) -> float:
        """Interpolated value at x."""
        self._check_query(x_array, x)
        return self._type.eval(self._state, x_array, y_array, x, accel)

    def eval_deriv(self, x_array, y_array, x: float, accel: Optional[LookupAccelerator] = None) -> float:
        """First derivative of the interpolant at x."""
        self._check_query(x_array, x)
        return self._type.eval_deriv(self._state, x_array, y_array, x, accel)

    def eval_deriv2(self, x_array, y_array, x: float, accel: Optional[LookupAccelerator] = None) -> float:
        """Second derivative of the interpolant at x."""
        self._check_query(x_array, x)
        return self._type.eval_deriv2(self._state, x_array, y_array, x, accel)

    def eval_integ(self, x_array, y_array, a: float, b: float,
                   accel: Optional[LookupAccelerator] = None) -> float:
        """
        Definite integral of the interpolant from a to b.
        Raises:
            InvalidArgumentError: If a > b
            DomainError: If a or b lies outside the table
        """
        self._require_initialized()
        self._check_table(x_array)
        if a > b:
            raise InvalidArgumentError(ErrorMessages.REVERSED_BOUNDS.format(a=a, b=b))
        self._check_in_range(a)
        self._check_in_range(b)
        if a == b:
            return 0.0
        return self._type.eval_integ(self._state, x_array, y_array, accel, a, b)

    # --- Checks ---

    def _require_initialized(self) -> None:
        if self._state is None:
            raise InterpolationError(ErrorMessages.RELEASED.format(name=self.name))
        if self._x_range is None:
            raise InterpolationError(ErrorMessages.NOT_INITIALIZED.format(name=self.name))

    def _check_table(self, x_array) -> None:
        if len(x_array) != self._size:
            raise InvalidArgumentError(ErrorMessages.SIZE_MISMATCH.format(count=len(x_array), size=self._size))

    def _check_in_range(self, x: float) -> None:
        x_min, x_max = self._x_range
        # Also rejects nan
        if not x_min <= x <= x_max:
            raise DomainError(ErrorMessages.OUT_OF_RANGE.format(x=x, x_min=x_min, x_max=x_max))

    def _check_query(self, x_array, x: float) -> None:
        self._require_initialized()
        self._check_table(x_array)
        self._check_in_range(x)

    def __repr__(self) -> str:
        status = "released" if self._state is None else ("fitted" if self._x_range else "allocated")
        return f"Interpolant(type='{self.name}', size={self._size}, {status})"

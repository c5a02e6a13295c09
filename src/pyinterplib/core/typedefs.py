import logging
from dataclasses import dataclass
from typing import Optional, Type, TYPE_CHECKING

import numpy as np

from pyinterplib.core.exceptions import AllocationError, DomainError
from pyinterplib.core.interfaces import InterpolationState
from pyinterplib.data.constants import ErrorMessages

if TYPE_CHECKING:
    from pyinterplib.algorithms.search import LookupAccelerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InterpolationType:
    """
    Immutable descriptor of one interpolation algorithm.

    A descriptor carries the algorithm's name, the smallest table it is defined for,
    and the entry points every algorithm shares: allocate, init, eval, eval_deriv,
    eval_deriv2, eval_integ and free. Callers pick one descriptor and every
    operation is routed through it, so the algorithm is never inspected at runtime.

    Attributes:
        name: Identifier used in diagnostics and configuration files
        min_size: Smallest number of samples the algorithm accepts
        state_class: InterpolationState implementation holding the fitted model
        description: Short human-readable summary
    """
    name: str
    min_size: int
    state_class: Type[InterpolationState]
    description: str = ""

    def allocate(self, size: int) -> InterpolationState:
        """Reserve the state for a table of the given size (size - 1 segments)."""
        if size < self.min_size:
            raise DomainError(ErrorMessages.INSUFFICIENT_DATA_POINTS.format(
                count=size, name=self.name, min_points=self.min_size))
        logger.debug("Allocating '%s' state for %d samples", self.name, size)
        try:
            return self.state_class(size)
        except MemoryError as e:
            raise AllocationError(f"Failed to allocate '{self.name}' state for {size} samples") from e

    def init(self, state: InterpolationState, x_array: np.ndarray, y_array: np.ndarray) -> None:
        state.init(x_array, y_array)

    def eval(self, state: InterpolationState, x_array: np.ndarray, y_array: np.ndarray,
             x: float, accel: Optional["LookupAccelerator"] = None) -> float:
        return state.eval(x_array, y_array, x, accel)

    def eval_deriv(self, state: InterpolationState, x_array: np.ndarray, y_array: np.ndarray,
                   x: float, accel: Optional["LookupAccelerator"] = None) -> float:
        return state.eval_deriv(x_array, y_array, x, accel)

    def eval_deriv2(self, state: InterpolationState, x_array: np.ndarray, y_array: np.ndarray,
                    x: float, accel: Optional["LookupAccelerator"] = None) -> float:
        return state.eval_deriv2(x_array, y_array, x, accel)

    def eval_integ(self, state: InterpolationState, x_array: np.ndarray, y_array: np.ndarray,
                   accel: Optional["LookupAccelerator"], a: float, b: float) -> float:
        return state.eval_integ(x_array, y_array, accel, a, b)

    def free(self, state: InterpolationState) -> None:
        state.free()

    def __str__(self) -> str:
        return self.name

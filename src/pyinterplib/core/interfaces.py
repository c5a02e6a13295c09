"""Abstract base classes for pyinterplib components."""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

import numpy as np
from numpy.polynomial import Polynomial

if TYPE_CHECKING:
    from pyinterplib.algorithms.search import LookupAccelerator


class InterpolationState(ABC):
    """Fitted state of one interpolation algorithm for one table size.

    Concrete algorithms allocate their coefficient storage in ``__init__``
    (sized for ``size - 1`` segments), compute it in :meth:`init` and evaluate
    it in the ``eval*`` methods. The sample table is borrowed on every call,
    never stored.
    """

    def __init__(self, size: int):
        self.size = size

    @abstractmethod
    def init(self, x_array: np.ndarray, y_array: np.ndarray) -> None:
        """Compute the model from the sample table.
        Args:
            x_array: Strictly increasing sample points
            y_array: Sample values
        Raises:
            DegenerateSegmentError: If two consecutive x values are equal
        """
        pass

    @abstractmethod
    def eval(self, x_array: np.ndarray, y_array: np.ndarray, x: float,
             accel: Optional["LookupAccelerator"] = None) -> float:
        """Evaluate the model at x."""
        pass

    @abstractmethod
    def eval_deriv(self, x_array: np.ndarray, y_array: np.ndarray, x: float,
                   accel: Optional["LookupAccelerator"] = None) -> float:
        """Evaluate the first derivative of the model at x."""
        pass

    @abstractmethod
    def eval_deriv2(self, x_array: np.ndarray, y_array: np.ndarray, x: float,
                    accel: Optional["LookupAccelerator"] = None) -> float:
        """Evaluate the second derivative of the model at x."""
        pass

    @abstractmethod
    def eval_integ(self, x_array: np.ndarray, y_array: np.ndarray,
                   accel: Optional["LookupAccelerator"], a: float, b: float) -> float:
        """Integrate the model from a to b (a <= b).
        Raises:
            DegenerateSegmentError: If a zero-width segment lies between a and b
        """
        pass

    def free(self) -> None:
        """Release the coefficient storage."""
        pass

    @abstractmethod
    def segment_polynomial(self, x_array: np.ndarray, y_array: np.ndarray, index: int) -> Polynomial:
        """Model on segment index as a polynomial in t = x - x_array[index]."""
        pass

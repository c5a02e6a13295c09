import logging
from typing import Callable, Tuple

import numpy as np

from pyinterplib.core.exceptions import DomainError
from pyinterplib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def _abbreviate(array: np.ndarray):
    if len(array) <= ProcessingConstants.MAX_LOGGED_ARRAY_LENGTH:
        return array.tolist()
    return f"[{array[0]}, ..., {array[-1]}] (length={len(array)})"


def sample_function(func: Callable[[float], float], x_array) -> Tuple[np.ndarray, np.ndarray]:
    """
    Tabulate a scalar function on a grid so that it can be interpolated.
    Args:
        func: Callable taking and returning a single float
        x_array: Grid points
    Returns:
        Tuple (x_array, y_array) of float64 arrays
    Raises:
        DomainError: If func returns a non-finite value at some grid point
    """
    x_array = np.asarray(x_array, dtype=float)
    if x_array.ndim != 1:
        raise ValueError(f"Sampling grid must be one-dimensional, got shape {x_array.shape}")
    logger.debug("Sampling %s on %d points: %s", getattr(func, '__name__', repr(func)),
                 len(x_array), _abbreviate(x_array))
    y_array = np.empty_like(x_array)
    for i, x in enumerate(x_array):
        value = float(func(float(x)))
        if not np.isfinite(value):
            raise DomainError(f"Function returned non-finite value {value} at index {i} (x={x})")
        y_array[i] = value
    return x_array, y_array


def ensure_ascending_order(x_array: np.ndarray, *value_arrays: np.ndarray) -> Tuple[np.ndarray, ...]:
    """Return the arrays with x ascending, flipping all of them if x is strictly descending."""
    x_array = np.asarray(x_array)
    if len(x_array) < 2:
        return (x_array,) + value_arrays
    diffs = np.diff(x_array)
    if np.all(diffs > ProcessingConstants.MONOTONICITY_THRESHOLD):
        return (x_array,) + value_arrays
    if np.all(diffs < -ProcessingConstants.MONOTONICITY_THRESHOLD):
        logger.debug("x values are descending, flipping %d arrays", len(value_arrays) + 1)
        return (np.flip(x_array),) + tuple(np.flip(np.asarray(arr)) for arr in value_arrays)
    logger.error("x values are neither strictly ascending nor strictly descending: %s", _abbreviate(x_array))
    raise DomainError("x values are neither strictly ascending nor strictly descending")

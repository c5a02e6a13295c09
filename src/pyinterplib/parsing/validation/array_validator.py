"""General data validation utilities."""

import logging

import numpy as np

from pyinterplib.core.exceptions import DomainError
from pyinterplib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def is_monotonic(arr: np.ndarray, name: str = "Array",
                 threshold: float = ProcessingConstants.MONOTONICITY_THRESHOLD,
                 raise_error: bool = True) -> bool:
    """
    Check that an array is strictly increasing.
    Args:
        arr: Values to check
        name: Label used in messages
        threshold: Smallest accepted step between consecutive values
        raise_error: Raise DomainError on a violation instead of logging a warning
    Returns:
        True if the array is strictly increasing, False otherwise (only when raise_error is False)
    """
    for i in range(1, len(arr)):
        diff = arr[i] - arr[i - 1]
        if diff <= threshold:
            start_idx = max(0, i - 2)
            end_idx = min(len(arr), i + 3)
            context = "\nSurrounding values:\n"
            for j in range(start_idx, end_idx):
                context += f"Index {j}: {arr[j]:.10e}\n"
            error_msg = (
                f"{name} is not strictly increasing at index {i}:\n"
                f"Previous value ({i - 1}): {arr[i - 1]:.10e}\n"
                f"Current value ({i}): {arr[i]:.10e}\n"
                f"Difference: {diff:.10e}\n"
                f"{context}"
            )
            if raise_error:
                raise DomainError(error_msg)
            logger.warning("%s", error_msg)
            return False
    logger.debug("%s is strictly increasing", name)
    return True


def validate_table(x_array, y_array, min_size: int = ProcessingConstants.MIN_DATA_POINTS,
                   name: str = "table") -> None:
    """
    Check that a sample table can be handed to an interpolant.
    Args:
        x_array: Sample points
        y_array: Sample values
        min_size: Smallest accepted number of samples
        name: Label used in error messages
    Raises:
        ValueError: If the arrays differ in length or are not one-dimensional
        DomainError: If there are too few samples, a sample is not finite
            or x is not strictly increasing
    """
    x_array = np.asarray(x_array, dtype=float)
    y_array = np.asarray(y_array, dtype=float)
    if x_array.ndim != 1 or y_array.ndim != 1:
        raise ValueError(f"{name}: x and y must be one-dimensional")
    if len(x_array) != len(y_array):
        raise ValueError(f"{name}: x ({len(x_array)}) and y ({len(y_array)}) must have the same length")
    if len(x_array) < min_size:
        raise DomainError(f"{name}: at least {min_size} samples required, got {len(x_array)}")
    for label, array in (("x", x_array), ("y", y_array)):
        bad = np.flatnonzero(~np.isfinite(array))
        if bad.size:
            raise DomainError(f"{name}: non-finite {label} value at index {int(bad[0])}")
    is_monotonic(x_array, f"{name} x values")

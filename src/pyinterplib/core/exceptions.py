"""Custom exceptions for pyinterplib core functionality."""
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class InterpolationError(Exception):
    """Base exception for all interpolation-related errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("InterpolationError raised: %s", message)


class AllocationError(InterpolationError):
    """Exception raised when storage for an interpolation state cannot be obtained."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("AllocationError raised: %s", message)


class DomainError(InterpolationError, ValueError):
    """Exception raised when a table or query violates the domain of an algorithm."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("DomainError raised: %s", message)


class InvalidArgumentError(InterpolationError, ValueError):
    """Exception raised for malformed arguments such as reversed integration bounds."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("InvalidArgumentError raised: %s", message)


class DegenerateSegmentError(DomainError, InvalidArgumentError):
    """Exception raised when two consecutive x values are equal."""

    def __init__(self, index: int, x_value: Optional[float] = None):
        self.index = index
        self.x_value = x_value
        message = f"Zero-width segment at index {index}"
        if x_value is not None:
            message += f" (x[{index}] == x[{index + 1}] == {x_value})"
        message += "; x values must be strictly increasing"
        super().__init__(message)

"""
Core data structures of the interpolation engine.

This module contains the algorithm descriptor and state interface shared by all
interpolation variants, the per-table Interpolant, the table-owning Spline and
the exception hierarchy.
"""

from .exceptions import (InterpolationError, AllocationError, DomainError,
                         InvalidArgumentError, DegenerateSegmentError)
from .interfaces import InterpolationState
from .typedefs import InterpolationType
from .interpolant import Interpolant
from .spline import Spline

__all__ = [
    "InterpolationError",
    "AllocationError",
    "DomainError",
    "InvalidArgumentError",
    "DegenerateSegmentError",
    "InterpolationState",
    "InterpolationType",
    "Interpolant",
    "Spline"
]

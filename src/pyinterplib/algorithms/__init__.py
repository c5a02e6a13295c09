"""
Interpolation algorithms.

This module provides the interval search and lookup accelerator, the interpolation
variants (linear, polynomial, cubic spline, Akima and Steffen, with periodic
versions where they exist), a registry to select them by name, and helpers to
sample functions and export fitted models as SymPy expressions.
"""

import difflib
import logging
from typing import Dict

from .search import bsearch, find_index, LookupAccelerator
from .linear import LINEAR
from .polynomial import POLYNOMIAL
from .cspline import CSPLINE, CSPLINE_PERIODIC
from .akima import AKIMA, AKIMA_PERIODIC
from .steffen import STEFFEN
from .sampling import sample_function, ensure_ascending_order
from .piecewise_builder import PiecewiseBuilder
from pyinterplib.core.exceptions import InvalidArgumentError
from pyinterplib.core.typedefs import InterpolationType

logger = logging.getLogger(__name__)

INTERPOLATION_TYPES: Dict[str, InterpolationType] = {
    interp_type.name: interp_type
    for interp_type in (LINEAR, POLYNOMIAL, CSPLINE, CSPLINE_PERIODIC, AKIMA, AKIMA_PERIODIC, STEFFEN)
}


def get_interpolation_type(name) -> InterpolationType:
    """
    Look up an interpolation algorithm by name.

    Names are case-insensitive and '_' is accepted in place of '-'.
    An InterpolationType instance is returned unchanged.
    Raises:
        InvalidArgumentError: For unknown names, with close-match suggestions
    """
    if isinstance(name, InterpolationType):
        return name
    if not isinstance(name, str):
        raise InvalidArgumentError(f"Interpolation type must be a name or InterpolationType, "
                                   f"got {type(name).__name__}")
    key = name.strip().lower().replace('_', '-')
    if key in INTERPOLATION_TYPES:
        return INTERPOLATION_TYPES[key]
    matches = difflib.get_close_matches(key, INTERPOLATION_TYPES.keys(), n=3, cutoff=0.6)
    suggestion = f" Did you mean: {', '.join(matches)}?" if matches else ""
    raise InvalidArgumentError(f"Unknown interpolation type '{name}'.{suggestion} "
                               f"Supported types: {', '.join(INTERPOLATION_TYPES)}")


__all__ = [
    "bsearch",
    "find_index",
    "LookupAccelerator",
    "LINEAR",
    "POLYNOMIAL",
    "CSPLINE",
    "CSPLINE_PERIODIC",
    "AKIMA",
    "AKIMA_PERIODIC",
    "STEFFEN",
    "INTERPOLATION_TYPES",
    "get_interpolation_type",
    "sample_function",
    "ensure_ascending_order",
    "PiecewiseBuilder",
]

"""
pyinterplib - One-dimensional interpolation of tabulated data.

This library builds piecewise models from a strictly increasing table of sample
points and values and evaluates them, their first and second derivatives and
their definite integrals at arbitrary points inside the table.

Key Features:
- Linear, polynomial, cubic spline, Akima and Steffen interpolation
- Periodic variants of the cubic and Akima splines
- Lookup accelerator for fast repeated evaluation
- Table definitions in YAML, inline or from CSV/XLSX/TXT data files
- Export of fitted models as SymPy piecewise expressions
- Diagnostic plots of fitted splines

Main Components:
- Core: Algorithm descriptor, Interpolant, Spline and exceptions
- Algorithms: Interval search and the interpolation variants
- Parsing: YAML configuration parsing and data file loading
- Visualization: Spline plotting
- Data: Processing constants
"""

# Enhanced version handling with multiple fallbacks
try:
    from ._version import version as __version__
except ImportError:
    try:
        from importlib.metadata import version, PackageNotFoundError
        __version__ = version("pyinterplib")
    except (ImportError, PackageNotFoundError):
        __version__ = "0.1.0+unknown"  # Fallback version

# Core definitions
from .core.typedefs import InterpolationType
from .core.interpolant import Interpolant
from .core.spline import Spline
from .core.exceptions import (InterpolationError, AllocationError, DomainError,
                              InvalidArgumentError, DegenerateSegmentError)

# Algorithms
from .algorithms import (
    bsearch,
    find_index,
    LookupAccelerator,
    LINEAR,
    POLYNOMIAL,
    CSPLINE,
    CSPLINE_PERIODIC,
    AKIMA,
    AKIMA_PERIODIC,
    STEFFEN,
    INTERPOLATION_TYPES,
    get_interpolation_type,
    sample_function,
    ensure_ascending_order,
    PiecewiseBuilder
)

# Main API functions
from .parsing.api import (
    create_spline,
    get_supported_types,
    validate_yaml_file,
    get_table_info
)

# Visualization
from .visualization.plotters import SplineVisualizer

__all__ = [
    # Version
    '__version__',

    # Core classes
    'InterpolationType',
    'Interpolant',
    'Spline',

    # Exceptions
    'InterpolationError',
    'AllocationError',
    'DomainError',
    'InvalidArgumentError',
    'DegenerateSegmentError',

    # Algorithms
    'bsearch',
    'find_index',
    'LookupAccelerator',
    'LINEAR',
    'POLYNOMIAL',
    'CSPLINE',
    'CSPLINE_PERIODIC',
    'AKIMA',
    'AKIMA_PERIODIC',
    'STEFFEN',
    'INTERPOLATION_TYPES',
    'get_interpolation_type',
    'sample_function',
    'ensure_ascending_order',
    'PiecewiseBuilder',

    # Main API
    'create_spline',
    'get_supported_types',
    'validate_yaml_file',
    'get_table_info',

    # Visualization
    'SplineVisualizer'
]

# Package metadata
__description__ = "One-dimensional interpolation of tabulated data"

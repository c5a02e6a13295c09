from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used throughout the interpolation engine."""
    # Tolerance and precision
    FLOATING_POINT_TOLERANCE: Final[float] = 1e-12
    MONOTONICITY_THRESHOLD: Final[float] = 0.0
    # Data validation
    MIN_DATA_POINTS: Final[int] = 2
    # Diagnostics: tables longer than this are abbreviated in log messages
    MAX_LOGGED_ARRAY_LENGTH: Final[int] = 10
    # Visualization
    DEFAULT_VISUALIZATION_POINTS: Final[int] = 1000
    # File processing
    MAX_MISSING_VALUE_PERCENTAGE: Final[float] = 50.0


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    INSUFFICIENT_DATA_POINTS: Final[str] = ("Insufficient data points ({count}) for '{name}' interpolation, "
                                            "minimum required: {min_points}")
    LENGTH_MISMATCH: Final[str] = "Array length mismatch: x_array({x_len}) != y_array({y_len})"
    SIZE_MISMATCH: Final[str] = "Table length ({count}) does not match interpolant size ({size})"
    NOT_STRICTLY_INCREASING: Final[str] = ("x values must be strictly increasing: "
                                           "x[{index}]={previous} >= x[{next_index}]={current}")
    OUT_OF_RANGE: Final[str] = "Query x={x} outside interpolation range [{x_min}, {x_max}]"
    REVERSED_BOUNDS: Final[str] = "Integration bounds must satisfy a <= b, got a={a}, b={b}"
    NOT_INITIALIZED: Final[str] = "Interpolant '{name}' has not been initialized with a data table"
    RELEASED: Final[str] = "Interpolant '{name}' has already been released"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    SUPPORTED_EXTENSIONS: Final[tuple] = ('.csv', '.xlsx', '.txt')
    MAX_FILE_SIZE_MB: Final[int] = 100
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    # Missing value indicators
    NA_VALUES: Final[tuple] = ('', ' ', '  ', '   ', 'nan', 'NaN', 'NULL', 'null', 'N/A', 'n/a', 'NA')

import logging
from pathlib import Path
from typing import Dict, List, Tuple, Union

import numpy as np
import pandas as pd

from pyinterplib.data.constants import FileConstants, ProcessingConstants
from pyinterplib.parsing.config.yaml_keys import FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY

logger = logging.getLogger(__name__)

ColumnId = Union[str, int]


def load_table_data(file_config: Dict[str, Union[str, int]], header: bool = True) -> Tuple[np.ndarray, np.ndarray]:
    """
    Reads a sample table (x and y columns) from a data file.
    Args:
        file_config: Dictionary containing file configuration with keys:
            - file_path: Path to a .csv, .xlsx or .txt data file
            - x_column: Column name or index of the sample points
            - y_column: Column name or index of the sample values
        header: Indicates if the file contains a header row
    Returns:
        Tuple of (x_array, y_array) as float64 numpy arrays, sorted by x
    Raises:
        FileNotFoundError: If the specified file doesn't exist
        ValueError: If data validation fails or file format is unsupported
        PermissionError: If file cannot be read due to permissions
    """
    _validate_file_config(file_config)
    file_path = Path(file_config[FILE_PATH_KEY])
    x_col = file_config[X_COLUMN_KEY]
    y_col = file_config[Y_COLUMN_KEY]
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if not file_path.is_file():
        raise ValueError(f"Path is not a file: {file_path}")
    file_extension = file_path.suffix.lower()
    if file_extension not in FileConstants.SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: '{file_extension}'. "
                         f"Supported types are: {FileConstants.SUPPORTED_EXTENSIONS}")
    file_size_mb = file_path.stat().st_size / (1024 * 1024)
    if file_size_mb > FileConstants.MAX_FILE_SIZE_MB:
        raise ValueError(f"File size ({file_size_mb:.2f} MB) exceeds the maximum limit "
                         f"of {FileConstants.MAX_FILE_SIZE_MB} MB.")
    logger.info("Loading table data from %s (x=%s, y=%s)", file_path, x_col, y_col)
    try:
        if file_extension == '.xlsx':
            df = _read_excel_file(file_path, header)
        elif file_extension == '.csv':
            df = _read_csv_file(file_path, header)
        else:  # .txt files
            df = _read_text_file(file_path, header)
    except PermissionError as e:
        raise PermissionError(f"Permission denied reading file {file_path}: {str(e)}") from e
    except Exception as e:
        raise ValueError(f"Error reading file {file_path}: {str(e)}") from e
    x_array, y_array = _extract_data_columns(df, x_col, y_col, str(file_path))
    x_array, y_array = _clean_and_validate_data(x_array, y_array, str(file_path))
    logger.info("Loaded %d samples from %s, x in [%g, %g]", len(x_array), file_path, x_array[0], x_array[-1])
    return x_array, y_array


def _validate_file_config(file_config: Dict) -> None:
    """Validate the file configuration dictionary."""
    required_keys = {FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY}
    missing_keys = required_keys - set(file_config.keys())
    if missing_keys:
        raise ValueError(f"Missing required configuration keys: {sorted(missing_keys)}")
    if not file_config[FILE_PATH_KEY]:
        raise ValueError("File path cannot be empty")


def _read_excel_file(file_path: Path, header: bool) -> pd.DataFrame:
    try:
        return pd.read_excel(file_path, header=0 if header else None, na_values=list(FileConstants.NA_VALUES))
    except ImportError as e:
        raise ValueError("Excel file support requires openpyxl. Install with: pip install openpyxl") from e


def _read_csv_file(file_path: Path, header: bool) -> pd.DataFrame:
    return pd.read_csv(
        file_path,
        header=0 if header else None,
        na_values=list(FileConstants.NA_VALUES),
        encoding=FileConstants.DEFAULT_ENCODING,
    )


def _read_text_file(file_path: Path, header: bool) -> pd.DataFrame:
    """Read a whitespace-separated text file."""
    try:
        return pd.read_csv(
            file_path,
            sep=r'\s+',
            header=0 if header else None,
            na_values=list(FileConstants.NA_VALUES),
            encoding=FileConstants.DEFAULT_ENCODING,
            engine='python'  # Explicitly specify engine for regex separator
        )
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"No data found in text file: {str(e)}") from e


def _extract_data_columns(df: pd.DataFrame, x_col: ColumnId, y_col: ColumnId,
                          file_path: str) -> Tuple[np.ndarray, np.ndarray]:
    """Extract the x and y columns from the DataFrame as float64 arrays."""
    if df.empty:
        raise ValueError(f"No data found in file: {file_path}")
    x_series = _extract_column(df, x_col, "x", file_path)
    y_series = _extract_column(df, y_col, "y", file_path)
    x_array = np.asarray(pd.to_numeric(x_series, errors='coerce'), dtype=np.float64)
    y_array = np.asarray(pd.to_numeric(y_series, errors='coerce'), dtype=np.float64)
    for label, array in (("x", x_array), ("y", y_array)):
        nan_count = int(np.sum(np.isnan(array)))
        if nan_count > 0:
            logger.warning("%s column has %d NaN values after conversion", label, nan_count)
    return x_array, y_array


def _extract_column(df: pd.DataFrame, col_identifier: ColumnId, col_type: str, file_path: str) -> pd.Series:
    """Extract a single column by name or position."""
    if isinstance(col_identifier, str):
        if col_identifier not in df.columns:
            available_cols = ', '.join(df.columns.astype(str))
            raise ValueError(f"{col_type} column '{col_identifier}' not found in file {file_path}. "
                             f"Available columns: {available_cols}")
        return df[col_identifier]
    if not 0 <= col_identifier < len(df.columns):
        raise ValueError(f"{col_type} column index {col_identifier} out of bounds "
                         f"(file has {len(df.columns)} columns)")
    return df.iloc[:, col_identifier]


def _clean_and_validate_data(x_array: np.ndarray, y_array: np.ndarray,
                             file_path: str) -> Tuple[np.ndarray, np.ndarray]:
    """Drop rows with missing values and duplicate x, then sort by x."""
    if len(x_array) == 0:
        raise ValueError(f"No valid data found in file: {file_path}")
    any_nan_mask = np.isnan(x_array) | np.isnan(y_array)
    if np.any(any_nan_mask):
        nan_count = int(np.sum(any_nan_mask))
        nan_percentage = nan_count / len(x_array) * 100
        logger.warning("Found %d rows (%.1f%%) with missing values in %s", nan_count, nan_percentage, file_path)
        if nan_percentage > ProcessingConstants.MAX_MISSING_VALUE_PERCENTAGE:
            raise ValueError(f"Too many missing values ({nan_percentage:.1f}%) in file: {file_path}. "
                             "Please clean the data or check file format.")
        x_array = x_array[~any_nan_mask]
        y_array = y_array[~any_nan_mask]
        logger.info("Removed %d rows with missing values. Remaining data points: %d", nan_count, len(x_array))
    if len(x_array) < ProcessingConstants.MIN_DATA_POINTS:
        raise ValueError(f"Insufficient valid data points ({len(x_array)}) after cleaning missing values. "
                         f"Minimum required: {ProcessingConstants.MIN_DATA_POINTS}")
    x_array, y_array = _remove_duplicate_x(x_array, y_array)
    if not np.all(np.diff(x_array) > 0):
        logger.info("Sorting data by x")
        sort_indices = np.argsort(x_array, kind='stable')
        x_array = x_array[sort_indices]
        y_array = y_array[sort_indices]
    return x_array, y_array


def _remove_duplicate_x(x_array: np.ndarray, y_array: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Remove duplicate x entries, keeping the first occurrence."""
    unique_x, unique_indices = np.unique(x_array, return_index=True)
    if len(unique_x) < len(x_array):
        duplicates: List[float] = sorted(set(x_array[np.setdiff1d(np.arange(len(x_array)), unique_indices)]))
        logger.warning("Found %d duplicate x entries %s. Removing duplicates.",
                       len(x_array) - len(unique_x), duplicates[:ProcessingConstants.MAX_LOGGED_ARRAY_LENGTH])
        unique_indices = np.sort(unique_indices)
        x_array = x_array[unique_indices]
        y_array = y_array[unique_indices]
    return x_array, y_array

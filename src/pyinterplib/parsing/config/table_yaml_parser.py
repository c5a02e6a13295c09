import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
from ruamel.yaml import YAML, constructor, scanner

from pyinterplib.algorithms import get_interpolation_type
from pyinterplib.algorithms.sampling import ensure_ascending_order
from pyinterplib.core.spline import Spline
from pyinterplib.core.typedefs import InterpolationType
from pyinterplib.parsing.config.yaml_keys import NAME_KEY, INTERPOLATION_KEY, X_KEY, Y_KEY, \
    FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY
from pyinterplib.parsing.io.data_handler import load_table_data
from pyinterplib.parsing.validation.array_validator import validate_table

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise constructor.DuplicateKeyError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise scanner.ScannerError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing YAML file %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Error parsing {self.config_path}: {str(e)}") from e


class TableYAMLParser(YAMLFileParser):
    """
    Parser for sample-table configuration files in YAML format.

    The table is given either inline (x and y lists) or as a data file with
    the two columns to read. Relative file paths are resolved against the
    directory of the YAML file.
    """

    INLINE_KEYS = {X_KEY, Y_KEY}
    FILE_KEYS = {FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY}
    VALID_KEYS = {NAME_KEY, INTERPOLATION_KEY} | INLINE_KEYS | FILE_KEYS

    # --- Constructor ---
    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        logger.info("Initializing TableYAMLParser for: %s", yaml_path)
        self._validate_config()
        self.name = str(self.config.get(NAME_KEY, self.config_path.stem))
        self.interp_type = self._get_interpolation_type()
        self._table: Optional[Tuple[np.ndarray, np.ndarray]] = None

    # --- Public API ---
    @property
    def is_file_table(self) -> bool:
        return FILE_PATH_KEY in self.config

    def load_table(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Return the (x_array, y_array) sample table, reading the data file on first use.

        An inline table given in strictly descending x order is flipped.
        """
        if self._table is None:
            if self.is_file_table:
                x_array, y_array = self._load_file_table()
            else:
                x_array = np.asarray(self.config[X_KEY], dtype=float)
                y_array = np.asarray(self.config[Y_KEY], dtype=float)
                x_array, y_array = ensure_ascending_order(x_array, y_array)
            validate_table(x_array, y_array, self.interp_type.min_size, self.name)
            self._table = (x_array, y_array)
        return self._table

    def create_spline(self, enable_plotting: bool = False,
                      plot_dir: Optional[Union[str, Path]] = None) -> Spline:
        """
        Fit the configured interpolation to the configured table.
        Args:
            enable_plotting: Save a diagnostic plot of the fitted spline
            plot_dir: Directory for the plot, defaults to 'interpolation_plots'
                next to the YAML file
        Returns:
            Spline: Fitted table-owning interpolant
        """
        logger.info("Creating spline '%s' (%s) from configuration: %s",
                    self.name, self.interp_type.name, self.config_path)
        try:
            x_array, y_array = self.load_table()
            spline = Spline(self.interp_type, x_array, y_array, name=self.name)
        except Exception as e:
            logger.error("Failed to create spline from %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Failed to create spline '{self.name}' \n -> {str(e)}") from e
        if enable_plotting:
            # Imported here so that matplotlib is only loaded when plotting
            from pyinterplib.visualization.plotters import SplineVisualizer
            output_dir = Path(plot_dir) if plot_dir is not None else self.base_dir / "interpolation_plots"
            SplineVisualizer(output_dir).plot_spline(spline)
        logger.info("Successfully created spline: %s", self.name)
        return spline

    # --- Validation Methods ---
    def _validate_config(self) -> None:
        """Validate the configuration structure and content."""
        logger.debug("Starting configuration validation")
        if not isinstance(self.config, dict):
            logger.error("Invalid YAML structure - expected dictionary at root level")
            raise ValueError("The YAML file must start with a dictionary/object structure with key-value pairs, "
                             "not a list or scalar value")
        self._validate_field_names()
        if INTERPOLATION_KEY not in self.config:
            raise ValueError(f"Missing required field: {INTERPOLATION_KEY}")
        present = set(self.config.keys())
        has_inline = bool(present & self.INLINE_KEYS)
        has_file = bool(present & self.FILE_KEYS)
        if has_inline and has_file:
            raise ValueError(f"Specify the table either inline ({X_KEY}, {Y_KEY}) or as a file "
                             f"({FILE_PATH_KEY}, {X_COLUMN_KEY}, {Y_COLUMN_KEY}), not both")
        if not has_inline and not has_file:
            raise ValueError(f"Missing sample table: provide '{X_KEY}' and '{Y_KEY}' or '{FILE_PATH_KEY}'")
        required = self.INLINE_KEYS if has_inline else self.FILE_KEYS
        missing_fields = required - present
        if missing_fields:
            logger.error("Missing required fields: %s", missing_fields)
            raise ValueError(f"Missing required fields: {', '.join(sorted(missing_fields))}")
        if has_inline:
            self._validate_inline_table()
        logger.debug("Configuration validation completed successfully")

    def _validate_field_names(self) -> None:
        """Reject unknown top-level keys, suggesting the closest valid key."""
        extra_fields = set(self.config.keys()) - self.VALID_KEYS
        if extra_fields:
            logger.error("Unknown fields found in configuration: %s", extra_fields)
            suggestions = {
                field: get_close_matches(str(field), self.VALID_KEYS, n=1, cutoff=0.6)
                for field in sorted(extra_fields, key=str)
            }
            error_msg = "Unknown fields found in configuration: \n ->"
            for field, matches in suggestions.items():
                suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
                error_msg += f" - '{field}'{suggestion}\n"
            raise ValueError(error_msg)

    def _validate_inline_table(self) -> None:
        for key in (X_KEY, Y_KEY):
            values = self.config[key]
            if not isinstance(values, list):
                raise ValueError(f"'{key}' must be a list of numbers, got {type(values).__name__}")
            for i, value in enumerate(values):
                # bool is a subclass of int but never a valid sample
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(f"'{key}[{i}]' must be a number, got {value!r}")

    def _get_interpolation_type(self) -> InterpolationType:
        try:
            return get_interpolation_type(self.config[INTERPOLATION_KEY])
        except ValueError as e:
            raise ValueError(f"Invalid '{INTERPOLATION_KEY}' in {self.config_path}: {str(e)}") from e

    # --- Processing Methods ---
    def _load_file_table(self) -> Tuple[np.ndarray, np.ndarray]:
        file_path = Path(self.config[FILE_PATH_KEY])
        if not file_path.is_absolute():
            file_path = self.base_dir / file_path
        logger.debug("Resolved data file path: %s", file_path)
        file_config = {
            FILE_PATH_KEY: str(file_path),
            X_COLUMN_KEY: self.config[X_COLUMN_KEY],
            Y_COLUMN_KEY: self.config[Y_COLUMN_KEY],
        }
        return load_table_data(file_config)

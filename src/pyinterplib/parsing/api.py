import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pyinterplib.algorithms import INTERPOLATION_TYPES
from pyinterplib.core.spline import Spline
from pyinterplib.parsing.config.table_yaml_parser import TableYAMLParser

logger = logging.getLogger(__name__)


def create_spline(yaml_path: Union[str, Path], enable_plotting: bool = False) -> Spline:
    """
    Create a fitted spline from a YAML table configuration file.

    This function serves as the main entry point for building interpolants from
    configuration files. The file names the interpolation algorithm and gives the
    sample table either inline or as a data file.
    Args:
        yaml_path: Path to the YAML configuration file
        enable_plotting: Whether to save a diagnostic plot next to the YAML file (default: False)
    Returns:
        The fitted Spline
    Examples:
        # Fit a Steffen spline and evaluate it
        spline = create_spline('table.yaml')
        value = spline(2.5)
        slope = spline.eval_deriv(2.5)
    """
    logger.info("Creating spline from: %s, plotting=%s", yaml_path, enable_plotting)
    try:
        parser = TableYAMLParser(yaml_path=yaml_path)
        spline = parser.create_spline(enable_plotting=enable_plotting)
        logger.info("Successfully created spline '%s' (%s) with %d samples",
                    spline.label, spline.name, len(spline))
        return spline
    except Exception as e:
        logger.error("Failed to create spline from %s: %s", yaml_path, e, exc_info=True)
        raise


def get_supported_types() -> List[str]:
    """
    Returns a list of all supported interpolation algorithms.
    Returns:
        List of names that can be used as 'interpolation' in YAML files.
    """
    return list(INTERPOLATION_TYPES)


def validate_yaml_file(yaml_path: Union[str, Path]) -> bool:
    """
    Validate a YAML file, including its sample table, without fitting.
    Args:
        yaml_path: Path to the YAML configuration file to validate
    Returns:
        True if the file is valid
    Raises:
        FileNotFoundError: If the file (or the data file it references) doesn't exist
        ValueError: If the YAML content or the table is invalid
    """
    logger.info("Validating YAML file: %s", yaml_path)
    try:
        parser = TableYAMLParser(yaml_path)
        parser.load_table()
        logger.info("YAML validation successful for: %s", yaml_path)
        return True
    except FileNotFoundError as e:
        logger.error("File not found while validating %s: %s", yaml_path, e)
        raise FileNotFoundError(f"File not found while validating {yaml_path}: {str(e)}") from e
    except ValueError as e:
        logger.error("YAML validation failed for %s: %s", yaml_path, e)
        raise ValueError(f"YAML validation failed: {str(e)}") from e
    except Exception as e:
        logger.error("Unexpected error validating YAML %s: %s", yaml_path, e, exc_info=True)
        raise ValueError(f"Unexpected error validating YAML: {str(e)}") from e


def get_table_info(yaml_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Get basic information about a table configuration without fitting it.
    Args:
        yaml_path: Path to the YAML configuration file
    Returns:
        Dictionary containing table information
    Example:
        info = get_table_info('table.yaml')
        print(f"Table: {info['name']} ({info['interpolation']})")
        print(f"Range: {info['x_range']}")
    """
    try:
        parser = TableYAMLParser(yaml_path=yaml_path)
        x_array, y_array = parser.load_table()
        return {
            'name': parser.name,
            'interpolation': parser.interp_type.name,
            'min_size': parser.interp_type.min_size,
            'source': 'file' if parser.is_file_table else 'inline',
            'num_points': len(x_array),
            'x_range': (float(x_array[0]), float(x_array[-1])),
            'y_range': (float(y_array.min()), float(y_array.max())),
        }
    except Exception as e:
        logger.error("Failed to get table info from %s: %s", yaml_path, e, exc_info=True)
        raise

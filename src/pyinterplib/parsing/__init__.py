"""
Parsing and configuration modules for pyinterplib.

This package handles YAML table configuration files, reading sample tables
from data files, validation and spline creation from configuration files.
"""

from .api import create_spline, get_supported_types, validate_yaml_file, get_table_info
from .config.table_yaml_parser import TableYAMLParser
from .io.data_handler import load_table_data

__all__ = [
    'create_spline',
    'get_supported_types',
    'validate_yaml_file',
    'get_table_info',
    'TableYAMLParser',
    'load_table_data'
]

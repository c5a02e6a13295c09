"""Reading sample tables from data files."""

from .data_handler import load_table_data

__all__ = ["load_table_data"]

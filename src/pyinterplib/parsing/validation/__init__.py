"""Validation utilities for pyinterplib."""

from .array_validator import is_monotonic, validate_table

__all__ = [
    "is_monotonic",
    "validate_table"
]

"""Constants and reference data for pyinterplib."""

from .constants import ProcessingConstants, ErrorMessages, FileConstants

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants"
]

"""Visualization of fitted interpolants."""

from .plotters import SplineVisualizer

__all__ = ["SplineVisualizer"]

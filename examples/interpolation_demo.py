"""Demonstration script for table interpolation."""
import logging
import math
from pathlib import Path

import numpy as np
import sympy as sp

from pyinterplib import (INTERPOLATION_TYPES, LookupAccelerator, PiecewiseBuilder, Spline,
                         create_spline, get_table_info, sample_function)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('fontTools').setLevel(logging.WARNING)


def demonstrate_yaml_tables():
    """Fit the tables shipped next to this script and print a few values."""
    table_dir = Path(__file__).parent / "tables"
    for yaml_path in sorted(table_dir.glob("*.yaml")):
        info = get_table_info(yaml_path)
        print(f"\n{'=' * 80}")
        print(f"TABLE: {info['name']} ({info['interpolation']}, {info['num_points']} samples, {info['source']})")
        print(f"{'=' * 80}")
        spline = create_spline(yaml_path, enable_plotting=True)
        x_min, x_max = spline.x_range
        accel = LookupAccelerator()
        for x in np.linspace(x_min, x_max, 7):
            print(f"x = {x:10.4f}   y = {spline.eval(x, accel):12.6f}   "
                  f"dy/dx = {spline.eval_deriv(x, accel):12.6f}")
        print(f"Integral over [{x_min:g}, {x_max:g}]: {spline.eval_integ(x_min, x_max):.6f}")
        print(f"Accelerator: {accel}")


def compare_algorithms():
    """Compare every algorithm on samples of the Runge function."""
    x, y = sample_function(lambda t: 1.0 / (1.0 + 25.0 * t * t), np.linspace(-1.0, 1.0, 11))
    x_probe = 0.95
    exact = 1.0 / (1.0 + 25.0 * x_probe * x_probe)
    print(f"\n{'=' * 80}")
    print(f"RUNGE FUNCTION AT x = {x_probe} (exact: {exact:.6f})")
    print(f"{'=' * 80}")
    for name, interp_type in INTERPOLATION_TYPES.items():
        with Spline(interp_type, x, y) as spline:
            value = spline(x_probe)
            print(f"{name:<18}: {value:12.6f}   error = {abs(value - exact):.2e}")


def export_symbolic():
    """Print a fitted spline as a SymPy expression."""
    x, y = sample_function(math.sqrt, [0.0, 1.0, 4.0, 9.0])
    spline = Spline(INTERPOLATION_TYPES["steffen"], x, y, name="sqrt")
    t = sp.Symbol('t')
    print(f"\n{'=' * 80}")
    print("SYMBOLIC EXPORT OF sqrt(t)")
    print(f"{'=' * 80}")
    print(PiecewiseBuilder.build_from_spline(spline, t))


if __name__ == "__main__":
    setup_logging()
    demonstrate_yaml_tables()
    compare_algorithms()
    export_symbolic()

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.gridspec import GridSpec

from pyinterplib.algorithms.search import LookupAccelerator
from pyinterplib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class SplineVisualizer:
    """Diagnostic plots of fitted splines: value, first and second derivative."""

    COLORS = {
        'samples': '#d62728',
        'value': '#1f77b4',
        'deriv': '#2ca02c',
        'deriv2': '#9467bd',
    }

    # --- Constructor ---
    def __init__(self, plot_directory: Union[str, Path] = "interpolation_plots") -> None:
        self.plot_directory = Path(plot_directory)
        self.fig = None
        self.setup_style()
        logger.debug("SplineVisualizer initialized, output directory: %s", self.plot_directory)

    @staticmethod
    def setup_style() -> None:
        plt.rcParams.update({
            'font.size': 10,
            'font.family': 'sans-serif',
            'font.sans-serif': ['DejaVu Sans', 'Arial', 'Helvetica', 'Liberation Sans'],
            'axes.titlesize': 12,
            'axes.labelsize': 10,
            'xtick.labelsize': 9,
            'ytick.labelsize': 9,
            'legend.fontsize': 9,
            'figure.titlesize': 14,
            'axes.grid': True,
            'grid.alpha': 0.3,
            'grid.linestyle': '--',
            'axes.axisbelow': True,
            'figure.facecolor': 'white',
            'axes.facecolor': 'white',
            'savefig.facecolor': 'white',
            'savefig.edgecolor': 'none',
            'savefig.dpi': 300,
        })

    # --- Public API Methods ---
    @staticmethod
    def sample_curves(spline, num_points: int = ProcessingConstants.DEFAULT_VISUALIZATION_POINTS):
        """
        Evaluate a spline and its derivatives on an even grid over its range.
        Args:
            spline: Fitted Spline
            num_points: Number of grid points
        Returns:
            Tuple (x_dense, values, first_derivatives, second_derivatives)
        """
        if num_points < 2:
            raise ValueError(f"At least 2 points are needed to plot a curve, got {num_points}")
        x_min, x_max = spline.x_range
        x_dense = np.linspace(x_min, x_max, num_points)
        accel = LookupAccelerator()
        values = np.array([spline.eval(x, accel) for x in x_dense])
        first = np.array([spline.eval_deriv(x, accel) for x in x_dense])
        second = np.array([spline.eval_deriv2(x, accel) for x in x_dense])
        logger.debug("Sampled '%s' on %d points: %d accelerator hits, %d misses",
                     spline.label, num_points, accel.hit_count, accel.miss_count)
        return x_dense, values, first, second

    def plot_spline(self, spline, num_points: int = ProcessingConstants.DEFAULT_VISUALIZATION_POINTS,
                    filename: Optional[str] = None) -> Path:
        """
        Plot a fitted spline and save the figure.
        Args:
            spline: Fitted Spline
            num_points: Number of evaluation points per curve
            filename: Output file name, defaults to '<label>_<type>_<timestamp>.png'
        Returns:
            Path of the saved image
        """
        logger.info("Plotting spline '%s' (%s)", spline.label, spline.name)
        x_dense, values, first, second = self.sample_curves(spline, num_points)
        try:
            self.fig = plt.figure(figsize=(12, 12))
            gs = GridSpec(3, 1, figure=self.fig)
            ax_value = self.fig.add_subplot(gs[0, 0])
            ax_value.plot(x_dense, values, color=self.COLORS['value'], linewidth=1.5, label=spline.name)
            ax_value.scatter(spline.x, spline.y, color=self.COLORS['samples'], s=20, zorder=3, label='samples')
            ax_value.set_ylabel('y')
            x_min, x_max = spline.x_range
            integral = spline.eval_integ(x_min, x_max)
            ax_value.set_title(f"Value (integral over [{x_min:g}, {x_max:g}] = {integral:.6g})")
            ax_value.legend(loc='best', framealpha=0.9)
            ax_deriv = self.fig.add_subplot(gs[1, 0], sharex=ax_value)
            ax_deriv.plot(x_dense, first, color=self.COLORS['deriv'], linewidth=1.5)
            ax_deriv.set_ylabel("y'")
            ax_deriv.set_title("First derivative")
            ax_deriv2 = self.fig.add_subplot(gs[2, 0], sharex=ax_value)
            ax_deriv2.plot(x_dense, second, color=self.COLORS['deriv2'], linewidth=1.5)
            ax_deriv2.set_ylabel("y''")
            ax_deriv2.set_xlabel('x')
            ax_deriv2.set_title("Second derivative")
            for ax in (ax_value, ax_deriv, ax_deriv2):
                for x_sample in spline.x:
                    ax.axvline(x_sample, color='gray', linestyle=':', linewidth=0.5, alpha=0.5)
            self.fig.suptitle(f"Interpolation: {spline.label} ({spline.name}, {len(spline)} samples)",
                              fontsize=14, fontweight='bold')
            self.plot_directory.mkdir(parents=True, exist_ok=True)
            if filename is None:
                timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
                filename = f"{spline.label.replace(' ', '_')}_{spline.name}_{timestamp}.png"
            filepath = self.plot_directory / filename
            self.fig.savefig(str(filepath), bbox_inches="tight", facecolor='white', edgecolor='none')
            logger.info("Spline plot saved as %s", filepath)
            return filepath
        finally:  # Always close the figure to prevent memory leaks
            if self.fig is not None:
                plt.close(self.fig)
                self.fig = None
                logger.debug("Figure closed and memory cleaned up")

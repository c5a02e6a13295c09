import logging
from typing import Optional

import numpy as np
import sympy as sp

from pyinterplib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class PiecewiseBuilder:
    """Conversion of fitted interpolants into symbolic piecewise functions."""

    @staticmethod
    def build_from_spline(spline, x_symbol: Optional[sp.Symbol] = None,
                          extrapolate: bool = False) -> sp.Piecewise:
        """
        Main entry point for symbolic export of a fitted spline.
        Args:
            spline: Fitted Spline (table-owning interpolant)
            x_symbol: Independent variable of the result, defaults to Symbol('x')
            extrapolate: Extend the first and last segment beyond the table;
                otherwise the result is nan outside [x_0, x_{n-1}]
        Returns:
            sp.Piecewise: One polynomial branch per segment
        """
        return PiecewiseBuilder.build_from_interpolant(
            spline.interpolant, spline.x, spline.y, x_symbol, extrapolate)

    @staticmethod
    def build_from_interpolant(interpolant, x_array: np.ndarray, y_array: np.ndarray,
                               x_symbol: Optional[sp.Symbol] = None,
                               extrapolate: bool = False) -> sp.Piecewise:
        """
        Symbolic export of an initialized Interpolant and the table it was fitted to.
        Args:
            interpolant: Initialized Interpolant
            x_array: Sample points the interpolant was fitted to
            y_array: Sample values the interpolant was fitted to
            x_symbol: Independent variable of the result, defaults to Symbol('x')
            extrapolate: Extend the first and last segment beyond the table
        Returns:
            sp.Piecewise: One polynomial branch per segment
        """
        if x_symbol is None:
            x_symbol = sp.Symbol('x')
        x_array = np.asarray(x_array, dtype=float)
        n_segments = len(x_array) - 1
        logger.info("Building piecewise function for '%s' interpolant with %d segments",
                    interpolant.name, n_segments)
        state = interpolant.state
        conditions = []
        for i in range(n_segments):
            expr = PiecewiseBuilder._segment_expression(
                state.segment_polynomial(x_array, y_array, i), x_symbol, x_array[i])
            x_lo, x_hi = float(x_array[i]), float(x_array[i + 1])
            if i == n_segments - 1:
                # The last segment includes its right end
                upper = sp.true if extrapolate else x_symbol <= x_hi
            else:
                upper = x_symbol < x_hi
            lower = sp.true if (i == 0 and extrapolate) else x_symbol >= x_lo
            conditions.append((expr, sp.And(lower, upper)))
            if n_segments <= ProcessingConstants.MAX_LOGGED_ARRAY_LENGTH:
                logger.debug("Segment %d on [%g, %g]: %s", i, x_lo, x_hi, expr)
        if not extrapolate:
            conditions.append((sp.nan, True))
        result = sp.Piecewise(*conditions)
        logger.info("Successfully built piecewise function with %d conditions", len(conditions))
        return result

    @staticmethod
    def _segment_expression(poly, x_symbol: sp.Symbol, x_lo: float) -> sp.Expr:
        """Polynomial in t = x - x_lo written out in Horner form."""
        t = x_symbol - sp.Float(float(x_lo))
        coefficients = [float(c) for c in poly.coef]
        expr = sp.Float(coefficients[-1])
        for coefficient in reversed(coefficients[:-1]):
            expr = sp.Float(coefficient) + t * expr
        return expr

"""Solvers for the symmetric tridiagonal systems arising in cubic spline fitting."""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def solve_symm_tridiag(diag: np.ndarray, offdiag: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """
    Solve a symmetric tridiagonal system with the Thomas algorithm.

    Args:
        diag: Main diagonal, length N
        offdiag: Off-diagonal, length N - 1 (offdiag[i] couples rows i and i + 1)
        rhs: Right-hand side, length N
    Returns:
        Solution vector of length N
    """
    n = len(diag)
    if n == 0:
        return np.empty(0)
    u = np.empty(n)
    z = np.empty(n)
    # Forward elimination
    u[0] = diag[0]
    z[0] = rhs[0]
    for i in range(1, n):
        l = offdiag[i - 1] / u[i - 1]
        u[i] = diag[i] - l * offdiag[i - 1]
        z[i] = rhs[i] - l * z[i - 1]
    # Back substitution
    solution = np.empty(n)
    solution[n - 1] = z[n - 1] / u[n - 1]
    for i in range(n - 2, -1, -1):
        solution[i] = (z[i] - offdiag[i] * solution[i + 1]) / u[i]
    return solution


def solve_symm_cyc_tridiag(diag: np.ndarray, offdiag: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """
    Solve a symmetric cyclic tridiagonal system.

    offdiag has length N; offdiag[N - 1] couples the last row with the first.
    The corner terms are removed with a rank-one Sherman-Morrison correction
    and the remaining tridiagonal systems are solved with the Thomas algorithm.
    Requires N >= 3.
    """
    n = len(diag)
    if n < 3:
        raise ValueError(f"Cyclic tridiagonal solver requires at least 3 equations, got {n}")
    corner = offdiag[n - 1]
    gamma = -diag[0]
    modified = np.array(diag, dtype=float)
    modified[0] -= gamma
    modified[n - 1] -= corner * corner / gamma
    inner = np.asarray(offdiag[:n - 1], dtype=float)
    y = solve_symm_tridiag(modified, inner, rhs)
    u = np.zeros(n)
    u[0] = gamma
    u[n - 1] = corner
    z = solve_symm_tridiag(modified, inner, u)
    # v = (1, 0, ..., 0, corner / gamma)
    v_dot_y = y[0] + corner / gamma * y[n - 1]
    v_dot_z = z[0] + corner / gamma * z[n - 1]
    logger.debug("Cyclic tridiagonal correction factor: %.6e", v_dot_y / (1.0 + v_dot_z))
    return y - z * (v_dot_y / (1.0 + v_dot_z))

"""Shared pytest fixtures for pyinterplib tests."""
import pytest
import numpy as np

from pyinterplib.algorithms import INTERPOLATION_TYPES, LookupAccelerator


@pytest.fixture
def line_table():
    """Samples of y = x on 0..4."""
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    return x, x.copy()


@pytest.fixture
def runge_table():
    """Samples of 1 / (1 + x^2) on [0, 1] with step 0.2."""
    x = np.array([0.0, 0.2, 0.4, 0.6, 0.8, 1.0])
    y = np.array([1.0, 0.961538461538461, 0.862068965517241,
                  0.735294117647059, 0.609756097560976, 0.5])
    return x, y


@pytest.fixture
def monotonic_table():
    """Increasing data with a flat stretch and a steep jump."""
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0])
    y = np.array([0.0, 0.1, 0.1, 0.1, 2.0, 4.5, 4.6, 5.0])
    return x, y


@pytest.fixture
def irregular_table():
    """Non-uniform grid with oscillating values."""
    x = np.array([-1.5, -0.7, 0.0, 0.4, 1.3, 2.2, 2.5, 3.9])
    y = np.array([0.3, -1.2, 0.8, 2.1, -0.4, 0.0, 1.7, -0.9])
    return x, y


@pytest.fixture
def accel():
    """Fresh lookup accelerator."""
    return LookupAccelerator()


@pytest.fixture(params=sorted(INTERPOLATION_TYPES))
def interp_type(request):
    """Every registered interpolation algorithm."""
    return INTERPOLATION_TYPES[request.param]


@pytest.fixture
def yaml_file(tmp_path):
    """Factory writing YAML content into a temporary directory."""
    def _write(content: str, name: str = "table.yaml"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write

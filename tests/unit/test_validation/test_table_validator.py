"""Unit tests for table validation."""

import math

import pytest
import numpy as np

from pyinterplib.core.exceptions import DomainError
from pyinterplib.parsing.validation.array_validator import is_monotonic, validate_table


class TestIsMonotonic:
    """Test cases for is_monotonic."""
    def test_strictly_increasing(self):
        assert is_monotonic(np.array([1.0, 2.0, 3.0]))

    def test_equal_values_are_rejected(self):
        with pytest.raises(DomainError, match="not strictly increasing at index 2"):
            is_monotonic(np.array([1.0, 2.0, 2.0]))

    def test_warning_instead_of_error(self, caplog):
        assert not is_monotonic(np.array([1.0, 0.5]), "T", raise_error=False)
        assert "T is not strictly increasing" in caplog.text

    def test_error_shows_surrounding_values(self):
        with pytest.raises(DomainError, match="Surrounding values"):
            is_monotonic(np.array([0.0, 1.0, 2.0, 1.5, 3.0]))

    def test_threshold_rejects_small_steps(self):
        with pytest.raises(DomainError, match="at index 1"):
            is_monotonic(np.array([1.0, 1.0 + 1e-9, 2.0]), threshold=1e-6)

    def test_decreasing_array(self):
        with pytest.raises(DomainError, match="not strictly increasing at index 1"):
            is_monotonic(np.array([3.0, 2.0, 1.0]))


class TestValidateTable:
    """Test cases for validate_table."""
    def test_valid(self):
        validate_table([0.0, 1.0, 2.0], [5.0, 4.0, 6.0], min_size=3)

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="must have the same length"):
            validate_table([0.0, 1.0], [0.0])

    def test_not_one_dimensional(self):
        with pytest.raises(ValueError, match="one-dimensional"):
            validate_table(np.zeros((2, 2)), np.zeros((2, 2)))

    def test_too_few_samples(self):
        with pytest.raises(DomainError, match="at least 5 samples required, got 3"):
            validate_table([0.0, 1.0, 2.0], [0.0, 1.0, 2.0], min_size=5, name="k")

    @pytest.mark.parametrize("x, y, label", [
        ([0.0, math.inf, 2.0], [0.0, 1.0, 2.0], "x"),
        ([0.0, 1.0, 2.0], [0.0, 1.0, math.nan], "y"),
    ])
    def test_non_finite(self, x, y, label):
        with pytest.raises(DomainError, match=f"non-finite {label} value"):
            validate_table(x, y)

    def test_not_increasing(self):
        with pytest.raises(DomainError, match="cp x values is not strictly increasing"):
            validate_table([0.0, 2.0, 1.0], [0.0, 1.0, 2.0], name="cp")

"""Tests for config.py: validation, size ramp and copying.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from falsify import Config


def _config(**overrides: object) -> Config:
    values: dict[str, object] = {
        "seed": [0, 1, 2],
        "max_size": 100.0,
        "max_tests": 100,
        "max_shrinks": 100,
    }
    values.update(overrides)
    return Config(**values)  # type: ignore[arg-type]


class TestConfigConstruction:
    """Test Config construction and validation."""

    def test_seed_normalized_to_tuple(self) -> None:
        """List seeds are stored as tuples."""
        assert _config(seed=[4, 5]).seed == (4, 5)

    def test_frozen(self) -> None:
        """Config is immutable."""
        config = _config()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_tests = 5  # type: ignore[misc]

    def test_equal_configs_compare_equal(self) -> None:
        """Configs compare by value, whatever the seed sequence type."""
        assert _config(seed=[1, 2]) == _config(seed=(1, 2))

    def test_zero_tests_allowed(self) -> None:
        """max_tests == 0 is valid and means vacuous success."""
        assert _config(max_tests=0).max_tests == 0

    def test_zero_shrinks_allowed(self) -> None:
        """max_shrinks == 0 disables shrinking."""
        assert _config(max_shrinks=0).max_shrinks == 0

    def test_negative_max_tests_rejected(self) -> None:
        """Negative max_tests raises ValueError."""
        with pytest.raises(ValueError, match="max_tests must be non-negative"):
            _config(max_tests=-1)

    def test_negative_max_shrinks_rejected(self) -> None:
        """Negative max_shrinks raises ValueError."""
        with pytest.raises(ValueError, match="max_shrinks must be non-negative"):
            _config(max_shrinks=-5)

    @pytest.mark.parametrize("field", ["max_tests", "max_shrinks"])
    @pytest.mark.parametrize("value", [2.5, True, "10", None])
    def test_non_int_counts_rejected(self, field: str, value: object) -> None:
        """Counts must be plain ints; floats and bools are refused up front."""
        with pytest.raises(ValueError, match=f"{field} must be an int"):
            _config(**{field: value})

    @pytest.mark.parametrize("max_size", [-0.5, math.inf, math.nan])
    def test_invalid_max_size_rejected(self, max_size: float) -> None:
        """max_size must be finite and non-negative."""
        with pytest.raises(ValueError, match="max_size must be a finite number"):
            _config(max_size=max_size)

    def test_invalid_seed_rejected(self) -> None:
        """Seed words are validated."""
        with pytest.raises(ValueError, match="seed entries"):
            _config(seed=[1, -2])


class TestSizeRamp:
    """Test the linear size ramp."""

    def test_first_size_is_zero(self) -> None:
        """The first test runs at size 0."""
        assert _config().size_at(0) == 0.0

    def test_midpoint(self) -> None:
        """Halfway through the run the size is half of max_size."""
        assert _config(max_size=100.0, max_tests=100).size_at(50) == 50.0

    def test_last_size_below_max(self) -> None:
        """The ramp approaches but does not reach max_size."""
        config = _config(max_size=10.0, max_tests=4)

        assert [config.size_at(i) for i in range(4)] == [0.0, 2.5, 5.0, 7.5]

    @given(
        max_size=st.floats(min_value=0.0, max_value=1000.0),
        max_tests=st.integers(min_value=1, max_value=500),
    )
    def test_ramp_non_decreasing(self, max_size: float, max_tests: int) -> None:
        """Sizes never decrease and stay within [0, max_size]."""
        config = _config(max_size=max_size, max_tests=max_tests)
        sizes = [config.size_at(i) for i in range(max_tests)]

        assert sizes == sorted(sizes)
        assert all(0.0 <= size <= max_size for size in sizes)


class TestWithSeed:
    """Test Config.with_seed()."""

    def test_replaces_only_seed(self) -> None:
        """with_seed() keeps the budgets."""
        config = _config()
        reseeded = config.with_seed([9, 9])

        assert reseeded.seed == (9, 9)
        assert reseeded.max_tests == config.max_tests
        assert reseeded.max_shrinks == config.max_shrinks
        assert reseeded.max_size == config.max_size

    def test_validates_new_seed(self) -> None:
        """with_seed() validates like the constructor."""
        with pytest.raises(ValueError, match="seed entries"):
            _config().with_seed([-1])

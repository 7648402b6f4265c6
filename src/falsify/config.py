"""Run configuration.

Provides a single frozen dataclass holding every parameter of a property
run. All fields are required: there are no defaults in the core, so the
seed and budgets of a run are always stated by the caller.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import ErrorTemplate
from .random_source import Seed, normalize_seed

__all__ = ["Config"]


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable configuration for a property run.

    Attributes:
        seed: Seed words for the run's RandomSource. Any sequence of
            non-negative ints is accepted and stored as a tuple.
        max_size: Upper bound of the generation size. Sizes ramp linearly
            from 0 towards this value across the run.
        max_tests: Number of random inputs to try before declaring
            success. Zero makes every run a vacuous success.
        max_shrinks: Number of shrink candidates to try after a failure.

    Example:
        >>> config = Config(seed=[0, 1, 2], max_size=100.0, max_tests=100, max_shrinks=100)
        >>> config.seed
        (0, 1, 2)
        >>> config.size_at(50)
        50.0
    """

    seed: Seed
    max_size: float
    max_tests: int
    max_shrinks: int

    def __post_init__(self) -> None:
        """Normalize the seed and validate budgets.

        Raises:
            ValueError: If a seed word is invalid, max_size is negative or
                not finite, or max_tests/max_shrinks is not a non-negative int.
        """
        object.__setattr__(self, "seed", normalize_seed(self.seed))
        if not math.isfinite(self.max_size) or self.max_size < 0:
            raise ValueError(ErrorTemplate.invalid_max_size(self.max_size))
        for name in ("max_tests", "max_shrinks"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(ErrorTemplate.invalid_count(name, value))
            if value < 0:
                raise ValueError(ErrorTemplate.negative_count(name, value))

    def size_at(self, test_index: int) -> float:
        """Generation size for the test at test_index.

        Ramps linearly from 0 at the first test up to (but excluding)
        max_size, so early tests try small inputs and later tests larger ones.
        """
        return self.max_size * (test_index / self.max_tests)

    def with_seed(self, seed: Sequence[int]) -> Config:
        """Copy of this config with a different seed."""
        return dataclasses.replace(self, seed=tuple(seed))

"""Seeded randomness source.

Every random draw made during a run goes through one RandomSource built
from the run's seed. Replaying the same seed with the same sequence of
calls reproduces the same draws, which makes a whole run reproducible
from (seed, config).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import hashlib
import random
import secrets
from collections.abc import Sequence

from .constants import DEFAULT_SEED_LENGTH, MAX_SEED_WORD
from .errors import ErrorTemplate

__all__ = ["RandomSource", "Seed", "normalize_seed", "random_seed"]

type Seed = tuple[int, ...]


def normalize_seed(seed: Sequence[int]) -> Seed:
    """Validate seed words and return them as a tuple.

    Raises:
        ValueError: If any word is not a non-negative int
    """
    words = tuple(seed)
    for word in words:
        # bool is an int subclass but never a meaningful seed word
        if not isinstance(word, int) or isinstance(word, bool) or word < 0:
            raise ValueError(ErrorTemplate.invalid_seed_word(word))
    return words


def random_seed(length: int = DEFAULT_SEED_LENGTH) -> Seed:
    """Draw a fresh seed from OS entropy.

    The seed ends up in every RunResult, so a run started from a random
    seed can still be replayed exactly.
    """
    return tuple(secrets.randbelow(MAX_SEED_WORD) for _ in range(length))


def _seed_material(seed: Seed) -> bytes:
    # Word boundaries are preserved so (1, 23) and (12, 3) differ.
    text = ",".join(str(word) for word in seed)
    return hashlib.blake2b(text.encode("ascii"), digest_size=32).digest()


class RandomSource:
    """Deterministic pseudorandom stream owned by a single run.

    Not thread-safe. The run engine owns the source exclusively and passes
    it by reference into every generator call; it must never be copied
    mid-run.

    Attributes:
        seed: The normalized seed the stream was built from
        draws: Number of draws taken so far
    """

    __slots__ = ("_draws", "_random", "_seed")

    def __init__(self, seed: Sequence[int]) -> None:
        """Initialize the stream from a seed.

        Raises:
            ValueError: If the seed contains invalid words
        """
        self._seed = normalize_seed(seed)
        self._random = random.Random(_seed_material(self._seed))
        self._draws = 0

    @property
    def seed(self) -> Seed:
        """Seed the stream was built from."""
        return self._seed

    @property
    def draws(self) -> int:
        """Number of draws taken so far."""
        return self._draws

    def below(self, bound: int) -> int:
        """Uniform integer in [0, bound).

        Raises:
            ValueError: If bound is not positive
        """
        if bound <= 0:
            raise ValueError(ErrorTemplate.invalid_bound(bound))
        self._draws += 1
        return self._random.randrange(bound)

    def coin(self) -> bool:
        """Fair coin flip."""
        self._draws += 1
        return self._random.getrandbits(1) == 1

    def fraction(self) -> float:
        """Uniform float in [0.0, 1.0)."""
        self._draws += 1
        return self._random.random()

    def uniform(self, low: float, high: float) -> float:
        """Uniform float between low and high."""
        self._draws += 1
        return self._random.uniform(low, high)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed!r}, draws={self._draws})"

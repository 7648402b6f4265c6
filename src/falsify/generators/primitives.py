"""Built-in generators for scalar types.

Each generator defines the magnitude its shrink never increases:
integers by absolute value, floats by absolute value, booleans with
False < True, and characters by rank in their alphabet ordering.
"""

from __future__ import annotations

import math
import string
import sys

from falsify.constants import MAX_UNSIGNED
from falsify.errors import ErrorTemplate
from falsify.random_source import RandomSource

from .base import Generator, size_bound

__all__ = [
    "Booleans",
    "Characters",
    "Floats",
    "Integers",
    "UnsignedIntegers",
]


class UnsignedIntegers(Generator[int]):
    """Integers in [0, max_value]."""

    __slots__ = ("max_value",)

    def __init__(self, max_value: int = MAX_UNSIGNED) -> None:
        self.max_value = max_value

    def grow(self, source: RandomSource, size: float) -> int:
        return source.below(min(size_bound(size), self.max_value) + 1)

    def shrink(self, source: RandomSource, value: int) -> int:
        return source.below(value + 1)

    def magnitude(self, value: int) -> int:
        return value

    def __repr__(self) -> str:
        return f"UnsignedIntegers(max_value={self.max_value})"


class Integers(Generator[int]):
    """Signed integers with absolute value bounded by size.

    Shrinking keeps the sign and draws a smaller absolute value, so
    negative counterexamples stay negative unless they reach zero.
    """

    __slots__ = ()

    def grow(self, source: RandomSource, size: float) -> int:
        absolute = source.below(size_bound(size) + 1)
        return -absolute if source.coin() else absolute

    def shrink(self, source: RandomSource, value: int) -> int:
        absolute = source.below(abs(value) + 1)
        return -absolute if value < 0 else absolute

    def magnitude(self, value: int) -> int:
        return abs(value)

    def __repr__(self) -> str:
        return "Integers()"


class Booleans(Generator[bool]):
    """Booleans ordered False < True."""

    __slots__ = ()

    def grow(self, source: RandomSource, size: float) -> bool:
        if size_bound(size) == 0:
            return False
        return source.coin()

    def shrink(self, source: RandomSource, value: bool) -> bool:
        return False

    def magnitude(self, value: bool) -> int:
        return int(value)

    def __repr__(self) -> str:
        return "Booleans()"


class Floats(Generator[float]):
    """Finite floats in [-size, size].

    Shrinking either truncates towards zero or scales the value by a
    random fraction; both keep the sign and never grow the absolute value.
    """

    __slots__ = ()

    def grow(self, source: RandomSource, size: float) -> float:
        return source.uniform(-size, size)

    def shrink(self, source: RandomSource, value: float) -> float:
        if not math.isfinite(value):
            return 0.0
        if source.coin():
            return float(math.trunc(value))
        return value * source.fraction()

    def magnitude(self, value: float) -> float:
        return abs(value)

    def __repr__(self) -> str:
        return "Floats()"


# Printable ASCII ordered simplest first. Together with the control
# characters and the remaining code points below it ranks every
# non-surrogate code point exactly once.
_SIMPLE = (
    string.ascii_lowercase
    + string.ascii_uppercase
    + string.digits
    + string.punctuation
    + " "
)
_SIMPLE_RANKS = {char: rank for rank, char in enumerate(_SIMPLE)}
_CONTROL_COUNT = 0x20
_REST_START = 0x7F
_SURROGATES = range(0xD800, 0xE000)
_MAX_RANK = len(_SIMPLE) + _CONTROL_COUNT + (sys.maxunicode + 1 - _REST_START) - len(_SURROGATES) - 1


def _default_char(rank: int) -> str:
    if rank < len(_SIMPLE):
        return _SIMPLE[rank]
    rank -= len(_SIMPLE)
    if rank < _CONTROL_COUNT:
        return chr(rank)
    code = rank - _CONTROL_COUNT + _REST_START
    if code >= _SURROGATES.start:
        code += len(_SURROGATES)
    return chr(code)


def _default_rank(char: str) -> int:
    if char in _SIMPLE_RANKS:
        return _SIMPLE_RANKS[char]
    code = ord(char)
    if code < _CONTROL_COUNT:
        return len(_SIMPLE) + code
    # Lone surrogates rank with the first code point after the block.
    if code in _SURROGATES:
        code = _SURROGATES.stop
    if code >= _SURROGATES.stop:
        code -= len(_SURROGATES)
    return len(_SIMPLE) + _CONTROL_COUNT + code - _REST_START


class Characters(Generator[str]):
    """Single characters ranked from simplest to most complex.

    The default ordering starts with ASCII lowercase, uppercase, digits,
    punctuation and space, then ASCII control characters, then every
    other code point in code point order (surrogates excluded). A custom
    alphabet defines the ordering by position instead.

    Size bounds the rank, so small sizes only produce simple characters.

    Example:
        >>> Characters().magnitude("a")
        0
        >>> Characters(alphabet="xyz").magnitude("z")
        2
    """

    __slots__ = ("alphabet", "_ranks")

    def __init__(self, alphabet: str | None = None) -> None:
        """Initialize the generator.

        Raises:
            ValueError: If alphabet is an empty string
        """
        if alphabet is not None:
            alphabet = "".join(dict.fromkeys(alphabet))
            if not alphabet:
                raise ValueError(ErrorTemplate.empty_alphabet())
            self._ranks: dict[str, int] | None = {c: i for i, c in enumerate(alphabet)}
        else:
            self._ranks = None
        self.alphabet = alphabet

    @property
    def max_rank(self) -> int:
        """Rank of the most complex character."""
        if self.alphabet is None:
            return _MAX_RANK
        return len(self.alphabet) - 1

    def character(self, rank: int) -> str:
        """Character at rank."""
        if self.alphabet is None:
            return _default_char(rank)
        return self.alphabet[rank]

    def grow(self, source: RandomSource, size: float) -> str:
        return self.character(source.below(min(size_bound(size), self.max_rank) + 1))

    def shrink(self, source: RandomSource, value: str) -> str:
        return self.character(source.below(self.magnitude(value) + 1))

    def magnitude(self, value: str) -> int:
        """Rank of value.

        Raises:
            ValueError: If value is not in a custom alphabet
        """
        if self._ranks is None:
            return _default_rank(value)
        try:
            return self._ranks[value]
        except KeyError:
            raise ValueError(ErrorTemplate.character_not_in_alphabet(value)) from None

    def __repr__(self) -> str:
        if self.alphabet is None:
            return "Characters()"
        return f"Characters(alphabet={self.alphabet!r})"

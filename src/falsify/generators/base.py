"""Generator capability interface.

A Generator produces values of one type at a requested size and derives
simpler variants of existing values. Generators hold no mutable state: all
randomness comes from the RandomSource passed into each call, so replaying
a seed replays the values.

Contract:
    grow(source, size): magnitude(result) <= size
        (integral magnitudes are bounded by floor(size))
    shrink(source, value): magnitude(result) <= magnitude(value)
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable

from falsify.random_source import RandomSource

__all__ = ["Generator", "Mapped", "size_bound"]


def size_bound(size: float) -> int:
    """Integer magnitude limit for a generation size."""
    return max(0, math.floor(size))


class Generator[T](ABC):
    """Produces and simplifies values of type T."""

    __slots__ = ()

    @abstractmethod
    def grow(self, source: RandomSource, size: float) -> T:
        """Produce a value whose magnitude is bounded by size."""

    @abstractmethod
    def shrink(self, source: RandomSource, value: T) -> T:
        """Produce a value no larger than value.

        May return a value equal to the input when nothing smaller exists.
        """

    @abstractmethod
    def magnitude(self, value: T) -> int | float:
        """Natural size measure of value (length, absolute value, rank)."""

    def map[U](self, pack: Callable[[T], U], unpack: Callable[[U], T]) -> Mapped[T, U]:
        """Derive a generator for another type through a bijection."""
        return Mapped(self, pack, unpack)


class Mapped[T, U](Generator[U]):
    """Generator for U built on a generator for T.

    Values are grown and shrunk in T and converted with pack; shrinking a
    U first converts it back with unpack.

    Example:
        >>> sets = Lists(Integers()).map(frozenset, list)
    """

    __slots__ = ("inner", "pack", "unpack")

    def __init__(
        self,
        inner: Generator[T],
        pack: Callable[[T], U],
        unpack: Callable[[U], T],
    ) -> None:
        self.inner = inner
        self.pack = pack
        self.unpack = unpack

    def grow(self, source: RandomSource, size: float) -> U:
        return self.pack(self.inner.grow(source, size))

    def shrink(self, source: RandomSource, value: U) -> U:
        return self.pack(self.inner.shrink(source, self.unpack(value)))

    def magnitude(self, value: U) -> int | float:
        return self.inner.magnitude(self.unpack(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"

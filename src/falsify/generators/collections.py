"""Built-in generators for containers.

Composite generators delegate to their component generators. Each shrink
call makes one uniformly random choice of which element or component to
simplify, so repeated shrinking performs a random walk towards smaller
values.

Size is not reduced when recursing: elements of a list grown at size n
are themselves grown at size n * scale, and scale defaults to 1.0.
"""

from __future__ import annotations

from falsify.random_source import RandomSource

from .base import Generator, Mapped, size_bound
from .primitives import Characters

__all__ = ["Lists", "Text", "Tuples"]


class Lists[T](Generator[list[T]]):
    """Lists whose length is bounded by size.

    Shrink moves (one is chosen uniformly per call):
        - truncate to a uniformly chosen shorter prefix
        - delete one uniformly chosen element
        - shrink one uniformly chosen element in place

    Every move keeps the length the same or makes it shorter. The input
    list is never mutated.

    Attributes:
        element: Generator for the elements
        scale: Multiplier applied to size when growing elements
    """

    __slots__ = ("element", "scale")

    def __init__(self, element: Generator[T], scale: float = 1.0) -> None:
        self.element = element
        self.scale = scale

    def grow(self, source: RandomSource, size: float) -> list[T]:
        length = source.below(size_bound(size) + 1)
        element_size = size * self.scale
        return [self.element.grow(source, element_size) for _ in range(length)]

    def shrink(self, source: RandomSource, value: list[T]) -> list[T]:
        if not value:
            return []
        match source.below(3):
            case 0:
                return value[: source.below(len(value))]
            case 1:
                index = source.below(len(value))
                return value[:index] + value[index + 1 :]
            case _:
                index = source.below(len(value))
                shrunk = list(value)
                shrunk[index] = self.element.shrink(source, value[index])
                return shrunk

    def magnitude(self, value: list[T]) -> int:
        return len(value)

    def __repr__(self) -> str:
        if self.scale == 1.0:
            return f"Lists({self.element!r})"
        return f"Lists({self.element!r}, scale={self.scale!r})"


class Tuples(Generator[tuple[object, ...]]):
    """Fixed-length tuples with one generator per component.

    Shrinking picks one component uniformly and shrinks it with its own
    generator; the length never changes. Magnitude is the sum of the
    component magnitudes.
    """

    __slots__ = ("elements",)

    def __init__(self, *elements: Generator[object]) -> None:
        self.elements = elements

    def grow(self, source: RandomSource, size: float) -> tuple[object, ...]:
        return tuple(element.grow(source, size) for element in self.elements)

    def shrink(self, source: RandomSource, value: tuple[object, ...]) -> tuple[object, ...]:
        if not self.elements:
            return ()
        index = source.below(len(self.elements))
        shrunk = list(value)
        shrunk[index] = self.elements[index].shrink(source, value[index])
        return tuple(shrunk)

    def magnitude(self, value: tuple[object, ...]) -> int | float:
        return sum(
            element.magnitude(item)
            for element, item in zip(self.elements, value, strict=True)
        )

    def __repr__(self) -> str:
        return f"Tuples({', '.join(repr(element) for element in self.elements)})"


class Text(Mapped[list[str], str]):
    """Strings, grown and shrunk as lists of characters.

    Shrinking can shorten the string and simplify individual characters,
    e.g. "xqo" -> "xo" -> "o". Magnitude is the length.
    """

    __slots__ = ("characters",)

    def __init__(self, alphabet: str | None = None) -> None:
        self.characters = Characters(alphabet)
        super().__init__(Lists(self.characters), "".join, list)

    def __repr__(self) -> str:
        return f"Text({self.characters!r})"

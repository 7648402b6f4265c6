"""Decorator turning a predicate into a test function.

    @for_all(Config(seed=[1, 2, 3], max_size=50.0, max_tests=200, max_shrinks=200))
    def test_reverse_twice(items: list[int]) -> None:
        assert list(reversed(list(reversed(items)))) == items

The decorated function takes no arguments, so pytest collects it as an
ordinary test; calling it runs check() and raises PropertyFalsifiedError
with the shrunk counterexample when the property does not hold.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Protocol

from .config import Config
from .engine import Predicate, check
from .execution import Isolation
from .generators import Generator, generator_for_predicate

__all__ = ["PropertyTest", "for_all"]


class PropertyTest[T](Protocol):
    """Zero-argument test produced by for_all."""

    predicate: Predicate[T]
    generator: Generator[T]
    config: Config

    def __call__(self) -> None:
        ...  # pragma: no cover  # Protocol stub - not executable


def for_all[T](
    config: Config,
    generator: Generator[T] | None = None,
    *,
    isolation: Isolation = Isolation.THREAD,
) -> Callable[[Predicate[T]], PropertyTest[T]]:
    """Check the decorated predicate against config when called.

    The generator is resolved when decorating, so a missing or unsupported
    annotation fails at import time rather than when the test runs.

    Raises:
        GeneratorResolutionError: If generator is omitted and cannot be
            derived from the predicate's annotation
    """

    def decorate(predicate: Predicate[T]) -> PropertyTest[T]:
        resolved = generator if generator is not None else generator_for_predicate(predicate)

        def property_test() -> None:
            check(predicate, config, resolved, isolation=isolation)

        # Copied by hand: functools.wraps would set __wrapped__ and make
        # pytest read the predicate's parameter as a fixture request.
        property_test.__module__ = predicate.__module__
        property_test.__name__ = getattr(predicate, "__name__", property_test.__name__)
        property_test.__qualname__ = getattr(predicate, "__qualname__", property_test.__qualname__)
        property_test.__doc__ = predicate.__doc__
        property_test.__signature__ = inspect.Signature()  # type: ignore[attr-defined]
        property_test.predicate = predicate  # type: ignore[attr-defined]
        property_test.generator = resolved  # type: ignore[attr-defined]
        property_test.config = config  # type: ignore[attr-defined]
        return property_test  # type: ignore[return-value]

    return decorate

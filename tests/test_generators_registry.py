"""Tests for generators/registry.py: generator lookup by annotation.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal

import pytest

from falsify import GeneratorResolutionError
from falsify.generators import (
    Booleans,
    Floats,
    Generator,
    Integers,
    Lists,
    Mapped,
    Text,
    Tuples,
    generator_for,
    generator_for_predicate,
    register,
)
from falsify.generators import registry
from falsify.random_source import RandomSource


@pytest.fixture
def restore_registry() -> Iterator[None]:
    """Undo registrations made by a test."""
    saved = dict(registry._FACTORIES)
    yield
    registry._FACTORIES.clear()
    registry._FACTORIES.update(saved)


class TestGeneratorFor:
    """Test generator_for()."""

    @pytest.mark.parametrize(
        ("annotation", "expected"),
        [(bool, Booleans), (int, Integers), (float, Floats), (str, Text)],
    )
    def test_scalars(self, annotation: type, expected: type) -> None:
        """Builtin scalar types map to their generators."""
        assert isinstance(generator_for(annotation), expected)

    def test_list(self) -> None:
        """list[X] resolves to Lists of X's generator."""
        generator = generator_for(list[int])

        assert isinstance(generator, Lists)
        assert isinstance(generator.element, Integers)

    def test_nested(self) -> None:
        """Parameterized annotations resolve recursively."""
        generator = generator_for(list[tuple[str, bool]])

        assert isinstance(generator, Lists)
        assert isinstance(generator.element, Tuples)
        assert [type(e) for e in generator.element.elements] == [Text, Booleans]

    def test_variadic_tuple(self) -> None:
        """tuple[X, ...] grows tuples of any length."""
        generator = generator_for(tuple[int, ...])
        value = generator.grow(RandomSource([1, 2]), 20.0)

        assert isinstance(generator, Mapped)
        assert isinstance(value, tuple)
        assert all(isinstance(item, int) for item in value)

    def test_empty_tuple(self) -> None:
        """tuple[()] resolves to the empty Tuples."""
        generator = generator_for(tuple[()])

        assert generator.grow(RandomSource([0]), 5.0) == ()

    @pytest.mark.parametrize("annotation", [dict[str, int], set[int], Decimal, list, None])
    def test_unknown_rejected(self, annotation: object) -> None:
        """Unknown annotations raise GeneratorResolutionError."""
        with pytest.raises(GeneratorResolutionError, match="No generator registered"):
            generator_for(annotation)

    def test_resolution_error_is_type_error(self) -> None:
        """GeneratorResolutionError can be caught as TypeError."""
        with pytest.raises(TypeError):
            generator_for(complex)


class TestRegister:
    """Test register()."""

    @pytest.mark.usefixtures("restore_registry")
    def test_register_function(self) -> None:
        """Registered factories are used for their type."""

        @register(Decimal)
        def decimals() -> Generator[Decimal]:
            return Floats().map(lambda f: Decimal(str(f)), float)

        generator = generator_for(list[Decimal])
        value = generator.grow(RandomSource([9]), 10.0)

        assert all(isinstance(item, Decimal) for item in value)
        assert decimals is registry._FACTORIES[Decimal]

    @pytest.mark.usefixtures("restore_registry")
    def test_register_replaces(self) -> None:
        """Registering a type again replaces its factory."""
        register(int)(Booleans)

        assert isinstance(generator_for(int), Booleans)


class TestGeneratorForPredicate:
    """Test generator_for_predicate()."""

    def test_annotated_parameter(self) -> None:
        """The single parameter's annotation selects the generator."""

        def prop(items: list[str]) -> None:
            pass

        generator = generator_for_predicate(prop)

        assert isinstance(generator, Lists)
        assert isinstance(generator.element, Text)

    def test_missing_annotation(self) -> None:
        """An unannotated parameter is rejected."""
        with pytest.raises(GeneratorResolutionError, match="has no annotation"):
            generator_for_predicate(lambda value: None)

    def test_wrong_arity(self) -> None:
        """Predicates must take exactly one parameter."""

        def prop(a: int, b: int) -> None:
            pass

        with pytest.raises(GeneratorResolutionError, match="exactly one parameter"):
            generator_for_predicate(prop)

    def test_unknown_annotation(self) -> None:
        """An annotation without a generator is rejected."""

        def prop(value: complex) -> None:
            pass

        with pytest.raises(GeneratorResolutionError, match="No generator registered"):
            generator_for_predicate(prop)

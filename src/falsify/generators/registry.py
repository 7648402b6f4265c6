"""Generator lookup by type annotation.

Lets a predicate declare the type it tests instead of naming a generator:

    def prop(value: list[int]) -> None: ...

resolves to Lists(Integers()). Parameterized list and tuple annotations
are resolved recursively; other types can be added with register().
"""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Callable

from falsify.errors import ErrorTemplate, GeneratorResolutionError

from .base import Generator
from .collections import Lists, Text, Tuples
from .primitives import Booleans, Floats, Integers

__all__ = ["generator_for", "generator_for_predicate", "register"]

logger = logging.getLogger(__name__)

type GeneratorFactory = Callable[[], Generator[typing.Any]]

_FACTORIES: dict[type, GeneratorFactory] = {
    bool: Booleans,
    int: Integers,
    float: Floats,
    str: Text,
}


def register[F: GeneratorFactory](tp: type) -> Callable[[F], F]:
    """Register a zero-argument generator factory for tp.

    Usable as a decorator on a Generator subclass or a plain function.
    Registering a type again replaces the previous factory.

    Example:
        >>> @register(Decimal)
        ... def decimals() -> Generator[Decimal]:
        ...     return Floats().map(Decimal, float)
    """

    def accept(factory: F) -> F:
        if tp in _FACTORIES:
            logger.debug("Replacing generator factory for %s", tp.__name__)
        _FACTORIES[tp] = factory
        return factory

    return accept


def generator_for(annotation: object) -> Generator[typing.Any]:
    """Resolve a generator for a type annotation.

    Raises:
        GeneratorResolutionError: If no generator is known for annotation
    """
    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin is list and len(args) == 1:
        return Lists(generator_for(args[0]))

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return Lists(generator_for(args[0])).map(tuple, list)
        if not args or args == ((),):
            return Tuples()
        return Tuples(*(generator_for(arg) for arg in args))

    if isinstance(annotation, type) and annotation in _FACTORIES:
        return _FACTORIES[annotation]()

    raise GeneratorResolutionError(ErrorTemplate.no_generator_for(annotation))


def generator_for_predicate(predicate: Callable[..., object]) -> Generator[typing.Any]:
    """Resolve a generator from the annotation of predicate's only parameter.

    Raises:
        GeneratorResolutionError: If predicate does not take exactly one
            parameter, the parameter is unannotated, or its annotation has
            no generator
    """
    name = getattr(predicate, "__qualname__", repr(predicate))
    parameters = list(inspect.signature(predicate).parameters.values())
    if len(parameters) != 1:
        raise GeneratorResolutionError(ErrorTemplate.predicate_arity(name, len(parameters)))

    parameter = parameters[0]
    hints = typing.get_type_hints(predicate)
    if parameter.name not in hints:
        raise GeneratorResolutionError(ErrorTemplate.missing_annotation(name, parameter.name))

    generator = generator_for(hints[parameter.name])
    logger.debug("Resolved %r for predicate %s", generator, name)
    return generator

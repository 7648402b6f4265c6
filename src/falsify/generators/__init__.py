"""Generators: the capability that grows and shrinks test inputs.

Exports:
    Generator: Abstract interface (grow, shrink, magnitude)
    Mapped: Generator derived from another through pack/unpack
    UnsignedIntegers, Integers, Booleans, Floats, Characters: Scalars
    Lists, Tuples, Text: Containers
    generator_for, generator_for_predicate, register: Annotation lookup

Python 3.13+.
"""

from .base import Generator, Mapped, size_bound
from .collections import Lists, Text, Tuples
from .primitives import Booleans, Characters, Floats, Integers, UnsignedIntegers
from .registry import generator_for, generator_for_predicate, register

__all__ = [
    "Booleans",
    "Characters",
    "Floats",
    "Generator",
    "Integers",
    "Lists",
    "Mapped",
    "Text",
    "Tuples",
    "UnsignedIntegers",
    "generator_for",
    "generator_for_predicate",
    "register",
    "size_bound",
]

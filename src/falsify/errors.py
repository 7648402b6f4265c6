"""Exception hierarchy and centralized error messages.

All error messages are produced by ErrorTemplate. NO f-strings in raise
statements: messages stay testable and consistent across call sites.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .engine import Failure

__all__ = [
    "ErrorTemplate",
    "FalsifyError",
    "GeneratorResolutionError",
    "PropertyFalsifiedError",
]


class FalsifyError(Exception):
    """Base exception for all falsify errors."""


class PropertyFalsifiedError(FalsifyError, AssertionError):
    """A property run found a counterexample.

    Subclasses AssertionError so test harnesses report the property as a
    failed test rather than an error.

    Attributes:
        result: The Failure that was reported
    """

    def __init__(self, message: str, result: Failure[object]) -> None:
        """Initialize PropertyFalsifiedError.

        Args:
            message: Formatted failure report
            result: The Failure being reported
        """
        super().__init__(message)
        self.result = result


class GeneratorResolutionError(FalsifyError, TypeError):
    """No generator could be derived for a predicate or annotation.

    Raised before any test executes.
    """


class ErrorTemplate:
    """Centralized error message templates."""

    @staticmethod
    def negative_count(name: str, value: int) -> str:
        """Config count field below zero."""
        return f"{name} must be non-negative, got {value}"

    @staticmethod
    def invalid_count(name: str, value: object) -> str:
        """Config count field is not an int."""
        return f"{name} must be an int, got {value!r}"

    @staticmethod
    def invalid_max_size(value: float) -> str:
        """Config max_size negative, NaN or infinite."""
        return f"max_size must be a finite number >= 0, got {value!r}"

    @staticmethod
    def invalid_seed_word(word: object) -> str:
        """Seed entry is not a non-negative int."""
        return f"seed entries must be non-negative integers, got {word!r}"

    @staticmethod
    def invalid_max_repr_length(value: int) -> str:
        """ResultFormatter truncation limit not positive."""
        return f"max_repr_length must be positive, got {value}"

    @staticmethod
    def invalid_bound(bound: int) -> str:
        """RandomSource.below() called with an empty range."""
        return f"bound must be positive, got {bound}"

    @staticmethod
    def empty_alphabet() -> str:
        """Characters generator constructed without characters."""
        return "alphabet must contain at least one character"

    @staticmethod
    def character_not_in_alphabet(char: str) -> str:
        """Value to shrink is outside a custom alphabet."""
        return f"character {char!r} is not in the generator's alphabet"

    @staticmethod
    def no_generator_for(annotation: object) -> str:
        """Annotation has no registered generator."""
        return f"No generator registered for {annotation!r}"

    @staticmethod
    def predicate_arity(name: str, count: int) -> str:
        """Predicate does not take exactly one parameter."""
        return (
            f"Predicate '{name}' must take exactly one parameter to derive "
            f"a generator, found {count}"
        )

    @staticmethod
    def missing_annotation(name: str, parameter: str) -> str:
        """Predicate parameter lacks a type annotation."""
        return (
            f"Parameter '{parameter}' of predicate '{name}' has no annotation; "
            "pass a generator explicitly"
        )

"""Run engine: search for a falsifying input, then shrink it.

A run moves through three phases:

    RUNNING(test_index) -> SHRINKING(shrink_index) -> DONE(RunResult)

RUNNING grows one input per test at a size ramping linearly from 0 to
max_size and executes the predicate on it. The first failure starts
SHRINKING, which repeatedly shrinks the best counterexample found so far
and keeps a candidate only if it still fails. Shrinking is cumulative:
every candidate derives from the current best, not from the original.

The engine never raises for predicate faults; every outcome is returned
as a Success or Failure value. check() is the entry point that turns a
Failure into a raised error for test harnesses.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from .config import Config
from .errors import PropertyFalsifiedError
from .execution import FailureDetail, IsolatedExecutor, Isolation
from .generators import Generator, generator_for_predicate
from .random_source import RandomSource

__all__ = [
    "Failure",
    "Predicate",
    "RunEngine",
    "RunResult",
    "Success",
    "check",
    "run",
]

logger = logging.getLogger(__name__)

type Predicate[T] = Callable[[T], object]


@dataclass(frozen=True, slots=True)
class Success:
    """Every test passed.

    Attributes:
        config: Configuration of the run
    """

    config: Config

    @property
    def is_success(self) -> Literal[True]:
        """Always True."""
        return True

    def unwrap(self) -> None:
        """Do nothing; the property held."""


@dataclass(frozen=True, slots=True)
class Failure[T]:
    """A counterexample was found.

    Attributes:
        config: Configuration of the run
        num_tests: Number of tests that passed before the failing one
        input: Original falsifying input
        failure: Failure detail of the original input
        shrunk_input: Smallest falsifying input found by shrinking
        shrunk_failure: Failure detail of the shrunk input
        shrink_steps: Number of shrink candidates that were accepted
    """

    config: Config
    num_tests: int
    input: T
    failure: FailureDetail
    shrunk_input: T
    shrunk_failure: FailureDetail
    shrink_steps: int = 0

    @property
    def is_success(self) -> Literal[False]:
        """Always False."""
        return False

    def unwrap(self) -> None:
        """Raise the failure as an error.

        Raises:
            PropertyFalsifiedError: Always, with the formatted report
        """
        from .report import ResultFormatter  # noqa: PLC0415 - report imports engine

        raise PropertyFalsifiedError(ResultFormatter().format(self), self)


type RunResult[T] = Success | Failure[T]


class RunEngine[T]:
    """Drives one property run.

    The engine owns the run's RandomSource and IsolatedExecutor for the
    duration of run(); both are created fresh on every call, so the same
    engine replays identically.
    """

    __slots__ = ("config", "generator", "isolation", "predicate")

    def __init__(
        self,
        predicate: Predicate[T],
        config: Config,
        generator: Generator[T],
        isolation: Isolation = Isolation.THREAD,
    ) -> None:
        self.predicate = predicate
        self.config = config
        self.generator = generator
        self.isolation = isolation

    def run(self) -> RunResult[T]:
        """Execute the run and return its result."""
        config = self.config
        source = RandomSource(config.seed)

        executor = IsolatedExecutor(self.isolation)
        for test_index in range(config.max_tests):
            value = self.generator.grow(source, config.size_at(test_index))
            failure = executor.execute(self.predicate, copy.deepcopy(value))
            if failure is None:
                continue
            logger.info(
                "Falsified after %d passing test(s) (seed=%s): %s",
                test_index,
                config.seed,
                failure,
            )
            return self._shrink(source, executor, test_index, value, failure)

        logger.debug("Passed %d test(s) (seed=%s)", config.max_tests, config.seed)
        return Success(config)

    def _shrink(
        self,
        source: RandomSource,
        executor: IsolatedExecutor,
        num_tests: int,
        value: T,
        failure: FailureDetail,
    ) -> Failure[T]:
        shrunk_input = value
        shrunk_failure = failure
        accepted = 0

        for shrink_index in range(self.config.max_shrinks):
            candidate = self.generator.shrink(source, shrunk_input)
            candidate_failure = executor.execute(self.predicate, copy.deepcopy(candidate))
            if candidate_failure is None:
                continue
            shrunk_input = candidate
            shrunk_failure = candidate_failure
            accepted += 1
            logger.debug("Shrink %d accepted: %r", shrink_index, candidate)

        logger.info(
            "Shrinking finished: %d of %d candidate(s) accepted",
            accepted,
            self.config.max_shrinks,
        )
        return Failure(
            config=self.config,
            num_tests=num_tests,
            input=value,
            failure=failure,
            shrunk_input=shrunk_input,
            shrunk_failure=shrunk_failure,
            shrink_steps=accepted,
        )


def run[T](
    predicate: Predicate[T],
    config: Config,
    generator: Generator[T] | None = None,
    *,
    isolation: Isolation = Isolation.THREAD,
) -> RunResult[T]:
    """Search for an input falsifying predicate and shrink it.

    Args:
        predicate: Function of one argument that raises when the property
            does not hold for it. Its return value is ignored.
        config: Seed and budgets of the run
        generator: Generator for the predicate's input. Resolved from the
            predicate's parameter annotation when omitted.
        isolation: Where predicate invocations run

    Returns:
        Success, or Failure carrying the original and shrunk counterexamples

    Raises:
        GeneratorResolutionError: If generator is omitted and cannot be
            derived from the predicate

    Example:
        >>> def no_leading_o(text: str) -> None:
        ...     assert not text.startswith("o")
        >>> result = run(no_leading_o, Config([0, 1, 2, 3, 4, 5], 100.0, 100, 100))
    """
    if generator is None:
        generator = generator_for_predicate(predicate)
    return RunEngine(predicate, config, generator, isolation).run()


def check[T](
    predicate: Predicate[T],
    config: Config,
    generator: Generator[T] | None = None,
    *,
    isolation: Isolation = Isolation.THREAD,
) -> None:
    """Assert that predicate holds for every generated input.

    Raises:
        PropertyFalsifiedError: If the run found a counterexample
        GeneratorResolutionError: If no generator can be derived
    """
    run(predicate, config, generator, isolation=isolation).unwrap()

"""Isolated execution of predicate invocations.

A predicate signals falsification by raising. IsolatedExecutor runs one
invocation at a time and converts any Exception raised by the predicate
into a FailureDetail, so a faulty predicate can never abort the run that
is testing it.

Isolation modes:
    THREAD: Every invocation runs on a fresh worker thread that exits
        when the invocation finishes, so thread-local state never carries
        over from one invocation to the next. The caller blocks until the
        invocation finishes; the predicate never runs on the engine's stack.
    INLINE: Invocations run on the caller's thread inside a
        result-returning adapter.

KeyboardInterrupt, SystemExit and other BaseExceptions that are not
Exceptions are re-raised in the caller under both modes.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import StrEnum

from .constants import UNPRINTABLE_FAILURE, WORKER_THREAD_PREFIX

__all__ = ["FailureDetail", "Isolation", "IsolatedExecutor", "execute"]

logger = logging.getLogger(__name__)


class Isolation(StrEnum):
    """Where predicate invocations run."""

    THREAD = "thread"
    INLINE = "inline"


def _describe(exc: BaseException) -> str:
    try:
        message = str(exc)
    except Exception:  # noqa: BLE001 - any failure in __str__ means unprintable
        return UNPRINTABLE_FAILURE
    # A bare `assert` carries no message; the type name is the best summary.
    return message or type(exc).__name__


@dataclass(frozen=True, slots=True)
class FailureDetail:
    """Why a predicate invocation failed.

    Equality ignores the traceback so that results of replayed runs
    compare equal.

    Attributes:
        message: Text of the fault, or a placeholder when it has none
        error_type: Class name of the raised exception
        traceback: Formatted traceback of the fault
    """

    message: str
    error_type: str
    traceback: str = field(default="", compare=False, repr=False)

    @classmethod
    def from_exception(cls, exc: BaseException) -> FailureDetail:
        """Capture a raised exception."""
        try:
            formatted = "".join(traceback.format_exception(exc))
        except Exception:  # noqa: BLE001 - traceback text is best effort
            formatted = ""
        return cls(
            message=_describe(exc),
            error_type=type(exc).__name__,
            traceback=formatted,
        )

    def __str__(self) -> str:
        return f"{self.error_type}: {self.message}"


class IsolatedExecutor:
    """Runs predicate invocations one at a time, capturing faults.

    Under Isolation.THREAD each invocation gets its own single-worker pool,
    which is shut down before execute() returns.

    Example:
        >>> executor = IsolatedExecutor()
        >>> executor.execute(lambda value: None, 1) is None
        True
    """

    __slots__ = ("_invocations", "_isolation")

    def __init__(self, isolation: Isolation = Isolation.THREAD) -> None:
        self._isolation = Isolation(isolation)
        self._invocations = 0

    @property
    def isolation(self) -> Isolation:
        """Isolation mode of this executor."""
        return self._isolation

    @property
    def invocations(self) -> int:
        """Number of predicate invocations executed so far."""
        return self._invocations

    def execute[T](self, predicate: Callable[[T], object], value: T) -> FailureDetail | None:
        """Invoke predicate(value) and capture any fault.

        Returns:
            None if the predicate returned normally, otherwise the
            FailureDetail of the Exception it raised
        """
        self._invocations += 1
        if self._isolation is Isolation.THREAD:
            exc = self._call_on_worker(predicate, value)
        else:
            exc = self._call_inline(predicate, value)

        if exc is None:
            return None
        if not isinstance(exc, Exception):
            raise exc
        detail = FailureDetail.from_exception(exc)
        logger.debug("Predicate raised %s", detail)
        return detail

    @staticmethod
    def _call_on_worker[T](predicate: Callable[[T], object], value: T) -> BaseException | None:
        with ThreadPoolExecutor(max_workers=1, thread_name_prefix=WORKER_THREAD_PREFIX) as pool:
            return pool.submit(predicate, value).exception()

    @staticmethod
    def _call_inline[T](predicate: Callable[[T], object], value: T) -> BaseException | None:
        try:
            predicate(value)
        except BaseException as exc:  # noqa: BLE001 - sorted out by execute()
            return exc
        return None


def execute[T](
    predicate: Callable[[T], object],
    value: T,
    isolation: Isolation = Isolation.THREAD,
) -> FailureDetail | None:
    """Run a single invocation with a throwaway executor.

    Example:
        >>> def never_negative(n: int) -> None:
        ...     assert n >= 0, "negative"
        >>> execute(never_negative, -1).message
        'negative'
    """
    return IsolatedExecutor(isolation).execute(predicate, value)

"""Run result formatting.

Renders a RunResult for humans (the message of PropertyFalsifiedError) or
for tooling (JSON).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum

from .constants import DEFAULT_MAX_REPR_LENGTH
from .engine import Failure, RunResult, Success
from .errors import ErrorTemplate
from .execution import FailureDetail

__all__ = ["OutputFormat", "ResultFormatter"]


class OutputFormat(StrEnum):
    """Output format options for result formatting."""

    TEXT = "text"  # Multi-line report (default)
    SIMPLE = "simple"  # Single-line summary
    JSON = "json"  # JSON object for tooling integration


@dataclass(frozen=True, slots=True)
class ResultFormatter:
    """Result formatting service.

    Attributes:
        output_format: Output style (text, simple, json)
        include_traceback: Append the shrunk failure's traceback (text only)
        max_repr_length: Counterexample reprs longer than this are truncated

    Example:
        >>> print(ResultFormatter().format(failure))
        Property falsified after 12 passing test(s)
          = seed: (0, 1, 2, 3, 4, 5)
          = budget: max_tests=100, max_shrinks=100, max_size=100.0
          original input: 'o4Kq'
          original failure: AssertionError: AssertionError
          shrunk input: 'o' (3 shrink step(s) accepted)
          shrunk failure: AssertionError: AssertionError

        >>> ResultFormatter(output_format=OutputFormat.SIMPLE).format(failure)
        "FALSIFIED after 12 test(s): 'o'"
    """

    output_format: OutputFormat = OutputFormat.TEXT
    include_traceback: bool = False
    max_repr_length: int = DEFAULT_MAX_REPR_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_repr_length is not positive
        """
        if self.max_repr_length <= 0:
            raise ValueError(ErrorTemplate.invalid_max_repr_length(self.max_repr_length))

    def format(self, result: RunResult[object]) -> str:
        """Format a run result.

        Args:
            result: Success or Failure to format

        Returns:
            Formatted result string
        """
        match self.output_format:
            case OutputFormat.TEXT:
                return self._format_text(result)
            case OutputFormat.SIMPLE:
                return self._format_simple(result)
            case OutputFormat.JSON:
                return self._format_json(result)

    def _format_text(self, result: RunResult[object]) -> str:
        config = result.config
        budget = (
            f"  = budget: max_tests={config.max_tests}, "
            f"max_shrinks={config.max_shrinks}, max_size={config.max_size}"
        )
        if isinstance(result, Success):
            return "\n".join(
                [
                    f"Property held for {config.max_tests} test(s)",
                    f"  = seed: {config.seed}",
                    budget,
                ]
            )

        parts = [
            f"Property falsified after {result.num_tests} passing test(s)",
            f"  = seed: {config.seed}",
            budget,
            f"  original input: {self._repr(result.input)}",
            f"  original failure: {result.failure}",
            f"  shrunk input: {self._repr(result.shrunk_input)} "
            f"({result.shrink_steps} shrink step(s) accepted)",
            f"  shrunk failure: {result.shrunk_failure}",
        ]
        if self.include_traceback and result.shrunk_failure.traceback:
            parts.append("")
            parts.append(result.shrunk_failure.traceback.rstrip("\n"))
        return "\n".join(parts)

    def _format_simple(self, result: RunResult[object]) -> str:
        if isinstance(result, Success):
            return f"OK after {result.config.max_tests} test(s)"
        return f"FALSIFIED after {result.num_tests} test(s): {self._repr(result.shrunk_input)}"

    def _format_json(self, result: RunResult[object]) -> str:
        config = result.config
        data: dict[str, object] = {
            "status": "success" if isinstance(result, Success) else "failure",
            "seed": list(config.seed),
            "max_size": config.max_size,
            "max_tests": config.max_tests,
            "max_shrinks": config.max_shrinks,
        }
        if isinstance(result, Failure):
            data["num_tests"] = result.num_tests
            data["input"] = self._repr(result.input)
            data["failure"] = _detail_data(result.failure)
            data["shrunk_input"] = self._repr(result.shrunk_input)
            data["shrunk_failure"] = _detail_data(result.shrunk_failure)
            data["shrink_steps"] = result.shrink_steps
        return json.dumps(data, ensure_ascii=False)

    def _repr(self, value: object) -> str:
        """repr() of value, truncated to max_repr_length."""
        text = repr(value)
        if len(text) > self.max_repr_length:
            return text[: self.max_repr_length] + "..."
        return text


def _detail_data(detail: FailureDetail) -> dict[str, str]:
    return {"error_type": detail.error_type, "message": detail.message}

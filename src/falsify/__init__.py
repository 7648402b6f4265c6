"""falsify - Property-based testing with seeded generation and shrinking.

Searches for an input that falsifies a predicate, then shrinks it to a
small counterexample. Every run is reproducible from its seed and budgets.

Public API:
    run - Search and shrink, returning Success or Failure
    check - Like run, but raises PropertyFalsifiedError on Failure
    for_all - Decorator turning a predicate into a zero-argument test
    Config - Seed and budgets of a run
    random_seed - Fresh seed from OS entropy

Results:
    Success, Failure, RunResult - Terminal report of a run
    FailureDetail - Captured description of a predicate fault

Exceptions:
    FalsifyError - Base exception class
    PropertyFalsifiedError - Raised by check() for a counterexample
    GeneratorResolutionError - No generator for a predicate's annotation

Submodules:
    falsify.generators - Generator interface and built-in generators
    falsify.execution - Isolated predicate execution
    falsify.report - Result formatting
    falsify.random_source - Seeded randomness
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import Config
from .decorators import for_all
from .engine import Failure, RunResult, Success, check, run
from .errors import FalsifyError, GeneratorResolutionError, PropertyFalsifiedError
from .execution import FailureDetail, Isolation
from .random_source import Seed, random_seed

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("falsify")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Config",
    "FailureDetail",
    "Failure",
    "FalsifyError",
    "GeneratorResolutionError",
    "Isolation",
    "PropertyFalsifiedError",
    "RunResult",
    "Seed",
    "Success",
    "__version__",
    "check",
    "for_all",
    "random_seed",
    "run",
]

"""Shared constants for falsify.

Constants are grouped by domain:
- Failure rendering: placeholders used when a fault cannot be described
- Execution: worker naming for isolated predicate invocations
- Generation: bounds for the built-in generators
- Reporting: truncation limits for rendered counterexamples

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Failure rendering
    "UNPRINTABLE_FAILURE",
    # Execution
    "WORKER_THREAD_PREFIX",
    # Generation
    "DEFAULT_SEED_LENGTH",
    "MAX_SEED_WORD",
    "MAX_UNSIGNED",
    # Reporting
    "DEFAULT_MAX_REPR_LENGTH",
]

# ============================================================================
# FAILURE RENDERING
# ============================================================================

# Substituted for the message of a fault whose str() itself raises.
# Information is lost; the exception type name is still recorded.
UNPRINTABLE_FAILURE: str = "<unprintable failure>"

# ============================================================================
# EXECUTION
# ============================================================================

# Thread name prefix for the single worker that runs predicate invocations
# under Isolation.THREAD. Visible in thread dumps and logging records.
WORKER_THREAD_PREFIX: str = "falsify-worker"

# ============================================================================
# GENERATION
# ============================================================================

# Number of words drawn by random_seed() when no length is given.
DEFAULT_SEED_LENGTH: int = 4

# Upper bound (exclusive) of words drawn by random_seed().
MAX_SEED_WORD: int = 2**64

# Default upper bound for UnsignedIntegers (32-bit unsigned range).
MAX_UNSIGNED: int = 2**32 - 1

# ============================================================================
# REPORTING
# ============================================================================

# repr() of counterexamples longer than this is truncated in reports.
DEFAULT_MAX_REPR_LENGTH: int = 200

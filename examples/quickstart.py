"""Quickstart example for falsify.

Demonstrates running a property, reading the shrunk counterexample,
checking a property from a test, and replaying a run from its seed.
"""

import logging

from falsify import Config, Failure, PropertyFalsifiedError, check, for_all, random_seed, run
from falsify.generators import Lists, Text, UnsignedIntegers

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Example 1: Find and shrink a counterexample
print("=" * 50)
print("Example 1: Shrinking")
print("=" * 50)


def no_leading_o(text: str) -> None:
    assert not text.startswith("o"), "starts with o"


config = Config(seed=[0, 1, 2, 3, 4, 5], max_size=100.0, max_tests=100, max_shrinks=100)
result = run(no_leading_o, config)
if isinstance(result, Failure):
    print(f"original: {result.input!r}")
    print(f"shrunk:   {result.shrunk_input!r}")
    # Output: shrunk:   'o'
else:
    print("No counterexample for this seed; try another with config.with_seed(...)")

# Example 2: Explicit generators
print("\n" + "=" * 50)
print("Example 2: Explicit Generator")
print("=" * 50)


def sum_is_small(items: list[int]) -> None:
    assert sum(items) < 100, f"sum is {sum(items)}"


try:
    check(sum_is_small, config, Lists(UnsignedIntegers()))
except PropertyFalsifiedError as e:
    print(e)

# Example 3: Decorated properties for pytest
print("\n" + "=" * 50)
print("Example 3: for_all")
print("=" * 50)


@for_all(config.with_seed(random_seed()), Text(alphabet="ab"))
def test_upper_lower_round_trip(text: str) -> None:
    assert text.upper().lower() == text


test_upper_lower_round_trip()
print(f"held for seed {test_upper_lower_round_trip.config.seed}")

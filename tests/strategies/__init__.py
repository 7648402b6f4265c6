"""Hypothesis strategies for falsify property-based testing.

Strategies are organized by domain:

- engine: seeds, configs and generation sizes

Usage:
    from tests.strategies import seeds, configs, sizes
"""

from .engine import configs, seed_words, seeds, sizes

__all__ = [
    "configs",
    "seed_words",
    "seeds",
    "sizes",
]

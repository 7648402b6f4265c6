"""Fuzz testing infrastructure for falsify.

This package contains:
- test_shrink_walks: Many complete engine runs checking shrink outcomes

Python 3.13+.
"""

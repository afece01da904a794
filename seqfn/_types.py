"""
Core type definitions for seqfn.

Callable shapes accepted by the combinators.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Mapper = function applied to every element
type Mapper[T, R] = Callable[[T], R]

# Reducer = left-fold step: (accumulator, element) -> accumulator
type Reducer[R, T] = Callable[[R, T], R]

__all__ = (
    "Predicate",
    "Mapper",
    "Reducer",
)

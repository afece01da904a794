"""
Cons combinators
================

Building and taking apart a sequence one element at a time.

Law: cons(first(xs), rest(xs)) == xs for every non-empty xs.
"""

from __future__ import annotations

from .._errors import EmptySequenceError
from ..persistent import Seq, singleton


def cons[T](x: T, xs: Seq[T]) -> Seq[T]:
    """
    Prepend one element.

    Example:
        cons(1, seq(2, 3))  # seq(1, 2, 3)

    NOTE: The backing vector is append-optimised, so cons copies xs (O(n)).
    """
    return xs.prepend_all(singleton(x))


def first[T](xs: Seq[T]) -> T:
    """Head of the sequence. Raises EmptySequenceError on empty input."""
    if xs.is_empty():
        raise EmptySequenceError("first")
    return xs.get(0)


def rest[T](xs: Seq[T]) -> Seq[T]:
    """Everything but the head. Raises EmptySequenceError on empty input."""
    if xs.is_empty():
        raise EmptySequenceError("rest")
    return xs.suffix_from(1)


__all__ = ("cons", "first", "rest")

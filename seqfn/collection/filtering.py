"""Filter combinators

Keep the elements that pass a predicate, in their original order."""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._types import Predicate
from ..persistent import Seq, empty, from_iterable
from .cons import cons
from .fold import reduce, reverse

def filter[T](pred: Predicate[T], xs: Seq[T]) -> Seq[T]:
    """
    Subsequence of elements for which pred is true.

    pred runs exactly once per element, in index order.

    Example:
        filter(lambda x: x % 2 != 0, seq(1, 2, 3))  # seq(1, 3)
    """
    return from_iterable(x for x in xs if pred(x))

def filter_r[T](pred: Predicate[T], xs: Seq[T]) -> Seq[T]:
    """
    filter() expressed as a fold: cons survivors onto an accumulator,
    then reverse the result.

    Agrees with filter() elementwise.
    """
    def step(acc: Seq[T], x: T) -> Seq[T]:
        return cons(x, acc) if pred(x) else acc

    return reverse(reduce(step, empty(), xs))

def partition[T, E](results: Seq[Result[T, E]]) -> tuple[Seq[T], Seq[E]]:
    """Separate into (successes, failures). Both keep input order. Never fails."""
    successes: list[T] = []
    failures: list[E] = []

    for r in results:
        match r:
            case Ok(value):
                successes.append(value)
            case Error(err):
                failures.append(err)

    return from_iterable(successes), from_iterable(failures)

__all__ = ("filter", "filter_r", "partition")

"""Traverse combinators

Element-wise mapping: plain, via fold + reverse, Result-valued, and Writer-valued."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._helpers import identity
from .._types import Mapper
from ..persistent import Seq, empty, from_iterable
from ..writer import Log, Writer
from .cons import cons
from .fold import reduce, reverse

# Plain
def map[T, R](f: Mapper[T, R], xs: Seq[T]) -> Seq[R]:
    """
    Apply f to every element. Same size, same order.

    f runs exactly once per element, strictly left to right.

    Example:
        map(lambda x: x + 1, seq(1, 2, 3))  # seq(2, 3, 4)
    """
    return from_iterable(f(x) for x in xs)

def map_r[T, R](f: Mapper[T, R], xs: Seq[T]) -> Seq[R]:
    """
    map() expressed as a fold: cons each f(x) onto an accumulator,
    then reverse the result.

    Agrees with map() elementwise. Quadratic: every cons copies the accumulator.
    """
    def step(acc: Seq[R], x: T) -> Seq[R]:
        return cons(f(x), acc)

    return reverse(reduce(step, empty(), xs))

# Result
def traverse[T, R, E](
    f: Callable[[T], Result[R, E]],
    xs: Seq[T],
) -> Result[Seq[R], E]:
    """
    Monadic map: T -> Result[R, E]. Stops at the first Error.

    Elements after the failing one are not visited.
    """
    values: list[R] = []
    for x in xs:
        match f(x):
            case Ok(value):
                values.append(value)
            case Error(err):
                return Error(err)
    return Ok(from_iterable(values))

def sequence[T, E](results: Seq[Result[T, E]]) -> Result[Seq[T], E]:
    """
    Flip structure: Seq[Result[T, E]] -> Result[Seq[T], E].

    Implemented as traverse(identity).
    """
    return traverse(identity, results)

# Writer
def map_w[T, R, W](
    f: Callable[[T], Writer[R, W]],
    xs: Seq[T],
) -> Writer[Seq[R], W]:
    """Map with log merging. Logs appear in index order."""
    values: list[R] = []
    merged_log = Log[W]()
    for x in xs:
        w = f(x)
        values.append(w.value)
        merged_log = merged_log.combine(w.log)
    return Writer(from_iterable(values), merged_log)

__all__ = ("map", "map_r", "traverse", "sequence", "map_w")

"""
Fold combinators
================

Left fold, the reversal derived from it, and a fold that writes a log.
"""

from __future__ import annotations

from collections.abc import Callable

from .._types import Reducer
from ..persistent import Seq, from_iterable
from ..writer import Log, Writer


# ============================================================================
# Plain
# ============================================================================


def reduce[T, R](f: Reducer[R, T], acc: R, xs: Seq[T]) -> R:
    """
    Left fold: f(...f(f(acc, x0), x1)..., xn-1).

    f is called exactly len(xs) times, in index order.
    Empty xs returns acc unchanged.

    Example:
        reduce(lambda a, x: a + x, 0, seq(1, 2, 3))  # 6
    """
    for x in xs:
        acc = f(acc, x)
    return acc


def reverse[T](xs: Seq[T]) -> Seq[T]:
    """
    Same elements, opposite order.

    Observably equal to reduce(lambda acc, x: cons(x, acc), empty(), xs),
    but built in a single O(n) pass.
    """
    if len(xs) < 2:
        return xs
    return from_iterable(reversed(xs))


# ============================================================================
# Writer
# ============================================================================


def reduce_w[T, R, W](
    f: Callable[[R, T], Writer[R, W]],
    acc: R,
    xs: Seq[T],
) -> Writer[R, W]:
    """Left fold whose step also writes to the log. Logs merge in index order."""
    merged_log = Log[W]()
    for x in xs:
        w = f(acc, x)
        acc = w.value
        merged_log = merged_log.combine(w.log)
    return Writer(acc, merged_log)


__all__ = ("reduce", "reverse", "reduce_w")

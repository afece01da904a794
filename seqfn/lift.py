"""
Lifting sequence access into Result.

The primitives in seqfn.persistent and seqfn.collection raise on misuse
(EmptySequenceError, IndexOutOfRangeError). The functions here return the
same failures as values instead, for callers that prefer to match on
Ok / Error over try / except.

Examples:
    from seqfn import lift as L

    match L.uncons(xs):
        case Ok((head, tail)):
            ...
        case Error(err):
            ...
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from ._errors import EmptySequenceError, IndexOutOfRangeError
from .collection import first, rest
from .persistent import Seq


def try_first[T](xs: Seq[T]) -> Result[T, EmptySequenceError]:
    """
    Head of xs as a Result.

    Example:
        L.try_first(seq(1, 2))  # Ok(1)
        L.try_first(empty())    # Error(EmptySequenceError("first"))
    """
    if xs.is_empty():
        return Error(EmptySequenceError("first"))
    return Ok(first(xs))


def try_rest[T](xs: Seq[T]) -> Result[Seq[T], EmptySequenceError]:
    """Tail of xs as a Result."""
    if xs.is_empty():
        return Error(EmptySequenceError("rest"))
    return Ok(rest(xs))


def try_get[T](xs: Seq[T], index: int) -> Result[T, IndexOutOfRangeError]:
    """Positional read as a Result. Same bounds as Seq.get()."""
    if index < 0 or index >= len(xs):
        return Error(IndexOutOfRangeError(index, len(xs)))
    return Ok(xs.get(index))


def uncons[T](xs: Seq[T]) -> Result[tuple[T, Seq[T]], EmptySequenceError]:
    """
    Split into (first, rest) in one step.

    **When to use:** pattern-matching walks over a sequence where the empty
    case is an ordinary outcome rather than a bug.
    """
    if xs.is_empty():
        return Error(EmptySequenceError("uncons"))
    return Ok((first(xs), rest(xs)))


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Result[T, E]:
    """
    Execute thunk, convert a raised exception to Error.

    Example:
        L.catching(lambda: first(xs), on_error=str)

    NOTE: Catches all Exception subclasses. For specific exceptions,
          filter in on_error or use try/except manually.
    """
    try:
        return Ok(thunk())
    except Exception as exc:
        return Error(on_error(exc))


__all__ = (
    "try_first",
    "try_rest",
    "try_get",
    "uncons",
    "catching",
)

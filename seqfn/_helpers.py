"""Internal helpers for seqfn.

Small function-level utilities shared by the combinator modules."""

from __future__ import annotations

from collections.abc import Callable

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def compose[A, B, C](g: Callable[[B], C], f: Callable[[A], B]) -> Callable[[A], C]:
    """
    Right-to-left composition: compose(g, f)(x) == g(f(x)).

    Map fusion reads as: map(g, map(f, xs)) == map(compose(g, f), xs)
    """
    def composed(x: A) -> C:
        return g(f(x))

    return composed

__all__ = (
    "identity",
    "compose",
)

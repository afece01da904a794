"""
Log - Monoidal accumulator for Writer
=====================================
"""

from __future__ import annotations

from ..persistent import Seq


class Log[A](Seq[A]):
    """
    Log accumulator for the Writer monad.

    A persistent Seq with monoidal operations:
    - empty: Log()
    - combine: concatenation

    Monoid laws hold:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    __slots__ = ()

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log(items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log.of("a", "b", "c")
        """
        if not other:
            return self
        if not self:
            return other
        return Log(self._items + other._items)

    def tell(self, item: A, /) -> Log[A]:
        """
        Append single item.

        Equivalent to self.combine(Log.of(item)).
        """
        return Log(self._items.append(item))

    def __repr__(self) -> str:
        return f"Log.of({', '.join(repr(x) for x in self)})"


__all__ = ("Log",)

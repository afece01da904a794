"""
Seq - persistent ordered sequence
=================================

Immutable wrapper over pyrsistent's PVector. Every derivation returns a new
Seq; the backing vector of the source is never touched, so sequences may be
shared freely.

Only six primitives are needed by the combinators:
- empty / singleton / from_iterable (construction)
- size, get (reading)
- prepend_all, suffix_from (derivation)
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator

from pyrsistent import PVector, pvector

from .._errors import IndexOutOfRangeError


class Seq[T]:
    """
    Persistent sequence of elements of one type.

    Equality is structural: two Seqs are equal iff they have the same size
    and elementwise-equal elements.

    Example:
        xs = seq(1, 2, 3)
        xs.suffix_from(1)       # seq(2, 3)
        xs.prepend_all(seq(0))  # seq(0, 1, 2, 3)
        str(xs)                 # "[1, 2, 3]"
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = (), /) -> None:
        self._items = items if isinstance(items, PVector) else pvector(items)

    # Construction

    @staticmethod
    def empty() -> Seq[typing.Any]:
        """The zero-length sequence."""
        return _EMPTY

    @staticmethod
    def singleton[V](value: V, /) -> Seq[V]:
        """One-element sequence."""
        return Seq(pvector((value,)))

    @staticmethod
    def from_iterable[V](items: Iterable[V], /) -> Seq[V]:
        """Build from any ordered source, preserving order."""
        if isinstance(items, Seq):
            return items
        vector = pvector(items)
        return Seq(vector) if vector else _EMPTY

    @staticmethod
    def of[V](*items: V) -> Seq[V]:
        """Build from positional arguments."""
        return Seq.from_iterable(items)

    # Primitives

    @property
    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def get(self, index: int, /) -> T:
        """
        Element at zero-based index.

        Raises IndexOutOfRangeError when index < 0 or index >= size.
        Negative indices are not wrapped around.
        """
        if not isinstance(index, int):
            raise TypeError(f"sequence indices must be integers, not {type(index).__name__}")
        if index < 0 or index >= len(self._items):
            raise IndexOutOfRangeError(index, len(self._items))
        return self._items[index]

    def prepend_all(self, prefix: Seq[T], /) -> Seq[T]:
        """Concatenate: elements of prefix first, then self."""
        if not prefix._items:
            return self
        if not self._items:
            return prefix
        return Seq(prefix._items + self._items)

    def suffix_from(self, index: int, /) -> Seq[T]:
        """
        Elements at indices [index, size).

        Raises IndexOutOfRangeError when index < 0 or index > size.
        index == size yields the empty sequence.
        """
        size = len(self._items)
        if index < 0 or index > size:
            raise IndexOutOfRangeError(index, size)
        if index == 0:
            return self
        if index == size:
            return _EMPTY
        return Seq(self._items[index:])

    # Interop

    def to_list(self) -> list[T]:
        return list(self._items)

    def to_tuple(self) -> tuple[T, ...]:
        return tuple(self._items)

    # Protocol methods

    def __getitem__(self, index: int, /) -> T:
        return self.get(index)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        items = self._items
        return (items[i] for i in range(len(items) - 1, -1, -1))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"seq({', '.join(repr(x) for x in self._items)})"

    def __str__(self) -> str:
        return f"[{', '.join(repr(x) for x in self._items)}]"


_EMPTY: Seq[typing.Any] = Seq(pvector())


# Convenience constructors
def empty() -> Seq[typing.Any]:
    """Create the zero-length sequence."""
    return _EMPTY

def singleton[T](value: T) -> Seq[T]:
    """Create a one-element sequence."""
    return Seq.singleton(value)

def from_iterable[T](items: Iterable[T]) -> Seq[T]:
    """Create a sequence from any ordered iterable."""
    return Seq.from_iterable(items)

def seq[T](*items: T) -> Seq[T]:
    """Create a sequence from positional arguments: seq(1, 2, 3)."""
    return Seq.from_iterable(items)

def size(xs: Seq[typing.Any]) -> int:
    """Number of elements in xs."""
    return xs.size

def get[T](xs: Seq[T], index: int) -> T:
    """Element of xs at index. Same bounds as Seq.get()."""
    return xs.get(index)

def prepend_all[T](prefix: Seq[T], xs: Seq[T]) -> Seq[T]:
    """Concatenate two sequences, prefix first."""
    return xs.prepend_all(prefix)

def suffix_from[T](xs: Seq[T], index: int) -> Seq[T]:
    """Elements of xs at indices [index, size)."""
    return xs.suffix_from(index)

__all__ = (
    "Seq",
    "empty",
    "singleton",
    "from_iterable",
    "seq",
    "size",
    "get",
    "prepend_all",
    "suffix_from",
)

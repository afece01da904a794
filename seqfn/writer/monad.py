"""Writer Monad

A value paired with an accumulated Log[W].

Laws:
- Left identity: Writer.pure(a).then(f) == f(a)
- Right identity: m.then(Writer.pure) == m
- Associativity: m.then(f).then(g) == m.then(lambda x: f(x).then(g))"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .log import Log

class Writer[T, W]:
    """Value + Log. Immutable; every operation returns a new Writer."""

    __slots__ = ("_value", "_log")
    __match_args__ = ("_value", "_log")

    def __init__(self, value: T, log: Log[W] | None = None, /) -> None:
        self._value = value
        self._log: Log[W] = log if log is not None else Log()

    @property
    def value(self) -> T:
        """The computed value."""
        return self._value

    @property
    def log(self) -> Log[W]:
        """The accumulated log."""
        return self._log

    @staticmethod
    def pure[V](value: V) -> Writer[V, typing.Any]:
        """Lift a value into the monad with empty log."""
        return Writer(value)

    @staticmethod
    def tell[LogEntry](*entries: LogEntry) -> Writer[None, LogEntry]:
        """Write entries to the log without producing a value."""
        return Writer(None, Log.of(*entries))

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Writer[U, W]:
        """Functor fmap - apply function to the value, preserve log."""
        return Writer(f(self._value), self._log)

    def map_log[V](self, f: Callable[[Log[W]], Log[V]], /) -> Writer[T, V]:
        """Transform the log."""
        return Writer(self._value, f(self._log))

    # Monad operations

    def then[U](self, f: Callable[[T], Writer[U, W]], /) -> Writer[U, W]:
        """
        Monadic bind (>>=).

        Runs f on the value; the log of f's Writer is appended to ours.
        """
        nxt = f(self._value)
        return Writer(nxt._value, self._log.combine(nxt._log))

    # Writer operations

    def with_log(self, *entries: W) -> Writer[T, W]:
        """Add entries to log without changing the value."""
        return Writer(self._value, self._log.combine(Log.of(*entries)))

    def listen(self) -> Writer[tuple[T, Log[W]], W]:
        """Get access to the log along with the value."""
        return Writer((self._value, self._log), self._log)

    def censor(self, f: Callable[[Log[W]], Log[W]], /) -> Writer[T, W]:
        """Modify the log after computation."""
        return Writer(self._value, f(self._log))

    # Protocol methods

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Writer):
            return NotImplemented
        return self._value == other._value and self._log == other._log

    def __hash__(self) -> int:
        return hash((self._value, self._log))

    def __repr__(self) -> str:
        return f"Writer({self._value!r}, log={self._log!r})"

# Convenience Constructors
def writer_of[T, W](value: T, *log_entries: W) -> Writer[T, W]:
    """Create Writer with value and optional log entries."""
    return Writer(value, Log.of(*log_entries))

__all__ = (
    "Writer",
    "writer_of",
)

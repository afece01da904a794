"""
Writer Monad
============

Writer - value paired with a persistent log:
- T (the computed value)
- Log[W] (accumulated entries, in the order they were written)

The library performs no I/O; diagnostics travel as Log values instead.
"""

from .log import Log
from .monad import Writer, writer_of

__all__ = (
    "Log",
    "Writer",
    "writer_of",
)

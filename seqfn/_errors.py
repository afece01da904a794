from __future__ import annotations

class SequenceError(Exception):
    """Base class for sequence access failures."""

class EmptySequenceError(SequenceError):
    """first() or rest() called on a sequence with no elements."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() of empty sequence")

class IndexOutOfRangeError(SequenceError, IndexError):
    """Positional access outside the valid range of a sequence."""

    index: int
    size: int

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"index {index} out of range for sequence of size {size}")

__all__ = ("EmptySequenceError", "IndexOutOfRangeError", "SequenceError")

from .seq import Seq, empty, from_iterable, get, prepend_all, seq, singleton, size, suffix_from

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

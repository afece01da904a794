"""
seqfn: higher-order combinators over a persistent sequence.

cons / first / rest / map / filter / reduce / reverse over an immutable,
structurally shared Seq, plus the same map and filter rebuilt from
reduce + reverse, and a small VAT example that puts them to work.

Architecture:
- seqfn.persistent - Seq, the persistent sequence (pyrsistent PVector inside)
- seqfn.collection - the combinators (plain, Result-valued, Writer-valued)
- seqfn.lift       - raising accessors lifted into kungfu Result
- seqfn.writer     - Log + Writer, logs carried as values
- seqfn.vat        - Price, VAT rates, VAT over sequences of prices
"""

# Core types
from ._types import Mapper, Predicate, Reducer

# Internal helpers
from ._helpers import compose, identity

# Sequence
from .persistent import (
    Seq,
    empty,
    from_iterable,
    get,
    prepend_all,
    seq,
    singleton,
    size,
    suffix_from,
)

# Combinators
from .collection import (
    cons,
    filter,
    filter_r,
    first,
    map,
    map_r,
    map_w,
    partition,
    reduce,
    reduce_w,
    rest,
    reverse,
    sequence,
    traverse,
)

# Lift helpers
from . import lift

# Writer monad
from . import writer
from .writer import Log, Writer, writer_of

# VAT example
from . import vat

# Errors
from ._errors import EmptySequenceError, IndexOutOfRangeError, SequenceError

__all__ = (
    # Types
    "Mapper",
    "Predicate",
    "Reducer",
    # Helpers
    "compose",
    "identity",
    # Sequence
    "Seq",
    "empty",
    "singleton",
    "from_iterable",
    "seq",
    "size",
    "get",
    "prepend_all",
    "suffix_from",
    # Combinators
    "cons",
    "first",
    "rest",
    "map",
    "filter",
    "reduce",
    "reverse",
    "map_r",
    "filter_r",
    # Combinators - Result
    "traverse",
    "sequence",
    "partition",
    # Combinators - Writer
    "map_w",
    "reduce_w",
    # Lift module
    "lift",
    # Writer module
    "writer",
    "Log",
    "Writer",
    "writer_of",
    # VAT module
    "vat",
    # Errors
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "SequenceError",
)

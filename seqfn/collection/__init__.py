from .cons import cons, first, rest
from .filtering import filter, filter_r, partition
from .fold import reduce, reduce_w, reverse
from .traverse import map, map_r, map_w, sequence, traverse

__all__ = (
    # Decomposition
    "cons",
    "first",
    "rest",
    # Plain
    "map",
    "filter",
    "reduce",
    "reverse",
    # Fold + reverse formulations
    "map_r",
    "filter_r",
    # Result
    "traverse",
    "sequence",
    "partition",
    # Writer
    "map_w",
    "reduce_w",
)

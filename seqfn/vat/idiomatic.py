"""The VAT example written with plain Python collections, no seqfn combinators."""

from __future__ import annotations

from collections.abc import Iterable

from .price import Price


def apply_vat_idiomatic(prices: Iterable[Price]) -> list[Price]:
    """Builtin map over any iterable of prices."""
    return list(map(Price.apply_vat, prices))


__all__ = ("apply_vat_idiomatic",)

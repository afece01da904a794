"""
VAT over sequences of prices
============================

The worked example: the same price list pushed through each combinator shape.

Example:
    apply_vat_all(seq(Price(10000, "SEK"), Price(1000, "EUR")))
    # seq(Price(12500, "SEK"), Price(1200, "EUR"))
"""

from __future__ import annotations

from ..collection import filter, map, map_r, map_w, reduce
from ..persistent import Seq
from ..writer import Writer, writer_of
from .price import Price, apply_vat, has_vat
from .rates import decimal_rate


def apply_vat_all(prices: Seq[Price]) -> Seq[Price]:
    """map(apply_vat, prices)."""
    return map(apply_vat, prices)


def apply_vat_all_r(prices: Seq[Price]) -> Seq[Price]:
    """Same as apply_vat_all, via the fold + reverse formulation."""
    return map_r(apply_vat, prices)


def apply_vat_w(price: Price) -> Writer[Price, str]:
    """apply_vat that also logs what it did."""
    taxed = apply_vat(price)
    return writer_of(taxed, f"{price} -> {taxed} (rate {decimal_rate(price.currency)})")


def apply_vat_all_w(prices: Seq[Price]) -> Writer[Seq[Price], str]:
    """
    apply_vat_all with one log line per price, in input order.

    Example:
        w = apply_vat_all_w(seq(Price(10000, "SEK")))
        w.value  # seq(Price(12500, "SEK"))
        w.log    # Log.of("10000 SEK -> 12500 SEK (rate 0.25)")
    """
    return map_w(apply_vat_w, prices)


def taxable_total(prices: Seq[Price]) -> int:
    """Sum of pre-tax amounts of the prices that carry VAT."""
    return reduce(lambda total, p: total + p.amount, 0, filter(has_vat, prices))


__all__ = (
    "apply_vat_all",
    "apply_vat_all_r",
    "apply_vat_w",
    "apply_vat_all_w",
    "taxable_total",
)

"""
VAT rate table
==============

Fixed currency -> rate mapping. Currencies not listed carry no VAT.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal
from types import MappingProxyType

NO_VAT = Decimal("0.00")
_HALF = Decimal("0.5")

RATES: MappingProxyType[str, Decimal] = MappingProxyType({
    "RON": Decimal("0.19"),
    "BGN": Decimal("0.20"),
    "EUR": Decimal("0.20"),
    "CZK": Decimal("0.21"),
    "PLN": Decimal("0.23"),
    "DKK": Decimal("0.25"),
    "SEK": Decimal("0.25"),
    "HUF": Decimal("0.27"),
})


def decimal_rate(currency: str) -> Decimal:
    """Exact rate for currency; NO_VAT when unknown."""
    return RATES.get(currency, NO_VAT)


def rate(currency: str) -> float:
    """Rate for currency as a float; 0.0 when unknown."""
    return float(decimal_rate(currency))


def vat_on(amount: int, currency: str) -> int:
    """
    VAT due on amount (minor units), rounded to a whole minor unit.

    Exact decimal arithmetic, halves rounded toward positive
    infinity (floor of tax + 0.5), so -0.5 rounds to 0 and 0.5 to 1.
    """
    tax = Decimal(amount) * decimal_rate(currency)
    return int((tax + _HALF).to_integral_value(rounding=ROUND_FLOOR))


__all__ = ("NO_VAT", "RATES", "decimal_rate", "rate", "vat_on")

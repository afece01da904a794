from __future__ import annotations

from dataclasses import dataclass

from .rates import rate, vat_on


@dataclass(frozen=True, slots=True)
class Price:
    """Amount in minor units (e.g. cents) and a 3-letter currency code."""

    amount: int
    currency: str

    def apply_vat(self) -> Price:
        return Price(self.amount + vat_on(self.amount, self.currency), self.currency)

    def has_vat(self) -> bool:
        return rate(self.currency) > 0

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


def vat_amount(price: Price) -> int:
    """VAT component of price, in minor units."""
    return vat_on(price.amount, price.currency)


def apply_vat(price: Price) -> Price:
    """Price with VAT added; currency unchanged."""
    return price.apply_vat()


def has_vat(price: Price) -> bool:
    """True iff price's currency carries a non-zero rate."""
    return price.has_vat()


__all__ = ("Price", "apply_vat", "has_vat", "vat_amount")

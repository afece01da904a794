"""
VAT example
===========

Per-currency VAT applied to prices held in minor units.
"""

from .idiomatic import apply_vat_idiomatic
from .pipeline import apply_vat_all, apply_vat_all_r, apply_vat_all_w, apply_vat_w, taxable_total
from .price import Price, apply_vat, has_vat, vat_amount
from .rates import NO_VAT, RATES, decimal_rate, rate, vat_on

__all__ = (
    # Rates
    "NO_VAT",
    "RATES",
    "decimal_rate",
    "rate",
    "vat_on",
    # Price
    "Price",
    "apply_vat",
    "has_vat",
    "vat_amount",
    # Sequences of prices
    "apply_vat_all",
    "apply_vat_all_r",
    "apply_vat_w",
    "apply_vat_all_w",
    "taxable_total",
    # Plain Python
    "apply_vat_idiomatic",
)

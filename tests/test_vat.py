"""
Tests for the VAT example.

Checks:
1. The rate table, including unknown currencies
2. apply_vat arithmetic and rounding of the VAT component
3. The sequence-level pipelines agree with each other
"""

import pytest

from seqfn import empty, seq
from seqfn.vat import (
    RATES,
    Price,
    apply_vat,
    apply_vat_all,
    apply_vat_all_r,
    apply_vat_all_w,
    apply_vat_idiomatic,
    has_vat,
    rate,
    taxable_total,
    vat_amount,
    vat_on,
)


class TestRates:
    """Currency -> rate lookup"""

    @pytest.mark.parametrize(
        ("currency", "expected"),
        [
            ("RON", 0.19),
            ("BGN", 0.20),
            ("EUR", 0.20),
            ("CZK", 0.21),
            ("PLN", 0.23),
            ("DKK", 0.25),
            ("SEK", 0.25),
            ("HUF", 0.27),
        ],
    )
    def test_known_rates(self, currency: str, expected: float) -> None:
        assert rate(currency) == pytest.approx(expected)

    def test_unknown_currency_has_no_vat(self) -> None:
        assert rate("USD") == 0.0
        assert rate("") == 0.0

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            RATES["USD"] = RATES["EUR"]  # type: ignore[index]


class TestApplyVat:
    """Single price"""

    def test_sek(self) -> None:
        assert apply_vat(Price(10000, "SEK")) == Price(12500, "SEK")

    def test_eur(self) -> None:
        assert Price(1000, "EUR").apply_vat() == Price(1200, "EUR")

    def test_unknown_currency_unchanged(self) -> None:
        assert apply_vat(Price(999, "USD")) == Price(999, "USD")

    def test_zero_amount(self) -> None:
        assert apply_vat(Price(0, "HUF")) == Price(0, "HUF")

    def test_vat_component_is_rounded_to_nearest(self) -> None:
        assert vat_on(2, "SEK") == 1  # 0.5
        assert vat_on(1, "SEK") == 0  # 0.25
        assert vat_on(10, "RON") == 2  # 1.9
        assert vat_amount(Price(3, "PLN")) == 1  # 0.69

    def test_negative_halves_round_toward_positive_infinity(self) -> None:
        assert vat_on(-2, "SEK") == 0  # -0.5
        assert vat_on(-6, "SEK") == -1  # -1.5
        assert vat_on(-3, "SEK") == -1  # -0.75
        assert apply_vat(Price(-2, "SEK")) == Price(-2, "SEK")

    def test_has_vat(self) -> None:
        assert has_vat(Price(1, "EUR"))
        assert Price(1, "CZK").has_vat()
        assert not has_vat(Price(1, "USD"))

    def test_price_is_immutable_value(self) -> None:
        p = Price(100, "EUR")
        assert p == Price(100, "EUR")
        assert p != Price(100, "SEK")
        with pytest.raises(AttributeError):
            p.amount = 5  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Price(12500, "SEK")) == "12500 SEK"


class TestPipelines:
    """VAT over sequences"""

    prices = seq(Price(10000, "SEK"), Price(1000, "EUR"))
    expected = seq(Price(12500, "SEK"), Price(1200, "EUR"))

    def test_apply_vat_all(self) -> None:
        assert apply_vat_all(self.prices) == self.expected

    def test_apply_vat_all_leaves_input_untouched(self) -> None:
        apply_vat_all(self.prices)
        assert self.prices == seq(Price(10000, "SEK"), Price(1000, "EUR"))

    def test_apply_vat_all_r(self) -> None:
        assert apply_vat_all_r(self.prices) == self.expected

    def test_idiomatic(self) -> None:
        assert apply_vat_idiomatic(self.prices) == self.expected.to_list()
        assert apply_vat_idiomatic([]) == []

    def test_apply_vat_all_w(self) -> None:
        w = apply_vat_all_w(seq(Price(10000, "SEK"), Price(1000, "EUR"), Price(5, "USD")))
        assert w.value == seq(Price(12500, "SEK"), Price(1200, "EUR"), Price(5, "USD"))
        assert list(w.log) == [
            "10000 SEK -> 12500 SEK (rate 0.25)",
            "1000 EUR -> 1200 EUR (rate 0.20)",
            "5 USD -> 5 USD (rate 0.00)",
        ]

    def test_empty(self) -> None:
        assert apply_vat_all(empty()) == empty()
        assert apply_vat_all_r(empty()) == empty()

    def test_taxable_total(self) -> None:
        prices = seq(Price(10000, "SEK"), Price(500, "USD"), Price(1000, "EUR"))
        assert taxable_total(prices) == 11000
        assert taxable_total(empty()) == 0

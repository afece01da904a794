from __future__ import annotations

from _infra import banner, run

from seqfn import seq
from seqfn.vat import Price, apply_vat_all, apply_vat_all_w, apply_vat_idiomatic, taxable_total


def main() -> None:
    banner("02_vat_pipeline: map(apply_vat) + Writer log")

    prices = seq(Price(10000, "SEK"), Price(1000, "EUR"), Price(500, "USD"))

    print(f"with VAT:      {apply_vat_all(prices)}")
    print(f"idiomatic:     {apply_vat_idiomatic(prices)}")
    print(f"taxable total: {taxable_total(prices)}")

    w = apply_vat_all_w(prices)
    for line in w.log:
        print(f"log: {line}")


if __name__ == "__main__":
    run(main)

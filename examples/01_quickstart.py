from __future__ import annotations

from _infra import banner, run

from seqfn import cons, empty, filter, filter_r, first, lift as L, map, map_r, reduce, rest, reverse, seq
from kungfu import Error, Ok


def main() -> None:
    banner("01_quickstart: cons / first / rest / map / filter / reduce / reverse")

    xs = seq(1, 2, 3)

    print(f"cons(0, xs)    = {cons(0, xs)}")
    print(f"first(xs)      = {first(xs)}")
    print(f"rest(xs)       = {rest(xs)}")
    print(f"map(+1)        = {map(lambda x: x + 1, xs)}")
    print(f"filter(odd)    = {filter(lambda x: x % 2 != 0, xs)}")
    print(f"reduce(+, 0)   = {reduce(lambda a, x: a + x, 0, xs)}")
    print(f"reverse(xs)    = {reverse(xs)}")
    print(f"map_r(+1)      = {map_r(lambda x: x + 1, xs)}")
    print(f"filter_r(odd)  = {filter_r(lambda x: x % 2 != 0, xs)}")
    # Locality: the source sequence is untouched by everything above.
    print(f"xs             = {xs}")

    match L.uncons(empty()):
        case Ok((head, tail)):
            print(f"uncons: {head} :: {tail}")
        case Error(err):
            print(f"uncons: {err}")


if __name__ == "__main__":
    run(main)

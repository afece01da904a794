"""
Tests for cons / first / rest / map / filter / reduce / reverse / map_r / filter_r.

Scenarios from the worked examples, error paths, evaluation order,
and long inputs (no recursion-depth limits).
"""

import pytest

from seqfn import (
    EmptySequenceError,
    cons,
    empty,
    filter,
    filter_r,
    first,
    from_iterable,
    map,
    map_r,
    reduce,
    rest,
    reverse,
    seq,
)

LONG = 20_000


class TestScenarios:
    """Literal inputs -> expected outputs"""

    def test_cons(self) -> None:
        assert cons(1, seq(2, 3)) == seq(1, 2, 3)

    def test_first(self) -> None:
        assert first(seq(1, 2, 3)) == 1

    def test_rest(self) -> None:
        assert rest(seq(1, 2, 3)) == seq(2, 3)

    def test_map(self) -> None:
        assert map(lambda x: x + 1, seq(1, 2, 3)) == seq(2, 3, 4)

    def test_filter(self) -> None:
        assert filter(lambda x: x % 2 != 0, seq(1, 2, 3)) == seq(1, 3)

    def test_reduce(self) -> None:
        assert reduce(lambda a, x: a + x, 0, seq(1, 2, 3)) == 6

    def test_reverse(self) -> None:
        assert reverse(seq(3, 2, 1)) == seq(1, 2, 3)

    def test_map_r(self) -> None:
        assert map_r(lambda x: x + 1, seq(1, 2, 3)) == seq(2, 3, 4)

    def test_filter_r(self) -> None:
        assert filter_r(lambda x: x % 2 != 0, seq(1, 2, 3)) == seq(1, 3)


class TestErrors:
    """first / rest on empty input"""

    def test_first_of_empty(self) -> None:
        with pytest.raises(EmptySequenceError) as exc_info:
            first(empty())
        assert exc_info.value.operation == "first"
        assert str(exc_info.value) == "first() of empty sequence"

    def test_rest_of_empty(self) -> None:
        with pytest.raises(EmptySequenceError) as exc_info:
            rest(empty())
        assert exc_info.value.operation == "rest"

    def test_rest_of_singleton_is_empty(self) -> None:
        assert rest(seq(1)) == empty()


class TestEmptyInput:
    """Whole-sequence combinators never raise on empty input"""

    def test_map(self) -> None:
        assert map(lambda x: x + 1, empty()) == empty()

    def test_filter(self) -> None:
        assert filter(lambda x: True, empty()) == empty()

    def test_reduce_returns_seed(self) -> None:
        seed = object()
        assert reduce(lambda a, x: a, seed, empty()) is seed

    def test_reverse(self) -> None:
        assert reverse(empty()) == empty()

    def test_map_r(self) -> None:
        assert map_r(lambda x: x + 1, empty()) == empty()

    def test_filter_r(self) -> None:
        assert filter_r(lambda x: True, empty()) == empty()

    def test_cons_onto_empty(self) -> None:
        assert cons(1, empty()) == seq(1)


class TestEvaluationOrder:
    """Callables run once per element, left to right"""

    def test_map_calls_in_index_order(self) -> None:
        seen: list[int] = []

        def record(x: int) -> int:
            seen.append(x)
            return x

        map(record, seq(3, 1, 2))
        assert seen == [3, 1, 2]

    def test_map_r_calls_in_index_order(self) -> None:
        seen: list[int] = []

        def record(x: int) -> int:
            seen.append(x)
            return x

        map_r(record, seq(3, 1, 2))
        assert seen == [3, 1, 2]

    def test_filter_calls_pred_once_per_element(self) -> None:
        seen: list[int] = []

        def pred(x: int) -> bool:
            seen.append(x)
            return x > 1

        assert filter(pred, seq(1, 2, 3)) == seq(2, 3)
        assert seen == [1, 2, 3]

    def test_filter_r_calls_pred_once_per_element(self) -> None:
        seen: list[int] = []

        def pred(x: int) -> bool:
            seen.append(x)
            return x > 1

        assert filter_r(pred, seq(1, 2, 3)) == seq(2, 3)
        assert seen == [1, 2, 3]

    def test_reduce_call_count_and_order(self) -> None:
        steps: list[tuple[str, int]] = []

        def step(acc: str, x: int) -> str:
            steps.append((acc, x))
            return acc + str(x)

        assert reduce(step, "", seq(1, 2, 3)) == "123"
        assert steps == [("", 1), ("1", 2), ("12", 3)]

    def test_exceptions_from_callables_propagate(self) -> None:
        def boom(x: int) -> int:
            raise ZeroDivisionError(x)

        with pytest.raises(ZeroDivisionError):
            map(boom, seq(1))


class TestLongInputs:
    """No recursion depth proportional to length"""

    def test_map(self) -> None:
        xs = from_iterable(range(LONG))
        assert map(lambda x: x + 1, xs).get(LONG - 1) == LONG

    def test_filter(self) -> None:
        xs = from_iterable(range(LONG))
        assert filter(lambda x: x % 2 == 0, xs).size == LONG // 2

    def test_reduce(self) -> None:
        xs = from_iterable(range(LONG))
        assert reduce(lambda a, x: a + x, 0, xs) == sum(range(LONG))

    def test_reverse(self) -> None:
        xs = from_iterable(range(LONG))
        assert reverse(xs).to_list() == list(range(LONG - 1, -1, -1))

    def test_fold_formulations(self) -> None:
        xs = from_iterable(range(2_000))
        assert map_r(lambda x: x * 2, xs) == map(lambda x: x * 2, xs)
        assert filter_r(lambda x: x % 3 == 0, xs) == filter(lambda x: x % 3 == 0, xs)

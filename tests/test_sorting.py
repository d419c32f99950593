"""Tests for the stable insertion sort behind uniform-cost search."""

import operator
import random
from collections import Counter

import pytest

from uninformed_lab.core.sorting import insertion_sort, keyed_sort


class TestInsertionSort:
    def test_empty_and_single(self) -> None:
        assert insertion_sort([], operator.le) == []
        assert insertion_sort([7], operator.le) == [7]

    def test_returns_new_list(self) -> None:
        items = [3, 1, 2]
        out = insertion_sort(items, operator.le)
        assert out == [1, 2, 3]
        assert items == [3, 1, 2]

    def test_descending_predicate(self) -> None:
        assert insertion_sort([1, 3, 2], operator.ge) == [3, 2, 1]

    @pytest.mark.parametrize("seed", range(8))
    def test_permutation_and_adjacent_order(self, seed: int) -> None:
        rng = random.Random(seed)
        items = [rng.randint(0, 9) for _ in range(rng.randint(0, 25))]
        out = insertion_sort(items, operator.le)
        assert Counter(out) == Counter(items)
        assert all(out[i] <= out[i + 1] for i in range(len(out) - 1))

    def test_non_total_predicate_still_permutes(self) -> None:
        items = [5, 1, 4, 2, 3]
        out = insertion_sort(items, lambda a, b: (a + b) % 2 == 0)
        assert Counter(out) == Counter(items)
        assert out == insertion_sort(items, lambda a, b: (a + b) % 2 == 0)


class TestKeyedSort:
    def test_equal_keys_keep_input_order(self) -> None:
        items = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
        assert keyed_sort(items, key=lambda t: t[0]) == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_builtin_stable_sort(self, seed: int) -> None:
        rng = random.Random(seed)
        items = [(rng.randint(0, 4), i) for i in range(20)]
        assert keyed_sort(items, key=lambda t: t[0]) == sorted(items, key=lambda t: t[0])

    def test_custom_predicate(self) -> None:
        words = ["ccc", "a", "bb", "dd"]
        out = keyed_sort(words, key=len, may_precede=operator.ge)
        assert out == ["ccc", "bb", "dd", "a"]

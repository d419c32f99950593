# uninformed_lab/core/sorting.py
# Stable insertion sort used to order one expansion's children for uniform-cost search.
from __future__ import annotations
import operator
from typing import Any, Callable, Iterable, List, TypeVar

T = TypeVar("T")


def insertion_sort(items: Iterable[T], may_precede: Callable[[T, T], bool]) -> List[T]:
    """
    Return a new list holding `items` ordered by `may_precede(a, b)`.

    An element only moves left past neighbours that may NOT precede it, so
    elements that compare as equal keep their input order (stable).
    `may_precede` is expected to be transitive and total; otherwise the
    result is still a deterministic permutation of the input.
    O(n^2), fine for the handful of children produced by one expansion.
    """
    out = list(items)
    for i in range(1, len(out)):
        item = out[i]
        j = i - 1
        while j >= 0 and not may_precede(out[j], item):
            out[j + 1] = out[j]
            j -= 1
        out[j + 1] = item
    return out


def keyed_sort(
    items: Iterable[T],
    key: Callable[[T], Any],
    may_precede: Callable[[Any, Any], bool] = operator.le,
) -> List[T]:
    return insertion_sort(items, lambda a, b: may_precede(key(a), key(b)))

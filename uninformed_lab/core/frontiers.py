# uninformed_lab/core/frontiers.py
# Frontier orderings: each one decides how freshly expanded children are merged
# into what is left of the frontier. The kernel always takes from the left end.
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, List

from .node import Node
from .problem import State, zero_heuristic
from .sorting import keyed_sort

Frontier = Deque[Node]


class Ordering:
    """Base policy. Subclasses override `merge`; `heuristic` is the informed-search hook."""

    def merge(self, children: List[Node], rest: Frontier) -> Frontier:
        raise NotImplementedError

    def heuristic(self, state: State) -> float:
        return zero_heuristic(state)


class FIFOOrdering(Ordering):
    """Children go to the back: shallowest nodes first."""

    def merge(self, children: List[Node], rest: Frontier) -> Frontier:
        rest.extend(children)
        return rest


class LIFOOrdering(Ordering):
    """Children go to the front, in successor order: deepest nodes first."""

    def merge(self, children: List[Node], rest: Frontier) -> Frontier:
        rest.extendleft(reversed(children))
        return rest


class DepthLimitedOrdering(LIFOOrdering):
    """
    LIFO, but children whose path cost exceeds `limit` are dropped (pruning that branch).
    With unit step costs the path cost is the depth, so this is the usual depth limit.
    """

    def __init__(self, limit: float):
        self.limit = limit

    def merge(self, children: List[Node], rest: Frontier) -> Frontier:
        kept = [c for c in children if c.path_cost <= self.limit]
        return super().merge(kept, rest)


class CostOrdering(Ordering):
    """
    Keeps the frontier sorted by total cost (= path cost under the zero heuristic).

    Children are stably sorted among themselves, then interleaved with the
    already-sorted rest in one linear pass; on ties the older entry wins.
    """

    def merge(self, children: List[Node], rest: Frontier) -> Frontier:
        ordered = keyed_sort(children, key=lambda n: n.total_cost)
        merged: Frontier = deque()
        i = 0
        while rest and i < len(ordered):
            if rest[0].total_cost <= ordered[i].total_cost:
                merged.append(rest.popleft())
            else:
                merged.append(ordered[i])
                i += 1
        merged.extend(rest)
        merged.extend(ordered[i:])
        return merged


def initial_frontier(nodes: Iterable[Node]) -> Frontier:
    return deque(nodes)

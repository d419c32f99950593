# uninformed_lab/algorithms/depth_limited.py
# Depth-Limited Search (DLS): depth-first, but children whose path cost exceeds `limit` are never queued.
from __future__ import annotations
from ..core.frontiers import DepthLimitedOrdering
from ..core.problem import Problem, State
from .tree_search import SearchOutcome, tree_search


def depth_limited_search(start: State, problem: Problem, limit: float) -> SearchOutcome:
    # `limit` is compared with path cost, which is the depth only for unit-cost domains.
    return tree_search(start, problem, DepthLimitedOrdering(limit))

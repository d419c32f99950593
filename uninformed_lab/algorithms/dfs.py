# uninformed_lab/algorithms/dfs.py
# Depth-first search: LIFO frontier. Terminates only if every path from the start is finite.
from __future__ import annotations
from ..core.frontiers import LIFOOrdering
from ..core.problem import Problem, State
from .tree_search import SearchOutcome, tree_search


def depth_first_search(start: State, problem: Problem) -> SearchOutcome:
    return tree_search(start, problem, LIFOOrdering())

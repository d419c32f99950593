# uninformed_lab/algorithms/bfs.py
from __future__ import annotations
from ..core.frontiers import FIFOOrdering
from ..core.problem import Problem, State
from .tree_search import SearchOutcome, tree_search


def breadth_first_search(start: State, problem: Problem) -> SearchOutcome:
    return tree_search(start, problem, FIFOOrdering())

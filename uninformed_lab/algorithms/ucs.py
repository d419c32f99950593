# uninformed_lab/algorithms/ucs.py
# Uniform Cost Search: cheapest path cost first. With the zero heuristic this is Dijkstra, not A*.
from __future__ import annotations
from ..core.frontiers import CostOrdering
from ..core.problem import Problem, State
from .tree_search import SearchOutcome, tree_search


def uniform_cost_search(start: State, problem: Problem) -> SearchOutcome:
    return tree_search(start, problem, CostOrdering())

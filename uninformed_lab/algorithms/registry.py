# uninformed_lab/algorithms/registry.py
# Name -> entry point table used by the benchmark harness. Every entry takes (start, problem).
from __future__ import annotations
from functools import partial
from typing import Callable, Dict, Optional

from ..core.problem import Problem, State
from .bfs import breadth_first_search
from .depth_limited import depth_limited_search
from .dfs import depth_first_search
from .ids import iterative_deepening_search
from .tree_search import SearchOutcome
from .ucs import uniform_cost_search

Strategy = Callable[[State, Problem], SearchOutcome]


def make_strategies(dls_limit: float = 12, ids_max_limit: Optional[int] = None) -> Dict[str, Strategy]:
    return {
        "BFS": breadth_first_search,
        "DFS": depth_first_search,
        "DLS": partial(depth_limited_search, limit=dls_limit),
        "IDS": partial(iterative_deepening_search, max_limit=ids_max_limit),
        "UCS": uniform_cost_search,
    }


STRATEGIES: Dict[str, Strategy] = make_strategies()

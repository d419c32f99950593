# uninformed_lab/algorithms/ids.py
from __future__ import annotations
from itertools import count
from typing import Optional

from ..core.problem import Problem, State
from .depth_limited import depth_limited_search
from .tree_search import SearchOutcome


def iterative_deepening_search(start: State, problem: Problem, max_limit: Optional[int] = None) -> SearchOutcome:
    """
    Iterative Deepening Search. Runs depth-limited search with limits 1, 2, 3, ...
    and stops at the first limit that yields a solution.

    The reported expansion count is the total over every attempted limit, not
    just the last one. With `max_limit=None` there is no upper bound, so an
    unsolvable problem keeps deepening forever. Limit 1 is always tried, even
    when `max_limit` is below 1.
    """
    expanded_total = 0
    for limit in count(1):
        solution, expanded = depth_limited_search(start, problem, limit)
        expanded_total += expanded
        if solution is not None:
            return SearchOutcome(solution, expanded_total)
        if max_limit is not None and limit >= max_limit:
            break
    return SearchOutcome(None, expanded_total)

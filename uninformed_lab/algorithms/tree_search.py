# uninformed_lab/algorithms/tree_search.py
# The one search loop every strategy shares. Strategies differ only in the Ordering they pass in.
from __future__ import annotations
from typing import Any, Callable, List, NamedTuple, Optional

from ..core.frontiers import Frontier, Ordering, initial_frontier
from ..core.node import Node
from ..core.problem import Heuristic, Problem, State


class SearchOutcome(NamedTuple):
    """(solution, expansions). `solution` is None when no goal was found."""
    solution: Optional[List[Any]]
    expansions: int

    @property
    def solved(self) -> bool:
        return self.solution is not None


def null_progress(_node: Node, _frontier: Frontier) -> None:
    pass


def tree_search(
    start: State,
    problem: Problem,
    ordering: Ordering,
    heuristic: Optional[Heuristic] = None,
    progress: Optional[Callable[[Node, Frontier], None]] = None,
) -> SearchOutcome:
    """
    Generic tree search.

    Pops the frontier head; if it is a goal, returns its actions. Otherwise it
    is expanded (one expansion, however many children) and the children are
    merged into the remaining frontier by `ordering`. The goal test happens at
    dequeue time, never when a child is generated.

    Only states on the current path are pruned (no global visited set), and
    nothing bounds the loop: a problem with an infinite path and no reachable
    goal under the chosen ordering runs forever.

    `progress(node, frontier)` is called with each node right before it is expanded.
    """
    if heuristic is None:
        heuristic = ordering.heuristic
    if progress is None:
        progress = null_progress

    frontier = initial_frontier([Node.root(start, heuristic)])
    expanded = 0

    while frontier:
        node = frontier.popleft()
        if problem.is_goal(node.state):
            return SearchOutcome(node.solution(), expanded)
        progress(node, frontier)
        children = node.expand(problem, heuristic)
        expanded += 1
        frontier = ordering.merge(children, frontier)

    return SearchOutcome(None, expanded)

# Defines the interface every search domain implements (goal test, successors, step cost).
# uninformed_lab/core/problem.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Protocol, Tuple

Action = Hashable
State = Hashable
Heuristic = Callable[[State], float]


def zero_heuristic(state: State) -> float:
    return 0.0


class Problem(Protocol):
    """
    Atomic state-space problem as seen by the search kernel.

    The kernel never looks inside states or actions: it only compares states
    for equality and hands both back to these three methods.
    """
    def is_goal(self, s: State) -> bool: ...

    def successors(self, s: State) -> Iterable[Tuple[Action, State]]:
        """Ordered (action, next_state) pairs. The order fixes tie-breaking."""
        ...

    def step_cost(self, s: State, a: Action) -> float:
        """Non-negative cost of applying `a` in `s` (not enforced)."""
        ...


@dataclass(frozen=True)
class FunctionProblem(Problem):
    """Wraps three plain callables so ad-hoc problems need no class of their own."""
    goal: Callable[[Any], bool]
    successor_fn: Callable[[Any], Iterable[Tuple[Any, Any]]]
    cost_fn: Callable[[Any, Any], float] = lambda s, a: 1.0

    def is_goal(self, s: State) -> bool:
        return self.goal(s)

    def successors(self, s: State) -> Iterable[Tuple[Action, State]]:
        return self.successor_fn(s)

    def step_cost(self, s: State, a: Action) -> float:
        return self.cost_fn(s, a)

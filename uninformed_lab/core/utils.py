# uninformed_lab/core/utils.py
# Replays an action sequence through a problem's successor function, so returned
# solutions can be checked and priced without trusting the search that produced them.
from __future__ import annotations
from typing import Iterable, List, Tuple

from .problem import Action, Problem, State


def replay(problem: Problem, start: State, actions: Iterable[Action]) -> Tuple[List[State], float]:
    """Return the visited states (start included) and the summed step cost."""
    states = [start]
    cost = 0.0
    s = start
    for a in actions:
        for a2, s2 in problem.successors(s):
            if a2 == a:
                break
        else:
            raise ValueError(f"action {a!r} is not applicable in state {s!r}")
        cost += float(problem.step_cost(s, a))
        s = s2
        states.append(s)
    return states, cost


def final_state(problem: Problem, start: State, actions: Iterable[Action]) -> State:
    states, _ = replay(problem, start, actions)
    return states[-1]

# uninformed_lab/problems/checks.py
from __future__ import annotations
from collections import deque
from numbers import Real


def sanity_check_problem(problem, start, max_states: int = 10_000) -> str:
    """Walks states breadth-first from `start` and checks every step cost is a non-negative number."""
    seen = set()
    q = deque([start])
    steps = 0
    while q and steps < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for a, s2 in problem.successors(s):
            cost = problem.step_cost(s, a)
            if not isinstance(cost, Real):
                raise AssertionError(f"step_cost is {cost!r} for (s={s}, a={a})")
            if cost < 0:
                raise AssertionError(f"negative step_cost {cost} for (s={s}, a={a})")
            q.append(s2)
        steps += 1
    return f"OK: visited {len(seen)} states; all step costs non-negative."

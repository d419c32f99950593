# uninformed_lab/problems/hex_turn.py
from __future__ import annotations
from typing import AbstractSet, Iterable, Optional, Tuple

from ..core.problem import Problem

Hex = Tuple[int, int]          # axial (q, r)
HexState = Tuple[int, int, int]  # (q, r, heading)

# Axial neighbour offsets, counter-clockwise starting east. Heading h faces _DIRECTIONS[h].
_DIRECTIONS = [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)]

_ACTIONS = ("Forward", "TurnLeft", "TurnRight")


def hex_distance(a: Hex, b: Hex) -> int:
    dq, dr = a[0] - b[0], a[1] - b[1]
    return max(abs(dq), abs(dr), abs(dq + dr))


def _classify(s: HexState, s2: HexState) -> str:
    moved = s[:2] != s2[:2]
    turned = s[2] != s2[2]
    assert moved != turned, f"transition {s} -> {s2} must be exactly one of move/turn"
    return "move" if moved else "turn"


class HexTurnProblem(Problem):
    """
    A piece on a hexagonal board that can only step the way it faces.

    - State: (q, r, heading), axial coordinates, heading in 0..5
    - Actions: Forward (one hex ahead), TurnLeft / TurnRight (rotate 60 degrees in place)
    - Board: every hex within `radius` of the origin, minus `blocked`
    - Goal: standing on `goal` (facing `goal_heading` too, when one is given)
    - c(s, Forward) = 1, c(s, Turn*) = turn_cost
    """
    def __init__(
        self,
        radius: int,
        start: HexState,
        goal: Hex,
        blocked: AbstractSet[Hex] | None = None,
        goal_heading: Optional[int] = None,
        turn_cost: float = 1.0,
    ):
        self.radius = radius
        self.blocked = frozenset(blocked or ())
        self.goal = goal
        self.goal_heading = goal_heading
        self.turn_cost = float(turn_cost)
        if not self.on_board(start[:2]):
            raise ValueError(f"start {start} is off the board or blocked")
        if not self.on_board(goal):
            raise ValueError(f"goal {goal} is off the board or blocked")
        if not 0 <= start[2] < 6:
            raise ValueError(f"heading must be in 0..5, got {start[2]}")
        self._start = tuple(start)

    def on_board(self, h: Hex) -> bool:
        return hex_distance(h, (0, 0)) <= self.radius and h not in self.blocked

    def initial_state(self) -> HexState:
        return self._start

    def is_goal(self, state: HexState) -> bool:
        q, r, heading = state
        if (q, r) != self.goal:
            return False
        return self.goal_heading is None or heading == self.goal_heading

    def successors(self, state: HexState) -> Iterable[Tuple[str, HexState]]:
        q, r, heading = state
        for a in _ACTIONS:
            if a == "Forward":
                dq, dr = _DIRECTIONS[heading]
                if not self.on_board((q + dq, r + dr)):
                    continue
                nxt = (q + dq, r + dr, heading)
            elif a == "TurnLeft":
                nxt = (q, r, (heading + 1) % 6)
            else:
                nxt = (q, r, (heading - 1) % 6)
            kind = _classify(state, nxt)
            assert (kind == "move") == (a == "Forward"), f"{a} classified as {kind}"
            yield a, nxt

    def step_cost(self, state: HexState, action: str) -> float:
        return 1.0 if action == "Forward" else self.turn_cost


def make_hex_problem(radius: int = 2) -> HexTurnProblem:
    # Start on the west rim facing east; a short wall in the middle forces a detour.
    blocked = {(0, 0), (0, -1)}
    return HexTurnProblem(radius, start=(-radius, 0, 0), goal=(radius, 0), blocked=blocked)

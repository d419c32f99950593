# uninformed_lab/problems/jump.py
from __future__ import annotations
from typing import AbstractSet, Iterable, NamedTuple, Tuple

from ..core.problem import Problem


class JumpState(NamedTuple):
    length: int
    position: int
    speed: int


# Speed changes tried before each jump, in successor order.
_SPEED_CHANGES = (1, 0, -1)
_ACTION_NAMES = {"accelerate": "Faster", "coast": "Steady", "brake": "Slower"}


def _classify(dv: int) -> str:
    accelerate, coast, brake = dv > 0, dv == 0, dv < 0
    assert accelerate + coast + brake == 1, f"speed change {dv} is not exactly one kind"
    return "accelerate" if accelerate else "coast" if coast else "brake"


class JumpProblem(Problem):
    """
    Momentum-jump course.

    - State: (length, position, speed); the start is (length, 0, 0)
    - Actions: Faster / Steady / Slower change the speed by +1 / 0 / -1, then
      the jumper moves forward by the new speed
    - A jump is legal if the new speed is >= 1, it does not overshoot `length`
      and it does not land in a pit
    - Goal: standing on `length` with speed 1 (a soft landing)
    - c(s, a) = 1

    Position strictly increases, so every path is finite.
    """
    def __init__(self, length: int, pits: AbstractSet[int] | None = None):
        if length < 1:
            raise ValueError(f"course length must be at least 1, got {length}")
        self.length = length
        self.pits = frozenset(pits or ())
        if length in self.pits:
            raise ValueError("the finish square cannot be a pit")

    def initial_state(self) -> JumpState:
        return JumpState(self.length, 0, 0)

    def is_goal(self, state: Tuple[int, int, int]) -> bool:
        length, position, speed = state
        return position == length and speed == 1

    def successors(self, state: Tuple[int, int, int]) -> Iterable[Tuple[str, JumpState]]:
        length, position, speed = state
        for dv in _SPEED_CHANGES:
            name = _ACTION_NAMES[_classify(dv)]
            v = speed + dv
            if v < 1:
                continue
            p = position + v
            if p > length or p in self.pits:
                continue
            yield name, JumpState(length, p, v)

    def step_cost(self, state, action) -> float:
        return 1.0


def make_jump_problem(length: int = 8) -> JumpProblem:
    return JumpProblem(length)

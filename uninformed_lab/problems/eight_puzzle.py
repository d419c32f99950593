# uninformed_lab/problems/eight_puzzle.py
from __future__ import annotations
import random
from typing import Iterable, Optional, Sequence, Tuple

from ..core.problem import Problem

Board = Tuple[int, ...]

GOAL: Board = (1, 2, 3, 4, 5, 6, 7, 8, 0)

# Moves of the blank (0) on the 3x3 board, in successor order.
_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}
_OPPOSITE = {"Up": "Down", "Down": "Up", "Left": "Right", "Right": "Left"}


def _check_board(tiles: Sequence[int]) -> Board:
    board = tuple(tiles)
    if sorted(board) != list(range(9)):
        raise ValueError(f"an 8-puzzle board needs the tiles 0..8 exactly once, got {board}")
    return board


def is_solvable(board: Board, goal: Board = GOAL) -> bool:
    """On a 3x3 board, two layouts are mutually reachable iff their inversion counts share parity."""
    def inversions(b: Board) -> int:
        tiles = [t for t in b if t != 0]
        return sum(1 for i in range(len(tiles)) for j in range(i + 1, len(tiles)) if tiles[i] > tiles[j])
    return inversions(board) % 2 == inversions(goal) % 2


def _blank_moves(board: Board) -> Iterable[Tuple[str, Board]]:
    assert board.count(0) == 1, f"board {board} must hold exactly one blank"
    i = board.index(0)
    r, c = divmod(i, 3)
    for name, (dr, dc) in _MOVES.items():
        nr, nc = r + dr, c + dc
        if 0 <= nr < 3 and 0 <= nc < 3:
            j = nr * 3 + nc
            cells = list(board)
            cells[i], cells[j] = cells[j], cells[i]
            yield name, tuple(cells)


class EightPuzzle(Problem):
    """
    Sliding-tile 8-puzzle with unit costs.

    - State: 9-tuple in row-major order, 0 is the blank
    - Actions: Up / Down / Left / Right, naming the direction the blank moves
    - Goal: `goal` (defaults to 1..8 followed by the blank)
    """
    def __init__(self, start: Sequence[int], goal: Sequence[int] = GOAL):
        self._start = _check_board(start)
        self.goal = _check_board(goal)

    def initial_state(self) -> Board:
        return self._start

    def is_goal(self, state: Board) -> bool:
        return state == self.goal

    def successors(self, state: Board) -> Iterable[Tuple[str, Board]]:
        return _blank_moves(state)

    def step_cost(self, state, action) -> float:
        return 1.0


def scrambled(moves: int, seed: Optional[int] = None, goal: Board = GOAL) -> Board:
    """Random walk of `moves` blank moves away from `goal`, never undoing the previous move.

    The result is always solvable and at most `moves` steps from the goal.
    """
    rng = random.Random(seed)
    board, last = goal, None
    for _ in range(moves):
        options = [(a, b) for a, b in _blank_moves(board) if a != _OPPOSITE.get(last)]
        last, board = rng.choice(options)
    return board


def make_eight_puzzle(moves: int = 10, seed: Optional[int] = 0) -> EightPuzzle:
    return EightPuzzle(scrambled(moves, seed))

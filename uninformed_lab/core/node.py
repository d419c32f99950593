# uninformed_lab/core/node.py
# Search-tree node: a state plus how we got there (action, parent, costs, depth).
# Nodes are frozen once built; siblings share their ancestor chain instead of copying it.
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional

from .problem import Heuristic, Problem, State


@dataclass(frozen=True, eq=False)
class Node:
    state: Any
    parent: Optional["Node"] = None
    action: Any = None
    path_cost: float = 0.0
    total_cost: float = 0.0
    depth: int = 0

    @classmethod
    def root(cls, state: State, heuristic: Heuristic) -> "Node":
        return cls(state=state, total_cost=heuristic(state))

    def has_ancestor_state(self, state: State) -> bool:
        """True if `state` appears on the path from the root to this node (inclusive).

        O(depth) per call and deliberately not cached.
        """
        cur: Optional[Node] = self
        while cur is not None:
            if cur.state == state:
                return True
            cur = cur.parent
        return False

    def expand(self, problem: Problem, heuristic: Heuristic) -> List["Node"]:
        """Children in successor order, minus any that would revisit a state on our own path."""
        s = self.state
        children = []
        for a, s2 in problem.successors(s):
            if self.has_ancestor_state(s2):
                continue
            g = self.path_cost + problem.step_cost(s, a)
            children.append(Node(
                state=s2,
                parent=self,
                action=a,
                path_cost=g,
                total_cost=g + heuristic(s2),
                depth=self.depth + 1,
            ))
        return children

    def path(self) -> List["Node"]:
        nodes = []
        cur: Optional[Node] = self
        while cur is not None:
            nodes.append(cur)
            cur = cur.parent
        nodes.reverse()
        return nodes

    def solution(self) -> List[Any]:
        """Actions from the root down to this node, oldest first."""
        actions = []
        cur = self
        while cur.parent is not None:
            actions.append(cur.action)
            cur = cur.parent
        actions.reverse()
        return actions

    def __repr__(self) -> str:
        return f"<Node {self.state!r} g={self.path_cost} d={self.depth}>"

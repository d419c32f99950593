"""Tests for Node construction, ancestry and expansion."""

import dataclasses

import pytest
from conftest import graph_problem

from uninformed_lab.core.node import Node
from uninformed_lab.core.problem import FunctionProblem, zero_heuristic


def _chain(*states: str) -> Node:
    node = Node.root(states[0], zero_heuristic)
    for s in states[1:]:
        node = Node(s, parent=node, action=f"to {s}", path_cost=node.path_cost + 1,
                    total_cost=node.path_cost + 1, depth=node.depth + 1)
    return node


class TestRoot:
    def test_root_fields(self) -> None:
        root = Node.root("s", lambda s: 5.0)
        assert root.parent is None
        assert root.action is None
        assert root.path_cost == 0
        assert root.total_cost == 5.0
        assert root.depth == 0
        assert root.solution() == []

    def test_frozen(self) -> None:
        root = Node.root("s", zero_heuristic)
        with pytest.raises(dataclasses.FrozenInstanceError):
            root.depth = 3


class TestAncestry:
    def test_has_ancestor_state_is_inclusive(self) -> None:
        node = _chain("a", "b", "c")
        assert node.has_ancestor_state("c")
        assert node.has_ancestor_state("a")
        assert not node.has_ancestor_state("d")

    def test_solution_and_path_oldest_first(self) -> None:
        node = _chain("a", "b", "c")
        assert node.solution() == ["to b", "to c"]
        assert [n.state for n in node.path()] == ["a", "b", "c"]
        assert len(node.solution()) == node.depth

    def test_siblings_share_ancestors(self) -> None:
        problem = graph_problem({"a": [("b", 1), ("c", 1)]}, "z")
        root = Node.root("a", zero_heuristic)
        b, c = root.expand(problem, zero_heuristic)
        assert b.parent is root and c.parent is root


class TestExpand:
    def test_costs_depth_and_order(self) -> None:
        problem = graph_problem({"a": [("b", 2), ("c", 0.5)], "b": [("d", 3)]}, "z")
        root = Node.root("a", zero_heuristic)
        b, c = root.expand(problem, lambda s: 10.0)
        assert (b.state, b.action, b.path_cost, b.total_cost, b.depth) == ("b", "to b", 2, 12.0, 1)
        assert (c.state, c.path_cost, c.total_cost) == ("c", 0.5, 10.5)
        (d,) = b.expand(problem, zero_heuristic)
        assert d.path_cost == 5 and d.depth == 2 and d.parent is b

    def test_states_on_current_path_are_skipped(self) -> None:
        problem = FunctionProblem(
            goal=lambda s: False,
            successor_fn=lambda s: {"a": [("stay", "a"), ("go", "b")], "b": [("back", "a"), ("on", "c")]}[s],
        )
        root = Node.root("a", zero_heuristic)
        (b,) = root.expand(problem, zero_heuristic)
        assert b.state == "b"
        (c,) = b.expand(problem, zero_heuristic)
        assert c.state == "c"

    def test_no_successors(self) -> None:
        problem = graph_problem({}, "z")
        assert Node.root("a", zero_heuristic).expand(problem, zero_heuristic) == []

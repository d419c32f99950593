"""Shared fixtures: small hand-built graphs wrapped as problems."""

from typing import Dict, List, Tuple

import pytest

from uninformed_lab.core.problem import FunctionProblem

Edges = Dict[str, List[Tuple[str, float]]]


def graph_problem(edges: Edges, goal: str) -> FunctionProblem:
    """Problem over a directed graph. The action to reach `v` is named `"to v"`."""
    costs = {(u, f"to {v}"): c for u, out in edges.items() for v, c in out}
    return FunctionProblem(
        goal=lambda s: s == goal,
        successor_fn=lambda s: [(f"to {v}", v) for v, _ in edges.get(s, [])],
        cost_fn=lambda s, a: costs[(s, a)],
    )


@pytest.fixture
def detour_graph() -> FunctionProblem:
    """Two routes A -> G: a short expensive one via B and a long cheap one via C and D."""
    edges = {
        "A": [("B", 10), ("C", 1)],
        "B": [("G", 1)],
        "C": [("D", 1)],
        "D": [("G", 1)],
        "G": [],
    }
    return graph_problem(edges, "G")


@pytest.fixture
def diamond_graph() -> FunctionProblem:
    """B and C both lead to D, so D and everything below it is reachable along two paths."""
    edges = {
        "A": [("B", 1), ("C", 1)],
        "B": [("D", 1)],
        "C": [("D", 1)],
        "D": [("E", 1)],
        "E": [("G", 1)],
        "G": [],
    }
    return graph_problem(edges, "G")

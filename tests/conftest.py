"""Pytest configuration and fixtures for pathgraph-lib tests."""

import pytest

from pathgraph import DirectedGraph, Vertex, WeightedEdge


@pytest.fixture
def graph():
    """Provide an empty graph for each test."""
    return DirectedGraph(graph_id="test-graph")


@pytest.fixture
def diamond(graph):
    """Graph where the lightest route is not the one with fewest edges.

    Graph structure:
        A --1--> B --1--> C --1--> D
        A --5------------> C
    """
    a, b, c, d = (Vertex(vertex_id=name) for name in "ABCD")
    graph.add_edge(a, b, WeightedEdge(1))
    graph.add_edge(b, c, WeightedEdge(1))
    graph.add_edge(a, c, WeightedEdge(5))
    graph.add_edge(c, d, WeightedEdge(1))
    return graph


@pytest.fixture
def dead_end(graph):
    """Graph whose first DFS branch never reaches the target.

    Graph structure:
        S --> X --> Y
        S --> B --> T
    """
    s, x, y, b, t = (Vertex(vertex_id=name) for name in ["S", "X", "Y", "B", "T"])
    graph.add_edge(s, x, WeightedEdge(1))
    graph.add_edge(x, y, WeightedEdge(1))
    graph.add_edge(s, b, WeightedEdge(1))
    graph.add_edge(b, t, WeightedEdge(1))
    return graph

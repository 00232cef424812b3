"""Directed graph store and single-source path search.

Public API:
    DirectedGraph: Identity-keyed vertex/edge store with path queries.
    Identifiable: Protocol every vertex type satisfies.
    WeightMapper: Edge-data to weight callable used by weighted search.
    Vertex: Ready-made mutable vertex.
    WeightedEdge: Ready-made immutable weighted edge data.
    Path: Path query result.
    SearchMethod: Search algorithm selector.
    SearchOutcome: Found / unknown start / unknown target / unreachable.
    SearchResult: Outcome plus optional path.
    depth_first_search, breadth_first_search, dijkstra_shortest_path,
    explain_miss: Functional forms of the path queries.
"""

from __future__ import annotations

from .protocol import Identifiable, WeightMapper
from .search import (
    breadth_first_search,
    depth_first_search,
    dijkstra_shortest_path,
    explain_miss,
)
from .store import DirectedGraph
from .types import Path, SearchMethod, SearchOutcome, SearchResult, Vertex, WeightedEdge

__all__ = [
    "DirectedGraph",
    "Identifiable",
    "WeightMapper",
    "Vertex",
    "WeightedEdge",
    "Path",
    "SearchMethod",
    "SearchOutcome",
    "SearchResult",
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
    "explain_miss",
]

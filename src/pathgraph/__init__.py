"""pathgraph-lib: Generic directed graph with DFS, BFS and Dijkstra path search."""

__version__ = "0.1.0"

from .exceptions import (
    GraphError,
    InvalidVertexError,
    NoPathError,
    VertexNotFoundError,
)
from .graph import (
    DirectedGraph,
    Identifiable,
    Path,
    SearchMethod,
    SearchOutcome,
    SearchResult,
    Vertex,
    WeightedEdge,
    WeightMapper,
    breadth_first_search,
    depth_first_search,
    dijkstra_shortest_path,
    explain_miss,
)

__all__ = [
    # Graph store
    "DirectedGraph",
    "Identifiable",
    "Vertex",
    "WeightedEdge",
    # Path search
    "Path",
    "SearchMethod",
    "SearchOutcome",
    "SearchResult",
    "WeightMapper",
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
    "explain_miss",
    # Exceptions
    "GraphError",
    "InvalidVertexError",
    "NoPathError",
    "VertexNotFoundError",
]

"""Value types for the directed graph and its path queries.

Public API:
    SearchMethod: Which search algorithm a query uses.
    SearchOutcome: Why a query did or did not produce a path.
    Vertex: Mutable vertex keyed by its ``vertex_id``.
    WeightedEdge: Immutable edge data with a numeric weight.
    Path: Result of a path query.
    SearchResult: Path query result paired with its outcome.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

V = TypeVar("V")


class SearchMethod(Enum):
    """Path search algorithms offered by the graph."""

    DFS = "depth_first"
    BFS = "breadth_first"
    DIJKSTRA = "dijkstra"


class SearchOutcome(Enum):
    """Classification of a path query."""

    FOUND = "found"
    UNKNOWN_START = "unknown_start"
    UNKNOWN_TARGET = "unknown_target"
    UNREACHABLE = "unreachable"


@dataclass(eq=False)
class Vertex:
    """A general-purpose vertex.

    Equality and hashing follow ``vertex_id`` only, so two instances with the
    same identity but different labels compare equal. Everything except
    ``vertex_id`` may be mutated after insertion.

    Attributes:
        vertex_id: Unique identity within a graph.
        label: Optional display name.
        properties: Arbitrary key-value data owned by the caller.
    """

    vertex_id: str
    label: str = ""
    properties: dict[str, Any] = field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.vertex_id == other.vertex_id

    def __hash__(self) -> int:
        return hash(self.vertex_id)

    def __str__(self) -> str:
        return self.vertex_id


@dataclass(frozen=True)
class WeightedEdge:
    """Immutable edge data carrying a numeric weight.

    An edge has no identity of its own. The graph addresses it by its
    (from, to) vertex pair.

    Attributes:
        weight: Non-negative cost of traversing the edge.
        label: Optional relationship name (e.g. "road", "rail").
        properties: Arbitrary key-value data.
    """

    weight: float = 0.0
    label: str = ""
    properties: dict[str, Any] = field(default_factory=dict, compare=False)

    @staticmethod
    def weight_of(edge: WeightedEdge) -> float:
        """Weight mapper for graphs whose edge data are WeightedEdge values."""
        return edge.weight

    def __str__(self) -> str:
        if self.label:
            return f"{self.label}:{self.weight:g}"
        return f"{self.weight:g}"


@dataclass
class Path(Generic[V]):
    """Result of a path query.

    Attributes:
        vertices: Walk from start to target. Consecutive vertices are joined
            by a directed edge in the graph. A single vertex has no edges.
        visited: Every vertex the search examined, keyed by ``vertex_id`` in
            first-visit order. May include vertices outside the walk.
        total_weight: Accumulated edge weight of the walk. Only set by
            weighted search.
    """

    vertices: list[V] = field(default_factory=list)
    visited: dict[str, V] = field(default_factory=dict)
    total_weight: float = 0.0

    @property
    def ids(self) -> list[str]:
        return [v.vertex_id for v in self.vertices]

    @property
    def edge_count(self) -> int:
        return max(len(self.vertices) - 1, 0)

    @property
    def is_empty(self) -> bool:
        return not self.vertices

    def __len__(self) -> int:
        return len(self.vertices)

    def __str__(self) -> str:
        return (
            f"Weight={self.total_weight:f} Length={len(self.vertices)} "
            f"visited={len(self.visited)} ({', '.join(self.ids)})"
        )


@dataclass
class SearchResult(Generic[V]):
    """A path query outcome together with the path, when one was found."""

    outcome: SearchOutcome
    method: SearchMethod
    path: Path[V] | None = None

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.FOUND


__all__ = [
    "SearchMethod",
    "SearchOutcome",
    "Vertex",
    "WeightedEdge",
    "Path",
    "SearchResult",
]

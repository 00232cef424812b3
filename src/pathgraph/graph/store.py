"""In-memory directed graph with identity-keyed vertices.

Public API:
    DirectedGraph: Vertex/edge store plus the three path queries.

Representation invariants:
    1. ``_vertices`` maps every vertex_id to the one stored vertex, so
       duplicate identities are impossible.
    2. ``_adjacency`` maps every stored vertex_id to a dict of
       ``to_id -> edge``. The inner dict is empty when the vertex has no
       outgoing edges.
    3. Between any two vertices A and B there is at most one edge A->B and
       at most one edge B->A.
    4. Every id used as a key at either level of ``_adjacency`` is also a
       key of ``_vertices``, and the other way round.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, TypeVar

from ..exceptions import InvalidVertexError, NoPathError, VertexNotFoundError
from . import search as _search
from .protocol import WeightMapper
from .types import Path, SearchMethod, SearchOutcome, SearchResult

logger = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E")


class DirectedGraph(Generic[V, E]):
    """Directed graph over caller-defined vertex and edge types.

    Vertices must expose a string ``vertex_id``. Edge data may be any
    non-None value. Every method that takes a vertex also accepts its
    ``vertex_id``; an unknown id behaves exactly like ``None``.

    Not thread-safe. Serialize access externally if the graph is shared.

    Args:
        graph_id: Human-readable identifier used in repr and log lines.
    """

    def __init__(self, graph_id: str = "graph") -> None:
        if not isinstance(graph_id, str) or not graph_id:
            raise ValueError("graph_id must be a non-empty string")
        self._graph_id = graph_id
        self._vertices: dict[str, V] = {}
        self._adjacency: dict[str, dict[str, E]] = {}

    @property
    def graph_id(self) -> str:
        return self._graph_id

    # ── vertex operations ────────────────────────────────────

    @property
    def vertices(self) -> list[V]:
        """All stored vertices, in insertion order."""
        return list(self._vertices.values())

    def get_vertex(self, vertex_id: str | None) -> V | None:
        """Fetch a vertex by identity, or None if not found."""
        if vertex_id is None:
            return None
        return self._vertices.get(vertex_id)

    def add_or_get_vertex(self, vertex: V | None) -> V | None:
        """Insert ``vertex`` unless its identity is already present.

        Returns:
            The previously stored vertex with the same ``vertex_id`` if
            there is one, otherwise ``vertex`` itself. None for None.

        Raises:
            InvalidVertexError: If ``vertex`` has no string ``vertex_id``.
        """
        if vertex is None:
            return None
        vertex_id = _identity_of(vertex)
        existing = self._vertices.get(vertex_id)
        if existing is not None:
            logger.debug("Vertex %s already in %s, keeping stored instance", vertex_id, self._graph_id)
            return existing
        self._vertices[vertex_id] = vertex
        self._adjacency[vertex_id] = {}
        return vertex

    def vertex_count(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return self._resolve_id(vertex) is not None

    # ── edge operations ──────────────────────────────────────

    def add_edge(self, from_: V | str | None, to: V | str | None, edge: E | None) -> bool:
        """Add the directed edge ``from_ -> to`` carrying ``edge``.

        Vertex references are added to the graph (or matched to the stored
        vertex with the same identity) before anything else is checked, so
        they stay in the graph even when the edge is rejected. Identities
        are only looked up, never created.

        Returns:
            True if the edge was added. False if an endpoint is missing,
            ``edge`` is None, or an edge ``from_ -> to`` already exists.
        """
        from_id = self._materialize(from_)
        to_id = self._materialize(to)
        if from_id is None or to_id is None or edge is None:
            return False

        targets = self._adjacency[from_id]
        if to_id in targets:
            logger.debug("Edge %s->%s already in %s, not replaced", from_id, to_id, self._graph_id)
            return False
        targets[to_id] = edge
        return True

    def add_connection(self, v1: V | str | None, v2: V | str | None, edge: E | None) -> bool:
        """Add ``v1 -> v2`` and ``v2 -> v1``, both carrying ``edge``.

        Returns True only when both edges were added. The reverse edge is
        not attempted when the forward one is rejected, and a forward edge
        that was added stays even if the reverse one is rejected.
        """
        return self.add_edge(v1, v2, edge) and self.add_edge(v2, v1, edge)

    def get_edge(self, from_: V | str | None, to: V | str | None) -> E | None:
        """Return the data of edge ``from_ -> to``, or None."""
        from_id = self._resolve_id(from_)
        to_id = self._resolve_id(to)
        if from_id is None or to_id is None:
            return None
        return self._adjacency[from_id].get(to_id)

    def has_edge(self, from_: V | str | None, to: V | str | None) -> bool:
        return self.get_edge(from_, to) is not None

    def neighbours(self, vertex: V | str | None) -> list[V] | None:
        """Vertices reachable over one outgoing edge of ``vertex``.

        Returns:
            None if ``vertex`` is not in the graph, otherwise a (possibly
            empty) list in edge insertion order.
        """
        vertex_id = self._resolve_id(vertex)
        if vertex_id is None:
            return None
        return [self._vertices[to_id] for to_id in self._adjacency[vertex_id]]

    neighbors = neighbours

    def edges_from(self, vertex: V | str | None) -> list[E] | None:
        """Data of every outgoing edge of ``vertex``, or None if absent."""
        vertex_id = self._resolve_id(vertex)
        if vertex_id is None:
            return None
        return list(self._adjacency[vertex_id].values())

    def outgoing(self, vertex: V | str | None) -> list[tuple[V, E]] | None:
        """(neighbour, edge) pairs for every outgoing edge, or None if absent."""
        vertex_id = self._resolve_id(vertex)
        if vertex_id is None:
            return None
        return [(self._vertices[to_id], edge) for to_id, edge in self._adjacency[vertex_id].items()]

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency.values())

    def is_walk(self, sequence: Iterable[V | str]) -> bool:
        """Check that every consecutive pair in ``sequence`` is joined by an edge.

        An empty sequence and a single stored vertex both count as walks.
        """
        ids = [self._resolve_id(item) for item in sequence]
        if any(vertex_id is None for vertex_id in ids):
            return False
        return all(b in self._adjacency[a] for a, b in zip(ids, ids[1:]))

    # ── maintenance ──────────────────────────────────────────

    def remove_unconnected_vertices(self) -> int:
        """Drop every vertex that has no outgoing edges.

        Only the outgoing degree counts: a vertex that is the target of
        edges but has none of its own is removed too, together with the
        edges that point to it. Removing those edges can leave other
        vertices without outgoing edges; they are kept until the next call.

        Returns:
            The number of vertices removed.
        """
        isolated = [vertex_id for vertex_id, targets in self._adjacency.items() if not targets]
        for vertex_id in isolated:
            del self._adjacency[vertex_id]

        removed = [vertex_id for vertex_id in self._vertices if vertex_id not in self._adjacency]
        for vertex_id in removed:
            del self._vertices[vertex_id]

        dropped_edges = 0
        if removed:
            gone = set(removed)
            for targets in self._adjacency.values():
                for to_id in [t for t in targets if t in gone]:
                    del targets[to_id]
                    dropped_edges += 1

        logger.debug(
            "Removed %d unconnected vertices and %d incoming edges from %s",
            len(removed),
            dropped_edges,
            self._graph_id,
        )
        return len(removed)

    # ── path queries ─────────────────────────────────────────

    def depth_first_search(self, start_id: str, target_id: str) -> Path[V] | None:
        """First path found by depth-first search, or None. Not necessarily shortest."""
        return _search.depth_first_search(self, start_id, target_id)

    def breadth_first_search(self, start_id: str, target_id: str) -> Path[V] | None:
        """Path with the fewest edges, or None."""
        return _search.breadth_first_search(self, start_id, target_id)

    def dijkstra_shortest_path(
        self,
        start_id: str,
        target_id: str,
        weight_mapper: WeightMapper | None = None,
    ) -> Path[V] | None:
        """Path with the lowest total edge weight, or None.

        ``weight_mapper`` must return non-negative weights; without one
        every edge weighs 0.0.
        """
        return _search.dijkstra_shortest_path(self, start_id, target_id, weight_mapper)

    def search(
        self,
        start_id: str,
        target_id: str,
        method: SearchMethod = SearchMethod.BFS,
        weight_mapper: WeightMapper | None = None,
    ) -> SearchResult[V]:
        """Run a path query and report why it failed, if it did.

        Unlike the plain query methods this tells an unknown start or target
        apart from an unreachable target. Never raises for a miss.
        """
        if method is SearchMethod.DFS:
            path = self.depth_first_search(start_id, target_id)
        elif method is SearchMethod.BFS:
            path = self.breadth_first_search(start_id, target_id)
        elif method is SearchMethod.DIJKSTRA:
            path = self.dijkstra_shortest_path(start_id, target_id, weight_mapper)
        else:
            raise ValueError(f"Unsupported search method: {method!r}")

        if path is not None:
            return SearchResult(outcome=SearchOutcome.FOUND, method=method, path=path)
        outcome = _search.classify_endpoints(self, start_id, target_id) or SearchOutcome.UNREACHABLE
        return SearchResult(outcome=outcome, method=method)

    def find_path(
        self,
        start_id: str,
        target_id: str,
        method: SearchMethod = SearchMethod.BFS,
        weight_mapper: WeightMapper | None = None,
    ) -> Path[V]:
        """Like :meth:`search`, but raise instead of returning a miss.

        Raises:
            VertexNotFoundError: If the start or target id is not in the graph.
            NoPathError: If the target cannot be reached from the start.
        """
        result = self.search(start_id, target_id, method, weight_mapper)
        if result.outcome is SearchOutcome.UNKNOWN_START:
            raise VertexNotFoundError(start_id, f"Start vertex not found: {start_id}")
        if result.outcome is SearchOutcome.UNKNOWN_TARGET:
            raise VertexNotFoundError(target_id, f"Target vertex not found: {target_id}")
        if result.path is None:
            raise NoPathError(start_id, target_id)
        return result.path

    # ── helpers ──────────────────────────────────────────────

    def _resolve_id(self, vertex: Any) -> str | None:
        """Map a vertex reference or identity to a stored vertex_id."""
        if vertex is None:
            return None
        if isinstance(vertex, str):
            vertex_id = vertex
        else:
            vertex_id = getattr(vertex, "vertex_id", None)
            if not isinstance(vertex_id, str):
                return None
        return vertex_id if vertex_id in self._vertices else None

    def _materialize(self, vertex: Any) -> str | None:
        """Resolve identities, insert-or-get references."""
        if vertex is None or isinstance(vertex, str):
            return self._resolve_id(vertex)
        return _identity_of(self.add_or_get_vertex(vertex))

    def __repr__(self) -> str:
        return (
            f"DirectedGraph(graph_id={self._graph_id!r}, "
            f"vertices={self.vertex_count()}, edges={self.edge_count()})"
        )

    def __str__(self) -> str:
        lines = []
        for vertex_id, vertex in self._vertices.items():
            targets = ",".join(
                f"{self._vertices[to_id]}({edge})" for to_id, edge in self._adjacency[vertex_id].items()
            )
            lines.append(f"{vertex}: [{targets}]")
        return "{ " + ",\n  ".join(lines) + "\n}"


def _identity_of(vertex: Any) -> str:
    vertex_id = getattr(vertex, "vertex_id", None)
    if not isinstance(vertex_id, str):
        raise InvalidVertexError(
            f"{type(vertex).__name__} does not expose a string vertex_id"
        )
    return vertex_id


__all__ = ["DirectedGraph"]

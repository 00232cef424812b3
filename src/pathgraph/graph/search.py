"""Single-source path search over a DirectedGraph.

Public API:
    depth_first_search: First path found, not necessarily shortest.
    breadth_first_search: Path with the fewest edges.
    dijkstra_shortest_path: Path with the lowest total weight.
    classify_endpoints: Which endpoint of a query, if any, is unknown.
    explain_miss: Outcome of a query without building the path.

Every search resolves both ids first and returns None when either is
unknown or the target is unreachable. A query whose start equals its target
returns a one-vertex path with only that vertex visited. Searches never
mutate the graph.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .protocol import WeightMapper
from .types import Path, SearchOutcome

if TYPE_CHECKING:
    from .store import DirectedGraph

logger = logging.getLogger(__name__)


def _trivial_path(vertex: Any) -> Path:
    return Path(vertices=[vertex], visited={vertex.vertex_id: vertex})


def _resolve_start(graph: DirectedGraph, start_id: str, target_id: str) -> Any:
    """Return the start vertex, or None if either endpoint is unknown."""
    start = graph.get_vertex(start_id)
    if start is None or graph.get_vertex(target_id) is None:
        logger.debug("Search %s->%s: unknown endpoint", start_id, target_id)
        return None
    return start


def depth_first_search(graph: DirectedGraph, start_id: str, target_id: str) -> Path | None:
    """Depth-first search from ``start_id`` to ``target_id``.

    Neighbours are tried in edge insertion order and the first walk that
    reaches the target wins. An explicit stack of neighbour iterators
    replaces recursion, so deep graphs cannot exhaust the call stack.
    A vertex already visited is never entered again.
    """
    start = _resolve_start(graph, start_id, target_id)
    if start is None:
        return None
    if start_id == target_id:
        return _trivial_path(start)

    path = Path(visited={start_id: start})
    stack = [(start, iter(graph.neighbours(start_id)))]
    while stack:
        _, pending = stack[-1]
        for neighbour in pending:
            neighbour_id = neighbour.vertex_id
            if neighbour_id in path.visited:
                continue
            path.visited[neighbour_id] = neighbour
            if neighbour_id == target_id:
                path.vertices = [vertex for vertex, _ in stack] + [neighbour]
                logger.debug("DFS %s->%s found after %d visits", start_id, target_id, len(path.visited))
                return path
            stack.append((neighbour, iter(graph.neighbours(neighbour_id))))
            break
        else:
            stack.pop()

    logger.debug("DFS %s->%s exhausted %d vertices", start_id, target_id, len(path.visited))
    return None


def breadth_first_search(graph: DirectedGraph, start_id: str, target_id: str) -> Path | None:
    """Breadth-first search from ``start_id`` to ``target_id``.

    The returned path has the minimum number of edges. ``visited`` holds
    every dequeued vertex.
    """
    start = _resolve_start(graph, start_id, target_id)
    if start is None:
        return None
    if start_id == target_id:
        return _trivial_path(start)

    path = Path(visited={start_id: start})
    queue = deque([start])
    # Every queued or visited vertex, mapped to the vertex it was reached from.
    discovered_from: dict[str, str | None] = {start_id: None}

    while queue:
        current = queue.popleft()
        current_id = current.vertex_id
        path.visited[current_id] = current

        if current_id == target_id:
            path.vertices = _walk_back(graph, discovered_from, target_id)
            logger.debug("BFS %s->%s found after %d visits", start_id, target_id, len(path.visited))
            return path

        for neighbour in graph.neighbours(current_id):
            neighbour_id = neighbour.vertex_id
            if neighbour_id not in discovered_from:
                discovered_from[neighbour_id] = current_id
                queue.append(neighbour)

    logger.debug("BFS %s->%s exhausted %d vertices", start_id, target_id, len(path.visited))
    return None


@dataclass
class _Progress:
    """Dijkstra bookkeeping for one discovered vertex."""

    vertex: Any
    predecessor_id: str | None
    weight_sum: float
    finalized: bool = False


def dijkstra_shortest_path(
    graph: DirectedGraph,
    start_id: str,
    target_id: str,
    weight_mapper: WeightMapper | None = None,
) -> Path | None:
    """Dijkstra's shortest path from ``start_id`` to ``target_id``.

    Edge weights come from ``weight_mapper(edge)``, or 0.0 for every edge
    when no mapper is given. Weights must be non-negative; this is not
    checked. Ties between equal cumulative weights go to the vertex
    discovered first.

    Returns:
        The lightest path with ``total_weight`` set, or None.
    """
    start = _resolve_start(graph, start_id, target_id)
    if start is None:
        return None
    if start_id == target_id:
        return _trivial_path(start)

    path = Path(visited={start_id: start})
    progress: dict[str, _Progress] = {start_id: _Progress(start, None, 0.0)}
    counter = itertools.count()
    heap: list[tuple[float, int, str]] = [(0.0, next(counter), start_id)]

    while heap:
        weight_sum, _, current_id = heapq.heappop(heap)
        current = progress[current_id]
        # Superseded by a later, lighter push.
        if current.finalized or weight_sum > current.weight_sum:
            continue
        current.finalized = True
        path.visited[current_id] = current.vertex

        if current_id == target_id:
            walk = []
            step: str | None = current_id
            while step is not None:
                walk.append(progress[step].vertex)
                step = progress[step].predecessor_id
            walk.reverse()
            path.vertices = walk
            path.total_weight = current.weight_sum
            logger.debug(
                "Dijkstra %s->%s found weight %s after %d visits",
                start_id,
                target_id,
                path.total_weight,
                len(path.visited),
            )
            return path

        for neighbour, edge in graph.outgoing(current_id):
            neighbour_id = neighbour.vertex_id
            candidate = current.weight_sum + _edge_weight(edge, weight_mapper)
            known = progress.get(neighbour_id)
            if known is None:
                progress[neighbour_id] = _Progress(neighbour, current_id, candidate)
            elif not known.finalized and candidate < known.weight_sum:
                known.weight_sum = candidate
                known.predecessor_id = current_id
            else:
                continue
            heapq.heappush(heap, (candidate, next(counter), neighbour_id))

    logger.debug("Dijkstra %s->%s exhausted %d vertices", start_id, target_id, len(path.visited))
    return None


def classify_endpoints(graph: DirectedGraph, start_id: str, target_id: str) -> SearchOutcome | None:
    """Return the unknown-endpoint outcome of a query, or None if both ids exist."""
    if graph.get_vertex(start_id) is None:
        return SearchOutcome.UNKNOWN_START
    if graph.get_vertex(target_id) is None:
        return SearchOutcome.UNKNOWN_TARGET
    return None


def explain_miss(graph: DirectedGraph, start_id: str, target_id: str) -> SearchOutcome:
    """Classify a query as found, unknown start, unknown target or unreachable.

    Reachability is the same for every search method, so this uses
    breadth-first search.
    """
    outcome = classify_endpoints(graph, start_id, target_id)
    if outcome is not None:
        return outcome
    if breadth_first_search(graph, start_id, target_id) is None:
        return SearchOutcome.UNREACHABLE
    return SearchOutcome.FOUND


def _walk_back(graph: DirectedGraph, discovered_from: dict[str, str | None], target_id: str) -> list[Any]:
    walk = []
    step: str | None = target_id
    while step is not None:
        walk.append(graph.get_vertex(step))
        step = discovered_from[step]
    walk.reverse()
    return walk


def _edge_weight(edge: Any, weight_mapper: WeightMapper | None) -> float:
    if weight_mapper is None:
        return 0.0
    return float(weight_mapper(edge))


__all__ = [
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
    "classify_endpoints",
    "explain_miss",
]

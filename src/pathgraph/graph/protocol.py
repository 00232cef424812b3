"""Capability contracts the graph requires from caller-supplied types.

Public API:
    Identifiable: Runtime-checkable protocol for vertex types.
    WeightMapper: Callable converting edge data to a numeric weight.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """Anything with a stable string identity can be a vertex.

    The graph keys vertices on ``vertex_id`` only. Equality and hashing of
    the vertex object itself are never consulted, so mutable and unhashable
    vertex types are fine as long as ``vertex_id`` does not change after
    insertion.
    """

    @property
    def vertex_id(self) -> str:
        """Stable identity of the vertex."""
        ...


# Maps one edge-data value to a non-negative weight. Supplied per query.
WeightMapper = Callable[[Any], float]


__all__ = ["Identifiable", "WeightMapper"]

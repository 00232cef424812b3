"""Custom exceptions for pathgraph-lib."""


class GraphError(Exception):
    """Base exception for graph operations."""


class InvalidVertexError(GraphError, TypeError):
    """Raised when a vertex does not expose a string ``vertex_id``."""


class VertexNotFoundError(GraphError, KeyError):
    """Raised when a vertex identity cannot be resolved in the graph.

    Attributes:
        vertex_id: The identity that was looked up.
    """

    def __init__(self, vertex_id: str, message: str | None = None) -> None:
        self.vertex_id = vertex_id
        self.message = message or f"Vertex not found: {vertex_id}"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.message


class NoPathError(GraphError):
    """Raised when the target cannot be reached from the start vertex.

    Attributes:
        start_id: Identity of the start vertex.
        target_id: Identity of the target vertex.
    """

    def __init__(self, start_id: str, target_id: str) -> None:
        self.start_id = start_id
        self.target_id = target_id
        super().__init__(f"No path from {start_id} to {target_id}")

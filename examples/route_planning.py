"""Basic usage example for pathgraph-lib."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from pathgraph import (
    DirectedGraph,
    NoPathError,
    SearchMethod,
    Vertex,
    WeightedEdge,
)


def main():
    print("=" * 60)
    print("pathgraph-lib - Route Planning Example")
    print("=" * 60)

    # 1. Build the graph
    print("\n1. Building a small road network...")
    graph = DirectedGraph(graph_id="roads")
    cities = {name: Vertex(vertex_id=name, label=name.title()) for name in ["amsterdam", "utrecht", "arnhem", "zwolle", "groningen"]}
    graph.add_connection(cities["amsterdam"], cities["utrecht"], WeightedEdge(45, "A2"))
    graph.add_connection(cities["utrecht"], cities["arnhem"], WeightedEdge(65, "A12"))
    graph.add_connection(cities["amsterdam"], cities["zwolle"], WeightedEdge(110, "A28"))
    graph.add_connection(cities["arnhem"], cities["zwolle"], WeightedEdge(70, "A50"))
    graph.add_edge(cities["zwolle"], cities["groningen"], WeightedEdge(105, "A28"))
    print(f"   {graph!r}")

    # 2. Compare the three searches
    print("\n2. Searching amsterdam -> groningen...")
    print(f"   DFS:      {graph.depth_first_search('amsterdam', 'groningen')}")
    print(f"   BFS:      {graph.breadth_first_search('amsterdam', 'groningen')}")
    print(f"   Dijkstra: {graph.dijkstra_shortest_path('amsterdam', 'groningen', WeightedEdge.weight_of)}")

    # 3. Explain a miss
    print("\n3. Searching groningen -> amsterdam (one-way edge)...")
    result = graph.search("groningen", "amsterdam", SearchMethod.BFS)
    print(f"   Outcome: {result.outcome.value}")
    try:
        graph.find_path("groningen", "amsterdam")
    except NoPathError as e:
        print(f"   Raised: {e}")

    # 4. Maintenance
    print("\n4. Removing vertices without outgoing edges...")
    removed = graph.remove_unconnected_vertices()
    print(f"   Removed {removed}, now {graph!r}")

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()

from typing import Iterator, List, Tuple

from edge import DEFAULT_CAPACITY, Edge
from errors import InvalidVertex


class FlowNetwork:
    """
    Fixed set of vertices 0 … vertex_count-1 plus an arena of edges.

    Attributes:
        vertex_count (int): Number of vertices, source and sink included
        edges (List[Edge]): Every edge, in insertion order
        adjacency (List[List[int]]): Per vertex, indices into `edges` of the
            edges incident to it, in insertion order
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise InvalidVertex(f"vertex count must be non-negative, got {vertex_count}")
        self.vertex_count = vertex_count
        self.edges: List[Edge] = []
        self.adjacency: List[List[int]] = [[] for _ in range(vertex_count)]

    def check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise InvalidVertex(
                f"vertex {vertex} out of range [0, {self.vertex_count})"
            )

    def add_edge(self, u: int, v: int, capacity: int = DEFAULT_CAPACITY) -> int:
        """
        Create one edge u -> v and register it with both endpoints.

        Returns:
            Index of the new edge in `edges`.
        Raises:
            InvalidVertex: If u or v is out of range (network left unchanged)
        """
        self.check_vertex(u)
        self.check_vertex(v)
        edge = Edge(u, v, capacity)

        index = len(self.edges)
        self.edges.append(edge)
        self.adjacency[u].append(index)
        self.adjacency[v].append(index)
        return index

    def incident_edges(self, vertex: int) -> Iterator[Tuple[int, Edge]]:
        self.check_vertex(vertex)
        for index in self.adjacency[vertex]:
            yield index, self.edges[index]

    def flow_out_of(self, vertex: int) -> int:
        return sum(e.flow for _, e in self.incident_edges(vertex) if e.u == vertex)

    def flow_into(self, vertex: int) -> int:
        return sum(e.flow for _, e in self.incident_edges(vertex) if e.v == vertex)

    def reset_flows(self) -> None:
        for e in self.edges:
            e.flow = 0

    def __repr__(self) -> str:
        return f"FlowNetwork(vertices={self.vertex_count}, edges={len(self.edges)})"

"""Generic directed graph structure."""

from __future__ import annotations

import logging
from typing import Dict, Generic, Hashable, Iterator, Optional, TextIO, Tuple, TypeVar

from adjgraph.vertex import Vertex

V = TypeVar("V", bound=Hashable)

DEFAULT_CAPACITY = 10


class NotFoundError(LookupError):

    """Raised when a query requires a vertex that is not in the graph."""

    def __init__(self, vertex: Hashable):
        super().__init__(f"vertex not found: {vertex!r}")
        self.vertex = vertex


class Graph(Generic[V]):

    """A directed graph stored as adjacency lists.

    Vertices are hashable objects of type V. Each vertex maps to a Vertex
    record holding its outgoing edges. Vertices are created on first mention,
    either by add_vertex or as the endpoint of an edge, and are never removed.
    There is at most one edge for each (from, to) pair.

    Vertices are enumerated in insertion order, which also fixes the line
    order of str(graph):

        g = create_graph()
        g.add_edge("A", "B")
        g.add_vertex("C")
        str(g)  # "A: B\\nB:\\nC:"
    """

    def __init__(self):
        self._vertices: Dict[V, Vertex[V]] = {}
        self._capacity = DEFAULT_CAPACITY
        self._num_vertices = 0
        self._num_edges = 0

    def __repr__(self) -> str:
        return f"Graph(V={self._num_vertices}, E={self._num_edges})"

    def __str__(self) -> str:
        return "\n".join(str(vertex) for vertex in self._vertices.values())

    def __len__(self) -> int:
        return self._num_vertices

    def __contains__(self, vertex: object) -> bool:
        return self.contains(vertex)  # type: ignore

    def __eq__(self, other: object) -> bool:
        """Compare vertex sets and edge counts.

        Edges themselves are not compared: two graphs with the same vertices
        and the same number of edges are equal even if the edges connect
        different vertices. Use same_edges for an exact comparison.
        """
        if not isinstance(other, Graph):
            return NotImplemented
        if self.num_vertices() != other.num_vertices():
            return False
        if self.num_edges() != other.num_edges():
            return False
        return all(other.contains(v) for v in self._vertices)

    __hash__ = None  # type: ignore

    def same_edges(self, other: Graph[V]) -> bool:
        """Like ==, but also require every edge to be present in other."""
        if self != other:
            return False
        return all(other.has_edge(src, dst) for src, dst in self.edges())

    def dump(self, out: Optional[TextIO] = None):
        """Dump a textual representation of this graph to out (or stdout)."""
        print(self, file=out)

    @property
    def capacity(self) -> int:
        return self._capacity

    def ensure_capacity(self, capacity: int):
        """Hint that the graph will hold at least capacity vertices.

        Grows geometrically. This never changes the result of any other
        operation.
        """
        if capacity > self._capacity:
            new_capacity = max(capacity, 2 * self._capacity)
            logging.debug("growing capacity %d -> %d", self._capacity, new_capacity)
            self._capacity = new_capacity

    def num_vertices(self) -> int:
        return self._num_vertices

    def num_edges(self) -> int:
        return self._num_edges

    def degree(self, vertex: V) -> int:
        """Return the number of edges leaving vertex.

        Raises NotFoundError if vertex is not in the graph.
        """
        return self._get(vertex).degree

    def add_vertex(self, vertex: V):
        """Add vertex with no edges. Does nothing if it already exists."""
        if vertex in self._vertices:
            return
        self.ensure_capacity(self._num_vertices + 1)
        self._vertices[vertex] = Vertex(vertex)
        self._num_vertices += 1

    def add_edge(self, src: V, dst: V):
        """Add an edge from src to dst.

        Missing endpoints are added first. Does nothing if the edge already
        exists.
        """
        self.add_vertex(src)
        self.add_vertex(dst)
        if self._vertices[src].add_edge(dst):
            self._num_edges += 1

    def vertices(self) -> Tuple[V, ...]:
        return tuple(self._vertices)

    def adjacent_to(self, src: V) -> Tuple[V, ...]:
        """Return the targets of edges leaving src, in insertion order.

        Returns an empty tuple if src is not in the graph.
        """
        record = self._vertices.get(src)
        if record is None:
            return ()
        return record.edges()

    def edges(self) -> Iterator[Tuple[V, V]]:
        """Iterate over all (src, dst) edges."""
        for src, record in list(self._vertices.items()):
            for dst in record.edges():
                yield src, dst

    def contains(self, vertex: V) -> bool:
        return vertex in self._vertices

    def has_edge(self, src: V, dst: V) -> bool:
        """Return True if there is an edge from src to dst.

        If either vertex is not in the graph, there is no edge.
        """
        if src not in self._vertices or dst not in self._vertices:
            return False
        return self._vertices[src].is_adjacent(dst)

    def _get(self, vertex: V) -> Vertex[V]:
        try:
            return self._vertices[vertex]
        except KeyError:
            raise NotFoundError(vertex) from None


def create_graph() -> Graph:
    """Create an empty graph."""
    return Graph()

"""
Generic labeled graph: abstract interface and adjacency-map implementation.

Vertices are any hashable values (identity by equality). Every directed
edge carries one label. Undirected insertion stores the same label object
under both directions, so mutating it through one direction is visible
through the other.

Usage:
    from bacon_game.graph import AdjacencyMapGraph

    g = AdjacencyMapGraph[str, set[str]]()
    g.insert_vertex("Alice")
    g.insert_vertex("Bob")
    g.insert_undirected("Alice", "Bob", {"A Movie"})
    g.get_label("Bob", "Alice").add("B Movie")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from bacon_game.graph.errors import NoSuchEdgeError, UnknownVertexError

V = TypeVar("V", bound=Hashable)
E = TypeVar("E")


class Graph(ABC, Generic[V, E]):
    """
    Abstract base class for directed/undirected labeled graphs.

    Enumeration methods return iterators that may be restarted by calling
    the method again; order must be stable for a given graph.
    """

    @abstractmethod
    def insert_vertex(self, v: V) -> None:
        """Add a vertex. No-op if it is already present."""
        ...

    @abstractmethod
    def has_vertex(self, v: V) -> bool:
        ...

    @abstractmethod
    def vertices(self) -> Iterator[V]:
        ...

    @abstractmethod
    def num_vertices(self) -> int:
        ...

    @abstractmethod
    def num_edges(self) -> int:
        """Number of directed edges (an undirected edge counts twice)."""
        ...

    @abstractmethod
    def insert_directed(self, u: V, v: V, label: E) -> None:
        """
        Create or overwrite the edge u -> v.

        Raises:
            UnknownVertexError: If either endpoint is not in the graph
        """
        ...

    def insert_undirected(self, u: V, v: V, label: E) -> None:
        """Insert u -> v and v -> u sharing one label object."""
        self.insert_directed(u, v, label)
        self.insert_directed(v, u, label)

    @abstractmethod
    def has_edge(self, u: V, v: V) -> bool:
        ...

    @abstractmethod
    def get_label(self, u: V, v: V) -> E:
        """
        Label of the edge u -> v.

        Raises:
            NoSuchEdgeError: If there is no such edge
        """
        ...

    @abstractmethod
    def out_neighbors(self, u: V) -> Iterator[V]:
        ...

    @abstractmethod
    def in_neighbors(self, u: V) -> Iterator[V]:
        ...

    @abstractmethod
    def out_degree(self, u: V) -> int:
        ...

    @abstractmethod
    def in_degree(self, u: V) -> int:
        ...

    def __contains__(self, v: object) -> bool:
        return self.has_vertex(v)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.num_vertices()


class AdjacencyMapGraph(Graph[V, E]):
    """
    Graph stored as two nested maps: out[u][v] and in[v][u] -> label.

    Dicts keep insertion order, so vertices and neighbors enumerate in the
    order they were added. This makes BFS tie-breaking reproducible.
    """

    def __init__(self) -> None:
        self._out: dict[V, dict[V, E]] = {}
        self._in: dict[V, dict[V, E]] = {}

    def _require(self, v: V) -> None:
        if v not in self._out:
            raise UnknownVertexError(v)

    # =========================================================================
    # Vertices
    # =========================================================================

    def insert_vertex(self, v: V) -> None:
        if v not in self._out:
            self._out[v] = {}
            self._in[v] = {}

    def has_vertex(self, v: V) -> bool:
        return v in self._out

    def vertices(self) -> Iterator[V]:
        return iter(self._out)

    def num_vertices(self) -> int:
        return len(self._out)

    # =========================================================================
    # Edges
    # =========================================================================

    def num_edges(self) -> int:
        return sum(len(targets) for targets in self._out.values())

    def insert_directed(self, u: V, v: V, label: E) -> None:
        self._require(u)
        self._require(v)
        self._out[u][v] = label
        self._in[v][u] = label

    def has_edge(self, u: V, v: V) -> bool:
        return u in self._out and v in self._out[u]

    def get_label(self, u: V, v: V) -> E:
        if not self.has_edge(u, v):
            raise NoSuchEdgeError(u, v)
        return self._out[u][v]

    # =========================================================================
    # Neighborhoods
    # =========================================================================

    def out_neighbors(self, u: V) -> Iterator[V]:
        self._require(u)
        return iter(self._out[u])

    def in_neighbors(self, u: V) -> Iterator[V]:
        self._require(u)
        return iter(self._in[u])

    def out_degree(self, u: V) -> int:
        self._require(u)
        return len(self._out[u])

    def in_degree(self, u: V) -> int:
        self._require(u)
        return len(self._in[u])

    def __repr__(self) -> str:
        edges = {u: dict(targets) for u, targets in self._out.items()}
        return f"Vertices: {list(self._out)}\nOut edges: {edges}"

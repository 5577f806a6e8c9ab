"""
BFS-derived algorithms over labeled graphs.

The central structure is the path tree returned by bfs(): a directed graph
in which every non-root vertex has exactly one outgoing edge, pointing to
its BFS parent. Following out-edges from any vertex therefore walks back
to the root (the center of the universe).
"""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Hashable
from typing import TypeVar

from bacon_game.graph.adjacency import AdjacencyMapGraph, Graph
from bacon_game.graph.errors import UnknownVertexError

V = TypeVar("V", bound=Hashable)
E = TypeVar("E")

logger = logging.getLogger(__name__)


def bfs(graph: Graph[V, E], source: V) -> AdjacencyMapGraph[V, E]:
    """
    Build the shortest-path tree rooted at source.

    Tree edges point child -> parent and carry the same label object as the
    parent -> child edge of the input graph. Vertices unreachable from
    source are absent from the tree.

    Raises:
        UnknownVertexError: If source is not in graph
    """
    if not graph.has_vertex(source):
        raise UnknownVertexError(source)

    tree: AdjacencyMapGraph[V, E] = AdjacencyMapGraph()
    tree.insert_vertex(source)

    visited = {source}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        for v in graph.out_neighbors(u):
            if v in visited:
                continue
            visited.add(v)
            queue.append(v)
            tree.insert_vertex(v)
            tree.insert_directed(v, u, graph.get_label(u, v))

    logger.debug(f"BFS from {source!r} reached {tree.num_vertices():,} vertices")
    return tree


def get_path(tree: Graph[V, E], v: V) -> list[V]:
    """
    Path from v back to the root of a path tree, both ends included.

    Returns [root] when v is the root itself.

    Raises:
        UnknownVertexError: If v is not in the tree
    """
    path = [v]
    current = v
    while tree.out_degree(current) > 0:
        current = next(tree.out_neighbors(current))
        path.append(current)
    return path


def missing_vertices(graph: Graph[V, E], subgraph: Graph[V, E]) -> set[V]:
    """Vertices of graph that are not in subgraph (e.g. not reached by BFS)."""
    return {v for v in graph.vertices() if not subgraph.has_vertex(v)}


def separations(tree: Graph[V, E], root: V) -> dict[V, int]:
    """Distance from root for every vertex of a path tree."""
    depths = {root: 0}
    stack = [root]
    while stack:
        vertex = stack.pop()
        for child in tree.in_neighbors(vertex):
            depths[child] = depths[vertex] + 1
            stack.append(child)
    return depths


def average_separation(tree: Graph[V, E], root: V) -> float:
    """
    Average distance from root over all other vertices of a path tree.

    Sums depths by walking child edges from the root instead of
    materializing every path.

    Raises:
        ValueError: If the tree contains only the root
    """
    if tree.num_vertices() < 2:
        raise ValueError(f"Average separation is undefined for lone vertex {root!r}")

    total = 0
    stack = [(root, 0)]
    while stack:
        vertex, depth = stack.pop()
        for child in tree.in_neighbors(vertex):
            total += depth + 1
            stack.append((child, depth + 1))

    return total / (tree.num_vertices() - 1)


def random_walk(
    graph: Graph[V, E],
    start: V,
    steps: int,
    rng: random.Random | None = None,
) -> list[V] | None:
    """
    Walk up to `steps` uniformly random out-edges from start.

    Stops early at a vertex with no out-neighbors.

    Args:
        graph: Graph to walk
        start: First vertex of the walk
        steps: Maximum number of hops
        rng: Random source (seed it for reproducible walks)

    Returns:
        Vertices visited in order, starting with start, or None if start
        is not in graph
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")
    if not graph.has_vertex(start):
        return None

    rng = rng or random.Random()
    path = [start]
    current = start
    for _ in range(steps):
        neighbors = list(graph.out_neighbors(current))
        if not neighbors:
            break
        current = rng.choice(neighbors)
        path.append(current)
    return path


def vertices_by_in_degree(graph: Graph[V, E]) -> list[V]:
    """All vertices, largest in-degree first. Ties keep enumeration order."""
    return sorted(graph.vertices(), key=graph.in_degree, reverse=True)

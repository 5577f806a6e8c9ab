"""
Graph module.

Provides the labeled graph data type and BFS-based algorithms:
- AdjacencyMapGraph: Generic directed/undirected labeled graph
- bfs / get_path: Shortest-path trees and path reconstruction
- average_separation, missing_vertices, random_walk, vertices_by_in_degree
"""

from bacon_game.graph.adjacency import AdjacencyMapGraph, Graph
from bacon_game.graph.errors import GraphError, NoSuchEdgeError, UnknownVertexError
from bacon_game.graph.library import (
    average_separation,
    bfs,
    get_path,
    missing_vertices,
    random_walk,
    separations,
    vertices_by_in_degree,
)

__all__ = [
    "Graph",
    "AdjacencyMapGraph",
    "GraphError",
    "UnknownVertexError",
    "NoSuchEdgeError",
    "bfs",
    "get_path",
    "missing_vertices",
    "separations",
    "average_separation",
    "random_walk",
    "vertices_by_in_degree",
]

"""
Data loading module.

Reads the pipe-delimited actor, movie, and movie-actor files and builds
the co-star graph.

Usage:
    from bacon_game.data import load_costar_graph

    graph = load_costar_graph(actors_path, movies_path, connections_path)
"""

from bacon_game.data.loader import (
    CostarGraph,
    DataFormatError,
    build_costar_graph,
    load_costar_graph,
    read_connections,
    read_names,
)

__all__ = [
    "CostarGraph",
    "DataFormatError",
    "build_costar_graph",
    "load_costar_graph",
    "read_connections",
    "read_names",
]

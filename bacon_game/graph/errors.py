"""
Exceptions raised by graph operations.
"""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for structural graph errors."""


class UnknownVertexError(GraphError):
    """A vertex was referenced that is not in the graph."""

    def __init__(self, vertex: Any) -> None:
        super().__init__(f"Vertex {vertex!r} is not in the graph")
        self.vertex = vertex


class NoSuchEdgeError(GraphError):
    """A label was requested for an edge that does not exist."""

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(f"No edge from {source!r} to {target!r}")
        self.source = source
        self.target = target

"""
Universe session: the main co-star graph plus the path tree of the
current center of the universe.

Every query answers from the cached tree. Re-centering rebuilds the tree
and swaps (center, tree) together, so the tree always belongs to the
current center.
"""

from __future__ import annotations

import logging
import random

from bacon_game.game.state import INFINITE_SEPARATION, ActorPath, CenterSummary, PathHop
from bacon_game.graph import (
    AdjacencyMapGraph,
    Graph,
    UnknownVertexError,
    average_separation,
    bfs,
    get_path,
    missing_vertices,
    random_walk,
    separations,
    vertices_by_in_degree,
)

logger = logging.getLogger(__name__)


class UniverseSession:
    """
    Named queries over an actor network for the interactive game.

    The main graph is treated as read-only once the session is created.

    Attributes:
        graph: The full co-appearance network
        center: Current center of the universe
        tree: BFS path tree rooted at center
    """

    def __init__(self, graph: Graph[str, set[str]], center: str) -> None:
        """
        Initialize the session and build the first path tree.

        Args:
            graph: Main co-star graph
            center: Initial center of the universe

        Raises:
            UnknownVertexError: If center is not in graph
        """
        self._graph = graph
        self._center = center
        self._tree: AdjacencyMapGraph[str, set[str]] = AdjacencyMapGraph()
        self.set_center(center)

    @property
    def graph(self) -> Graph[str, set[str]]:
        return self._graph

    @property
    def center(self) -> str:
        return self._center

    @property
    def tree(self) -> AdjacencyMapGraph[str, set[str]]:
        return self._tree

    # =========================================================================
    # Center of the Universe
    # =========================================================================

    def set_center(self, actor: str) -> CenterSummary:
        """
        Make actor the center of the universe and rebuild the path tree.

        Raises:
            UnknownVertexError: If actor is not in the main graph
        """
        tree = bfs(self._graph, actor)
        self._center, self._tree = actor, tree
        summary = self.summary()
        logger.info(
            f"Center is now '{actor}' "
            f"({summary.connected:,}/{summary.total:,} actors connected)"
        )
        return summary

    def summary(self) -> CenterSummary:
        """Connectivity and average separation of the current center."""
        connected = self._tree.num_vertices()
        average = None
        if connected > 1:
            average = average_separation(self._tree, self._center)
        return CenterSummary(
            center=self._center,
            connected=connected,
            total=self._graph.num_vertices(),
            average_separation=average,
        )

    def average_separation_of(self, actor: str) -> float:
        """
        Average separation of actor's own universe (fresh BFS).

        Raises:
            UnknownVertexError: If actor is not in the main graph
            ValueError: If actor has no co-stars
        """
        return average_separation(bfs(self._graph, actor), actor)

    # =========================================================================
    # Single-Actor Queries
    # =========================================================================

    def _require_actor(self, actor: str) -> None:
        if not self._graph.has_vertex(actor):
            raise UnknownVertexError(actor)

    def actor_separation(self, actor: str) -> int | float:
        """
        Hops from actor to the center, or INFINITE_SEPARATION if unreachable.

        Raises:
            UnknownVertexError: If actor is not in the main graph
        """
        self._require_actor(actor)
        if not self._tree.has_vertex(actor):
            return INFINITE_SEPARATION
        return len(get_path(self._tree, actor)) - 1

    def actor_path(self, actor: str) -> ActorPath:
        """
        Actor's path to the center with the movies linking each hop.

        Raises:
            UnknownVertexError: If actor is not in the main graph
        """
        self._require_actor(actor)
        if not self._tree.has_vertex(actor):
            return ActorPath(actor=actor, center=self._center, separation=INFINITE_SEPARATION)

        path = get_path(self._tree, actor)
        hops = [
            PathHop(actor=a, co_star=b, movies=self._tree.get_label(a, b))
            for a, b in zip(path, path[1:])
        ]
        return ActorPath(actor=actor, center=self._center, separation=len(path) - 1, hops=hops)

    def infinitely_separated(self) -> list[str]:
        """Actors that cannot reach the current center, in graph order."""
        missing = missing_vertices(self._graph, self._tree)
        return [actor for actor in self._graph.vertices() if actor in missing]

    # =========================================================================
    # Rankings
    # =========================================================================

    def rank_by_degree(self, low: int, high: int) -> list[str]:
        """Actors with between low and high co-stars, fewest first."""
        actors = [
            actor for actor in self._graph.vertices()
            if low <= self._graph.out_degree(actor) <= high
        ]
        return sorted(actors, key=self._graph.out_degree)

    def rank_by_separation(self, low: int, high: int) -> list[str]:
        """Reachable actors with separation between low and high, closest first."""
        depths = separations(self._tree, self._center)
        actors = [actor for actor in self._tree.vertices() if low <= depths[actor] <= high]
        return sorted(actors, key=depths.__getitem__)

    def best_connected(self, n: int) -> list[str]:
        """The n actors with the most co-stars."""
        if n <= 0:
            return []
        return vertices_by_in_degree(self._graph)[:n]

    def worst_connected(self, n: int) -> list[str]:
        """The n actors with the fewest co-stars, fewest first."""
        if n <= 0:
            return []
        return vertices_by_in_degree(self._graph)[::-1][:n]

    def _centers_by_average_separation(self) -> list[tuple[str, float]]:
        """
        Average separation of every actor with at least one co-star.

        Runs one BFS per actor, so this is O(V * (V + E)).
        """
        total = self._graph.num_vertices()
        logger.info(f"Computing average separation for {total:,} actors (one BFS each)...")

        averages = []
        for actor in self._graph.vertices():
            tree = bfs(self._graph, actor)
            if tree.num_vertices() > 1:
                averages.append((actor, average_separation(tree, actor)))

        logger.info(f"Ranked {len(averages):,} connected actors")
        return averages

    def top_centers(self, n: int) -> list[tuple[str, float]]:
        """The n best centers: lowest average separation first."""
        if n <= 0:
            return []
        return sorted(self._centers_by_average_separation(), key=lambda item: item[1])[:n]

    def bottom_centers(self, n: int) -> list[tuple[str, float]]:
        """The n worst centers: highest average separation first."""
        if n <= 0:
            return []
        return sorted(
            self._centers_by_average_separation(),
            key=lambda item: item[1],
            reverse=True,
        )[:n]

    # =========================================================================
    # Exploration
    # =========================================================================

    def random_walk(self, steps: int, rng: random.Random | None = None) -> list[str]:
        """Random walk over the main graph starting at the center."""
        return random_walk(self._graph, self._center, steps, rng)

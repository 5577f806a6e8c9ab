"""
Unit tests for UniverseSession queries.
"""

import math
import random

import pytest

from bacon_game.game import INFINITE_SEPARATION, CenterSummary, UniverseSession
from bacon_game.graph import AdjacencyMapGraph, UnknownVertexError, get_path

KB = "Kevin Bacon"
EARL = "Dartmouth (Earl thereof)"
FRIEND = "Nobody's Friend"


class TestCenter:
    """Test centering and the cached path tree."""

    def test_initial_summary(self, session):
        """Kevin Bacon reaches five of seven actors."""
        assert session.summary() == CenterSummary(
            center=KB, connected=5, total=7, average_separation=1.75
        )

    def test_unknown_initial_center_raises(self, costar_graph):
        """A session cannot start from an unknown actor."""
        with pytest.raises(UnknownVertexError):
            UniverseSession(costar_graph, "Nobody Else")

    def test_set_center_rebuilds_tree(self, session):
        """Re-centering replaces the tree and reports the new summary."""
        summary = session.set_center("Nobody")
        assert session.center == "Nobody"
        assert summary == CenterSummary(center="Nobody", connected=2, total=7, average_separation=1.0)
        assert set(session.tree.vertices()) == {"Nobody", FRIEND}

    def test_set_center_unknown_keeps_state(self, session):
        """A failed re-center leaves center and tree untouched."""
        tree = session.tree
        with pytest.raises(UnknownVertexError):
            session.set_center("Nobody Else")
        assert session.center == KB
        assert session.tree is tree

    def test_set_center_idempotent(self, session):
        """Centering twice on the same actor gives the same tree."""
        session.set_center("Charlie")
        first = session.tree
        session.set_center("Charlie")
        second = session.tree
        assert list(first.vertices()) == list(second.vertices())
        for v in first.vertices():
            assert list(first.out_neighbors(v)) == list(second.out_neighbors(v))

    def test_isolated_center_summary(self):
        """An actor with no co-stars has no average separation."""
        g = AdjacencyMapGraph()
        g.insert_vertex("solo")
        session = UniverseSession(g, "solo")
        assert session.summary().average_separation is None
        assert session.summary().connected == 1

    def test_average_separation_of(self, session):
        """Average separation of any actor's own universe."""
        assert session.average_separation_of("Alice") == 1.25
        assert session.average_separation_of(EARL) == 2.0
        assert session.center == KB


class TestActorQueries:
    """Test separation and path queries."""

    def test_actor_separation(self, session):
        """Separation is the path length in edges."""
        assert session.actor_separation(KB) == 0
        assert session.actor_separation("Bob") == 1
        assert session.actor_separation(EARL) == 3

    def test_unreachable_separation_is_infinite(self, session):
        """Actors outside the tree are infinitely separated."""
        assert session.actor_separation("Nobody") == INFINITE_SEPARATION
        assert math.isinf(session.actor_separation(FRIEND))

    def test_unknown_actor_raises(self, session):
        """Actors not in the main graph are errors, not infinite."""
        with pytest.raises(UnknownVertexError):
            session.actor_separation("Nobody Else")
        with pytest.raises(UnknownVertexError):
            session.actor_path("Nobody Else")

    def test_actor_path_hops(self, session):
        """Each hop carries the movies linking the two actors."""
        result = session.actor_path(EARL)
        assert result.separation == 3
        assert result.is_reachable
        assert [(h.actor, h.co_star) for h in result.hops] == [
            (EARL, "Charlie"),
            ("Charlie", "Alice"),
            ("Alice", KB),
        ]
        assert [h.movies for h in result.hops] == [
            {"D Movie"},
            {"C Movie"},
            {"A Movie", "B Movie"},
        ]

    def test_actor_path_center(self, session):
        """The center's path has no hops."""
        result = session.actor_path(KB)
        assert result.separation == 0
        assert result.hops == []

    def test_actor_path_unreachable(self, session):
        """Unreachable actors have no hops and infinite separation."""
        result = session.actor_path("Nobody")
        assert not result.is_reachable
        assert result.hops == []
        assert result.center == KB

    def test_infinitely_separated(self, session):
        """Missing actors are listed in graph order."""
        assert session.infinitely_separated() == ["Nobody", FRIEND]

    def test_tree_consistent_after_recenter(self, session):
        """Queries after re-centering use the new tree."""
        session.set_center(EARL)
        assert session.actor_separation(KB) == 3
        assert get_path(session.tree, KB)[-1] == EARL


class TestRankings:
    """Test degree and separation rankings."""

    def test_rank_by_degree(self, session):
        """Actors within the degree range, fewest co-stars first."""
        assert session.rank_by_degree(1, 2) == [EARL, "Nobody", FRIEND, KB]
        assert session.rank_by_degree(3, 3) == ["Alice", "Bob", "Charlie"]

    def test_rank_by_degree_empty_range(self, session):
        """No actor has ten co-stars."""
        assert session.rank_by_degree(10, 20) == []

    def test_rank_by_separation(self, session):
        """Reachable actors within the separation range, closest first."""
        assert session.rank_by_separation(1, 2) == ["Alice", "Bob", "Charlie"]
        assert session.rank_by_separation(0, 0) == [KB]
        assert session.rank_by_separation(0, 10) == [KB, "Alice", "Bob", "Charlie", EARL]

    def test_rank_by_separation_excludes_unreachable(self, session):
        """Infinitely separated actors never appear."""
        ranked = session.rank_by_separation(0, 1000)
        assert "Nobody" not in ranked
        assert FRIEND not in ranked

    def test_best_and_worst_connected(self, session):
        """Best and worst by number of co-stars."""
        assert session.best_connected(2) == ["Alice", "Bob"]
        assert session.worst_connected(2) == [FRIEND, "Nobody"]
        assert session.best_connected(0) == []
        assert len(session.worst_connected(100)) == 7

    def test_top_centers(self, session):
        """Lowest average separation first."""
        assert session.top_centers(3) == [
            ("Nobody", 1.0),
            (FRIEND, 1.0),
            ("Alice", 1.25),
        ]

    def test_bottom_centers(self, session):
        """Highest average separation first."""
        assert session.bottom_centers(2) == [(EARL, 2.0), (KB, 1.75)]

    def test_centers_skip_isolated_actors(self, costar_graph):
        """Actors with no co-stars have no average and are not ranked."""
        costar_graph.insert_vertex("Hermit")
        session = UniverseSession(costar_graph, KB)
        names = [actor for actor, _ in session.top_centers(100)]
        assert "Hermit" not in names
        assert len(names) == 7

    def test_centers_non_positive_n(self, session):
        """Zero or negative counts return nothing."""
        assert session.top_centers(0) == []
        assert session.bottom_centers(-1) == []

    def test_centers_do_not_move_center(self, session):
        """Ranking all centers leaves the session centered where it was."""
        session.top_centers(2)
        assert session.center == KB
        assert session.summary().connected == 5


class TestRandomWalk:
    """Test random walks from the center."""

    def test_walk_starts_at_center(self, session):
        """The walk begins at the current center."""
        path = session.random_walk(4, random.Random(5))
        assert path[0] == KB
        assert len(path) == 5

    def test_zero_step_walk(self, session):
        """A zero-step walk is just the center."""
        assert session.random_walk(0) == [KB]

"""
Integration tests against the full actor/movie dataset.

Note: These tests require the data files to be present. Tests will be
skipped if data files are missing.
"""

import pytest

from bacon_game.config import (
    ACTORS_PATH,
    DEFAULT_CENTER,
    MOVIE_ACTORS_PATH,
    MOVIES_PATH,
    get_missing_data_files,
    validate_data_files,
)

# Skip all tests if data files are missing
pytestmark = pytest.mark.skipif(
    not all(validate_data_files().values()),
    reason="Data files not available",
)


@pytest.fixture(scope="module")
def full_session():
    """Load the full dataset once for all tests in this module."""
    from bacon_game.data import load_costar_graph
    from bacon_game.game import UniverseSession

    graph = load_costar_graph(ACTORS_PATH, MOVIES_PATH, MOVIE_ACTORS_PATH)
    return UniverseSession(graph, DEFAULT_CENTER)


class TestFullDataset:
    """Sanity checks on the real network."""

    def test_no_missing_files(self):
        """All data files are reported present."""
        assert get_missing_data_files() == []

    def test_center_connected(self, full_session):
        """The default center has co-stars."""
        summary = full_session.summary()
        assert summary.connected > 1
        assert summary.average_separation is not None
        assert summary.average_separation >= 1.0

    def test_tree_plus_missing_is_everyone(self, full_session):
        """Every actor is either reachable or infinitely separated."""
        missing = full_session.infinitely_separated()
        assert full_session.tree.num_vertices() + len(missing) == full_session.graph.num_vertices()

    def test_paths_end_at_center(self, full_session):
        """A sample of paths all end at the center."""
        for actor in list(full_session.tree.vertices())[:50]:
            result = full_session.actor_path(actor)
            if result.hops:
                assert result.hops[-1].co_star == DEFAULT_CENTER

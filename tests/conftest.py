"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from bacon_game.data import build_costar_graph
from bacon_game.game import UniverseSession


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def actors() -> dict[int, str]:
    """Actor ids and names of the small test dataset."""
    return {
        1: "Kevin Bacon",
        2: "Alice",
        3: "Bob",
        4: "Charlie",
        5: "Dartmouth (Earl thereof)",
        6: "Nobody",
        7: "Nobody's Friend",
    }


@pytest.fixture
def movies() -> dict[int, str]:
    """Movie ids and titles of the small test dataset."""
    return {
        1: "A Movie",
        2: "B Movie",
        3: "C Movie",
        4: "D Movie",
        5: "E Movie",
    }


@pytest.fixture
def connections() -> dict[int, list[int]]:
    """Movie id -> cast actor ids of the small test dataset."""
    return {
        1: [1, 2],
        2: [1, 3, 2],
        3: [2, 3, 4],
        4: [4, 5],
        5: [6, 7],
    }


@pytest.fixture
def costar_graph(actors, movies, connections):
    """
    Co-star graph of the test dataset.

    Kevin Bacon - Alice - Charlie - Dartmouth, with Bob linked to Kevin
    Bacon, Alice, and Charlie. Nobody and Nobody's Friend only know
    each other.
    """
    return build_costar_graph(actors, movies, connections)


@pytest.fixture
def session(costar_graph) -> UniverseSession:
    """Session centered on Kevin Bacon."""
    return UniverseSession(costar_graph, "Kevin Bacon")

"""
Loading the actor/movie co-appearance network from pipe-delimited files.

Three files make up a dataset:
    actors.txt        <actor id>|<name>
    movies.txt        <movie id>|<title>
    movie-actors.txt  <movie id>|<actor id>

Usage:
    from bacon_game.data.loader import load_costar_graph

    graph = load_costar_graph(ACTORS_PATH, MOVIES_PATH, MOVIE_ACTORS_PATH)
    graph.get_label("Kevin Bacon", "Alice")   # {"A Movie", "B Movie"}
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from bacon_game.config import DATA_ENCODING, FIELD_SEPARATOR
from bacon_game.graph import AdjacencyMapGraph

logger = logging.getLogger(__name__)

CostarGraph = AdjacencyMapGraph[str, set[str]]


class DataFormatError(ValueError):
    """A line in an input file does not match the expected format."""

    def __init__(self, path: Path | str, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"{path}:{line_number}: {reason}: {line!r}")
        self.path = path
        self.line_number = line_number
        self.line = line


def _records(path: Path | str) -> Iterator[tuple[int, str, list[str]]]:
    """Yield (line number, line, [first, second]) for each non-blank line."""
    with open(path, encoding=DATA_ENCODING) as f:
        for line_number, raw in enumerate(f, 1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            fields = line.split(FIELD_SEPARATOR, 1)
            if len(fields) != 2:
                raise DataFormatError(path, line_number, line, "expected two fields")
            yield line_number, line, fields


def _parse_id(path: Path | str, line_number: int, line: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise DataFormatError(path, line_number, line, f"invalid id {value!r}") from None


def read_names(path: Path | str) -> dict[int, str]:
    """Read an `<id>|<name>` file into a dict, in file order."""
    logger.info(f"Loading names from {path}...")
    names: dict[int, str] = {}
    for line_number, line, (key, name) in _records(path):
        names[_parse_id(path, line_number, line, key)] = name
    logger.info(f"Loaded {len(names):,} names")
    return names


def read_connections(path: Path | str) -> dict[int, list[int]]:
    """Read a `<movie id>|<actor id>` file into movie id -> actor ids."""
    logger.info(f"Loading connections from {path}...")
    cast: dict[int, list[int]] = {}
    count = 0
    for line_number, line, (first, second) in _records(path):
        movie_id = _parse_id(path, line_number, line, first)
        actor_id = _parse_id(path, line_number, line, second)
        cast.setdefault(movie_id, []).append(actor_id)
        count += 1
    logger.info(f"Loaded {count:,} connections across {len(cast):,} movies")
    return cast


def build_costar_graph(
    actors: dict[int, str],
    movies: dict[int, str],
    connections: dict[int, list[int]],
) -> CostarGraph:
    """
    Build the main graph: one vertex per actor, one undirected edge per
    pair of actors who share at least one movie, labeled with the set of
    shared movie titles.

    Connections that name an unknown movie or actor are skipped.
    """
    graph: CostarGraph = AdjacencyMapGraph()
    for name in actors.values():
        graph.insert_vertex(name)

    skipped = 0
    for movie_id, actor_ids in connections.items():
        title = movies.get(movie_id)
        if title is None:
            logger.warning(f"Skipping cast of unknown movie id {movie_id}")
            skipped += 1
            continue

        cast = []
        for actor_id in actor_ids:
            name = actors.get(actor_id)
            if name is None:
                logger.warning(f"Skipping unknown actor id {actor_id} in '{title}'")
                skipped += 1
            elif name not in cast:
                cast.append(name)

        for i, first in enumerate(cast):
            for second in cast[i + 1:]:
                if graph.has_edge(first, second):
                    graph.get_label(first, second).add(title)
                else:
                    graph.insert_undirected(first, second, {title})

    if skipped:
        logger.warning(f"Skipped {skipped:,} connection records")
    logger.info(
        f"Built graph with {graph.num_vertices():,} actors "
        f"and {graph.num_edges() // 2:,} co-star pairs"
    )
    return graph


def load_costar_graph(
    actors_path: Path | str,
    movies_path: Path | str,
    connections_path: Path | str,
) -> CostarGraph:
    """Read the three dataset files and build the main graph."""
    return build_costar_graph(
        read_names(actors_path),
        read_names(movies_path),
        read_connections(connections_path),
    )

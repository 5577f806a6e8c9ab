#!/usr/bin/env python3
"""
Erdos numbers demo: run the graph library against the test dataset.

Prints the co-star graph, the path tree rooted at the center, one path,
the unreachable actors, and the average separation.

Usage:
    python scripts/erdos_numbers.py
    python scripts/erdos_numbers.py --center "Kevin Bacon" --actor "Charlie"
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bacon_game.config import (  # noqa: E402 - must be after sys.path modification
    DEFAULT_CENTER,
    TEST_ACTORS_PATH,
    TEST_MOVIE_ACTORS_PATH,
    TEST_MOVIES_PATH,
)
from bacon_game.data import DataFormatError, load_costar_graph  # noqa: E402
from bacon_game.graph import (  # noqa: E402
    GraphError,
    average_separation,
    bfs,
    get_path,
    missing_vertices,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Load the test dataset and print each graph library result."""
    parser = argparse.ArgumentParser(description="Erdos numbers on the test dataset")
    parser.add_argument("--center", default=DEFAULT_CENTER, help="Root of the path tree")
    parser.add_argument("--actor", default="Charlie", help="Actor to trace back to the center")
    args = parser.parse_args()

    try:
        graph = load_costar_graph(TEST_ACTORS_PATH, TEST_MOVIES_PATH, TEST_MOVIE_ACTORS_PATH)
    except (OSError, DataFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        tree = bfs(graph, args.center)
        print(f"\n=== Co-star Graph ===\n{graph}")
        print(f"\n=== BFS Tree ({args.center}) ===\n{tree}")

        if tree.has_vertex(args.actor):
            path = get_path(tree, args.actor)
            print(f"\nPath ({args.actor} to {args.center}): {path}")
        else:
            print(f"\n{args.actor} is not connected to {args.center}")

        print(f"\nMissing Vertices: {sorted(missing_vertices(graph, tree))}")

        if tree.num_vertices() > 1:
            print(f"\nAverage Separation: {average_separation(tree, args.center):.4f}")
        else:
            print(f"\n{args.center} has no co-stars")
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

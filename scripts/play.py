#!/usr/bin/env python3
"""
Kevin Bacon Game CLI - explore degrees of separation between actors.

Usage:
    python scripts/play.py
    python scripts/play.py --test-data
    python scripts/play.py --center "Alice" --test-data
    python scripts/play.py --actors data/actors.txt --movies data/movies.txt --connections data/movie-actors.txt

Commands (at the prompt):
    c <#>           top (positive) or bottom (negative) centers by average separation
    d <low> <high>  actors sorted by degree, with degree between low and high
    e <#>           best-connected actors
    i               actors with infinite separation from the current center
    l <#>           worst-connected actors
    p <name>        path from <name> to the current center
    s <low> <high>  actors sorted by separation, with separation between low and high
    u <name>        make <name> the center of the universe
    w <#>           random walk from the current center
    q               quit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bacon_game.config import (  # noqa: E402
    ACTORS_PATH,
    DEFAULT_CENTER,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    MOVIE_ACTORS_PATH,
    MOVIES_PATH,
    TEST_ACTORS_PATH,
    TEST_MOVIE_ACTORS_PATH,
    TEST_MOVIES_PATH,
)
from bacon_game.data import DataFormatError, load_costar_graph  # noqa: E402
from bacon_game.game import GameConsole, UniverseSession  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Play the Kevin Bacon Game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--center",
        type=str,
        default=DEFAULT_CENTER,
        help=f"Initial center of the universe (default: {DEFAULT_CENTER})",
    )
    parser.add_argument(
        "--test-data",
        action="store_true",
        help="Use the small test dataset instead of the full one",
    )
    parser.add_argument("--actors", type=Path, default=None, help="Actors file (<id>|<name>)")
    parser.add_argument("--movies", type=Path, default=None, help="Movies file (<id>|<title>)")
    parser.add_argument(
        "--connections",
        type=Path,
        default=None,
        help="Movie-actor file (<movie id>|<actor id>)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the w command",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def resolve_paths(args: argparse.Namespace) -> tuple[Path, Path, Path]:
    """Pick dataset files from flags, falling back to config defaults."""
    if args.test_data:
        defaults = (TEST_ACTORS_PATH, TEST_MOVIES_PATH, TEST_MOVIE_ACTORS_PATH)
    else:
        defaults = (ACTORS_PATH, MOVIES_PATH, MOVIE_ACTORS_PATH)
    return (
        args.actors or defaults[0],
        args.movies or defaults[1],
        args.connections or defaults[2],
    )


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    actors_path, movies_path, connections_path = resolve_paths(args)

    try:
        graph = load_costar_graph(actors_path, movies_path, connections_path)
    except (OSError, DataFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not graph.has_vertex(args.center):
        print(f"Error: '{args.center}' is not in the dataset", file=sys.stderr)
        return 1

    session = UniverseSession(graph, args.center)
    console = GameConsole(session, rng=random.Random(args.seed))

    try:
        console.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    return 0


if __name__ == "__main__":
    sys.exit(main())

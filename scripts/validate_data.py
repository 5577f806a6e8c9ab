#!/usr/bin/env python3
"""
Validate the actor/movie data files and the co-star graph built from them.

Usage:
    python scripts/validate_data.py
"""

import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bacon_game.config import (  # noqa: E402 - must be after sys.path modification
    ACTORS_PATH,
    DEFAULT_CENTER,
    MOVIE_ACTORS_PATH,
    MOVIES_PATH,
    get_missing_data_files,
)
from bacon_game.data import DataFormatError, load_costar_graph  # noqa: E402
from bacon_game.game import UniverseSession  # noqa: E402
from bacon_game.graph import vertices_by_in_degree  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def check_data_files_exist() -> bool:
    """Check that all data files exist."""
    print("\n=== Checking Data Files ===\n")

    for path in (ACTORS_PATH, MOVIES_PATH, MOVIE_ACTORS_PATH):
        if path.exists():
            size_mb = path.stat().st_size / (1024 * 1024)
            print(f"✓ {path.name}: {size_mb:,.1f} MB")
        else:
            print(f"✗ {path.name}: NOT FOUND")

    return not get_missing_data_files()


def load_and_validate() -> bool:
    """Build the graph and check its structural invariants."""
    print("\n=== Building Co-star Graph ===\n")

    start_time = time.time()
    graph = load_costar_graph(ACTORS_PATH, MOVIES_PATH, MOVIE_ACTORS_PATH)
    print(f"\nLoad time: {time.time() - start_time:.1f} seconds")

    print("\n=== Graph Statistics ===\n")
    print(f"  actors: {graph.num_vertices():,}")
    print(f"  co-star pairs: {graph.num_edges() // 2:,}")
    top = vertices_by_in_degree(graph)[:5]
    print(f"  best connected: {', '.join(top)}")

    print("\n=== Validation Checks ===\n")
    checks = {
        "has_actors": graph.num_vertices() > 0,
        "edges_symmetric": all(
            graph.has_edge(v, u) for u in graph.vertices() for v in graph.out_neighbors(u)
        ),
        "no_self_loops": not any(graph.has_edge(u, u) for u in graph.vertices()),
        "labels_non_empty": all(
            graph.get_label(u, v) for u in graph.vertices() for v in graph.out_neighbors(u)
        ),
        "default_center_present": graph.has_vertex(DEFAULT_CENTER),
    }
    for check, passed in checks.items():
        print(f"  {'✓' if passed else '✗'} {check}")

    if checks["default_center_present"]:
        summary = UniverseSession(graph, DEFAULT_CENTER).summary()
        print(
            f"\n  {summary.center}: {summary.connected:,}/{summary.total:,} actors connected, "
            f"average separation {summary.average_separation}"
        )

    return all(checks.values())


def main() -> int:
    """Main validation routine."""
    print("=" * 60)
    print("Kevin Bacon Game Data Validation")
    print("=" * 60)

    if not check_data_files_exist():
        print("\n✗ Some data files are missing. Cannot continue.")
        return 1

    try:
        if not load_and_validate():
            print("\n✗ Validation checks failed.")
            return 1
    except (OSError, DataFormatError) as e:
        print(f"\n✗ Error loading data: {e}")
        return 1

    print("\n" + "=" * 60)
    print("✓ All validation checks passed!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())

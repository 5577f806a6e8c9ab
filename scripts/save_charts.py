"""Save network charts as standalone HTML files."""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bacon_game.charts import create_degree_histogram, create_separation_histogram
from bacon_game.config import (
    ACTORS_PATH,
    CHARTS_DIR,
    DEFAULT_CENTER,
    MOVIE_ACTORS_PATH,
    MOVIES_PATH,
    TEST_ACTORS_PATH,
    TEST_MOVIE_ACTORS_PATH,
    TEST_MOVIES_PATH,
)
from bacon_game.data import load_costar_graph
from bacon_game.game import UniverseSession


def main():
    parser = argparse.ArgumentParser(description="Save separation and degree charts")
    parser.add_argument("--center", default=DEFAULT_CENTER)
    parser.add_argument("--test-data", action="store_true")
    args = parser.parse_args()

    CHARTS_DIR.mkdir(parents=True, exist_ok=True)

    print("Loading data...")
    if args.test_data:
        graph = load_costar_graph(TEST_ACTORS_PATH, TEST_MOVIES_PATH, TEST_MOVIE_ACTORS_PATH)
    else:
        graph = load_costar_graph(ACTORS_PATH, MOVIES_PATH, MOVIE_ACTORS_PATH)

    if not graph.has_vertex(args.center):
        print(f"'{args.center}' is not in the dataset!")
        return

    session = UniverseSession(graph, args.center)

    print("Generating charts...")

    fig = create_separation_histogram(session)
    fig.update_layout(width=700, height=400)
    fig.write_html(CHARTS_DIR / "separation.html")
    print("  Saved separation.html")

    fig = create_degree_histogram(graph)
    fig.update_layout(width=700, height=400)
    fig.write_html(CHARTS_DIR / "degree.html")
    print("  Saved degree.html")

    print(f"\nCharts saved to {CHARTS_DIR}")


if __name__ == "__main__":
    main()

"""
Configuration constants for the Kevin Bacon Game project.

All paths, defaults, and tunable parameters are defined here.
Overrides come from environment variables (optionally via a .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of bacon_game/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Path Configuration
# =============================================================================

# Data directory (contains the pipe-delimited actor/movie files)
DATA_DIR = Path(os.environ.get("BACON_DATA_DIR", PROJECT_ROOT / "data"))

# Full dataset
ACTORS_PATH = DATA_DIR / "actors.txt"
MOVIES_PATH = DATA_DIR / "movies.txt"
MOVIE_ACTORS_PATH = DATA_DIR / "movie-actors.txt"

# Small hand-checkable dataset
TEST_ACTORS_PATH = DATA_DIR / "actorsTest.txt"
TEST_MOVIES_PATH = DATA_DIR / "moviesTest.txt"
TEST_MOVIE_ACTORS_PATH = DATA_DIR / "movie-actorsTest.txt"

# Output directory for generated charts
CHARTS_DIR = PROJECT_ROOT / "docs" / "charts"

# =============================================================================
# File Format
# =============================================================================

# Field separator in every input file
FIELD_SEPARATOR = "|"

# Encoding for input files
DATA_ENCODING = "utf-8"

# =============================================================================
# Game Configuration
# =============================================================================

# Starting center of the universe
DEFAULT_CENTER = os.environ.get("BACON_CENTER", "Kevin Bacon")

# Default number of steps for a random walk from the center
DEFAULT_WALK_STEPS = 10

# Prompt suffix shown by the interactive console
PROMPT_SUFFIX = "game >"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "actors": ACTORS_PATH.exists(),
        "movies": MOVIES_PATH.exists(),
        "movie_actors": MOVIE_ACTORS_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]

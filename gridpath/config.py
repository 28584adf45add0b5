"""
Configuration constants for the gridpath project.

All grid defaults, traversal costs, and tunable parameters are defined here.
Environment overrides are read once at import (a local .env file is honored).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Grid Configuration
# =============================================================================

# Default board size for a fresh GridModel
DEFAULT_ROWS = 25
DEFAULT_COLS = 40

# Default endpoint positions (row, col)
DEFAULT_START = (10, 10)
DEFAULT_FINISH = (10, 30)

# =============================================================================
# Cost Configuration
# =============================================================================

# Cost of entering a plain (unweighted) cell
UNIT_COST = 1

# Cost of entering a cell toggled as weighted terrain
DEFAULT_WEIGHT_VALUE = 5

# =============================================================================
# Search Configuration
# =============================================================================

# Algorithm used when none is given (dijkstra, astar, bfs, dfs)
DEFAULT_ALGORITHM = os.environ.get("GRIDPATH_DEFAULT_ALGORITHM", "dijkstra")

# =============================================================================
# Layout Configuration
# =============================================================================

# Characters understood by grid_from_text / emitted by render_result
LAYOUT_EMPTY = "."
LAYOUT_WALL = "#"
LAYOUT_START = "S"
LAYOUT_FINISH = "F"
LAYOUT_FOOD = "*"
LAYOUT_VISITED = "o"
LAYOUT_PATH = "@"

# Array encoding used by grid_from_array
ARRAY_WALL = -1

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

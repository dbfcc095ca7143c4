# config.py
# Flat-earth scale used for BOTH latitude and longitude spans (no cos(lat) term)
METERS_PER_DEGREE = 111_000.0

# Physical size of one grid cell (m)
DEFAULT_RESOLUTION_M = 1.0

# A maze needs at least this many recorded fixes
MIN_PATH_POINTS = 2

# Refuse to allocate grids above this many cells from the HTTP API
MAX_GRID_CELLS = 4_000_000

BLOCKED = 0
PASSABLE = 1

PASSABLE_GLYPH = "⬜"  # white square
BLOCKED_GLYPH = "⬛"   # black square

PNG_SCALE = 4

HOST = "0.0.0.0"
PORT = 8081

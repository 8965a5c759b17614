"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.
Most gameplay values here are only *defaults*; ``data/tuning.toml``
overrides them at startup (see ``core/tuning.py``).

Unit System
-----------
All gameplay positions are measured in **cells**, addressed as
``(row, col)`` with ``(0, 0)`` at the top-left corner.

    Position        cell    (row, col) integer pair
    Speed           cells   per ghost recomputation
    Time            ticks   (TICK_RATE ticks = 1 real second)
    Health          HP      (hit points, integer)

Rendering converts to pixels via ``TILE_SIZE`` (px per cell).
No gameplay code should reference pixels — only the renderer.

Maze lattice
~~~~~~~~~~~~
Odd/odd cells are *rooms*; cells with one odd and one even index are
*bridges* between two rooms.  Carving always moves two cells at a time,
so even/even cells stay walls forever.
"""

# ── Cell values  (Grid storage) ────────────────────────────────────
CELL_OPEN = 0
CELL_WALL = 1

# ── Maze ───────────────────────────────────────────────────────────
MAZE_START = (1, 1)          # generation always grows from here
MIN_GENERATOR_SIZE = 3       # smallest rows/cols generate_maze accepts
MIN_ROUND_SIZE = 5           # smallest rows/cols a round accepts
DEFAULT_ROWS = 15
DEFAULT_COLS = 21

# ── Directions (row, col), cardinal only ──────────────────────────
DIR_OFFSETS = (
    (-1, 0),    # up
    (1, 0),     # down
    (0, -1),    # left
    (0, 1),     # right
)

# ── Timing ─────────────────────────────────────────────────────────
TICK_RATE = 60               # ticks / s

# ── Ghost ──────────────────────────────────────────────────────────
GHOST_SPEED = 2              # cells per recomputation
GHOST_MIN_SPEED = 1
GHOST_MAX_SPEED = 5
GHOST_MOVE_INTERVAL = 1      # ticks between recomputations

# ── Survivors ──────────────────────────────────────────────────────
SURVIVOR_COUNT = 5
SURVIVOR_HP = 3
HYPNOSIS_TICKS = 60          # 1 s at 60 ticks/s
SURVIVOR_MOVE_INTERVAL = 30  # idle ticks between random steps

# ── Round setup ────────────────────────────────────────────────────
PLACEMENT_ATTEMPTS = 1000    # random draws per survivor before giving up

# ── Messages ───────────────────────────────────────────────────────
MSG_GHOST_WINS = "Ghost Wins!"
MSG_ENDED_BY_PLAYER = "Game Ended by Player."

# ── Render ─────────────────────────────────────────────────────────
TILE_SIZE = 40
HUD_HEIGHT = 48

COLOR_OPEN = (0, 0, 0)
COLOR_WALL = (85, 85, 85)
COLOR_GHOST = (220, 40, 40)
COLOR_SURVIVOR = (60, 90, 230)
COLOR_HYPNOTIZED = (150, 50, 190)
COLOR_TEXT = (255, 255, 255)
COLOR_HUD_BG = (20, 20, 24)

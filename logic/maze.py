"""logic/maze.py — Randomized Prim's maze generation.

Growth works on a two-cell lattice
----------------------------------
Rooms sit on odd/odd cells.  From an open room the generator looks two
cells away along each axis (the *destination*); the cell in between is
the *bridge*.  Carving a candidate opens both, so every opening joins
exactly one new room to the tree through exactly one bridge:

    # # # # #        # # # # #
    # . # # #   →    # . . . #
    # # # # #        # # # # #
      room (1,1)       bridge (1,2) + destination (1,3)

Consequences the rest of the game relies on:

* every open cell is reachable from ``MAZE_START`` (1, 1);
* the open cells form a tree — ``adjacent open pairs == open cells - 1``;
* destinations are restricted to the interior, so the border is never
  carved (and is re-asserted anyway at the end).

Public API
----------
``generate_maze(rows, cols, rng=None)`` → ``Grid``
"""

from __future__ import annotations
import random
from typing import Optional

from core.constants import (
    CELL_OPEN, CELL_WALL, MAZE_START, MIN_GENERATOR_SIZE, DIR_OFFSETS,
)
from core.grid import Grid

# (destination, bridge), both (row, col)
_Candidate = tuple[tuple[int, int], tuple[int, int]]


def generate_maze(
    rows: int,
    cols: int,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Carve a fully connected, acyclic maze.

    Parameters
    ----------
    rows, cols : int
        Grid dimensions including the wall border.  Must be at least 3
        (a 3×3 grid is just the start room).  Odd sizes use the lattice
        fully; an even size leaves its last interior row/column solid.
    rng : random.Random | None
        Source of randomness.  Pass a seeded instance for a repeatable
        maze; ``None`` uses a fresh unseeded generator.

    Raises
    ------
    ValueError
        If either dimension is below 3.
    """
    if rows < MIN_GENERATOR_SIZE or cols < MIN_GENERATOR_SIZE:
        raise ValueError(
            f"maze must be at least {MIN_GENERATOR_SIZE}x{MIN_GENERATOR_SIZE}, "
            f"got {rows}x{cols}")
    rng = rng or random.Random()

    cells = [[CELL_WALL] * cols for _ in range(rows)]
    sr, sc = MAZE_START
    cells[sr][sc] = CELL_OPEN

    frontier: list[_Candidate] = []
    _push_candidates(frontier, cells, sr, sc, rows, cols)

    while frontier:
        # Uniform pick, then O(1) swap-remove. The candidate leaves the
        # frontier whether or not it gets carved.
        i = rng.randrange(len(frontier))
        frontier[i], frontier[-1] = frontier[-1], frontier[i]
        (dr, dc), (br, bc) = frontier.pop()

        if cells[dr][dc] != CELL_WALL:
            continue
        cells[br][bc] = CELL_OPEN
        cells[dr][dc] = CELL_OPEN
        _push_candidates(frontier, cells, dr, dc, rows, cols)

    for r in range(rows):
        cells[r][0] = CELL_WALL
        cells[r][cols - 1] = CELL_WALL
    for c in range(cols):
        cells[0][c] = CELL_WALL
        cells[rows - 1][c] = CELL_WALL

    grid = Grid(cells)
    print(f"[MAZE] generated {rows}x{cols} maze, {grid.open_count} open cells")
    return grid


def _push_candidates(frontier: list[_Candidate], cells: list[list[int]],
                     row: int, col: int, rows: int, cols: int) -> None:
    """Queue every still-walled interior room two steps from (row, col)."""
    for dr, dc in DIR_OFFSETS:
        nr, nc = row + 2 * dr, col + 2 * dc
        if not (0 < nr < rows - 1 and 0 < nc < cols - 1):
            continue
        if cells[nr][nc] == CELL_WALL:
            frontier.append(((nr, nc), (row + dr, col + dc)))

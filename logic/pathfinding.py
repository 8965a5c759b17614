"""logic/pathfinding.py — Breadth-first shortest paths on the maze grid.

Every step between 4-adjacent open cells costs the same, so plain BFS
already yields a shortest path; there are no tile penalties and no
diagonal moves.

Tie-breaking between equally short paths follows the neighbour order
of ``Grid.open_neighbors`` (up, down, left, right).  Callers must not
rely on *which* shortest path they get, only on its length.

Public API
----------
``shortest_path(grid, start, goal)`` → ``list[(row, col)]`` (empty if none)
``path_length(grid, start, goal)``   → ``int`` or ``None``
"""

from __future__ import annotations
from collections import deque

from core.grid import Grid, Cell


def shortest_path(grid: Grid, start: Cell, goal: Cell) -> list[Cell]:
    """BFS from *start* to *goal* over open cells.

    Returns
    -------
    list[(row, col)]
        Cells to walk through, start-exclusive and goal-inclusive.
        Empty when the goal is unreachable, is not an open cell, or
        equals the start.
    """
    if start == goal:
        return []
    if not grid.is_open(*start) or not grid.is_open(*goal):
        return []

    queue: deque[Cell] = deque([start])
    came_from: dict[Cell, Cell] = {}
    visited: set[Cell] = {start}

    while queue:
        node = queue.popleft()
        if node == goal:
            # ── Reconstruct path ─────────────────────────────────────
            path: list[Cell] = []
            while node != start:
                path.append(node)
                node = came_from[node]
            path.reverse()
            return path

        for nxt in grid.open_neighbors(node):
            if nxt in visited:
                continue
            visited.add(nxt)
            came_from[nxt] = node
            queue.append(nxt)

    return []  # no path found


def path_length(grid: Grid, start: Cell, goal: Cell) -> int | None:
    """Number of steps on a shortest path, ``0`` for start == goal.

    ``None`` when the goal cannot be reached.
    """
    if start == goal:
        return 0 if grid.is_open(*start) else None
    path = shortest_path(grid, start, goal)
    return len(path) if path else None

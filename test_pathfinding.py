"""test_pathfinding.py — BFS shortest-path correctness.

Hand-built layouts with known answers, plus randomized cross-checks
against an independent distance flood on generated mazes.

Run:  python test_pathfinding.py
"""
from __future__ import annotations
import random, sys, traceback
from collections import deque

from core import tuning
tuning.reset()

from core.grid import Grid
from logic.maze import generate_maze
from logic.pathfinding import shortest_path, path_length


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")


# ── Layouts ──────────────────────────────────────────────────────────

# One long way round from (4,1) to (4,5); (3,3)/(4,3) is a sealed pocket.
U_BEND = Grid.from_rows([
    "#######",
    "#.....#",
    "#.###.#",
    "#.#.#.#",
    "#.#.#.#",
    "#######",
])

# Two pillars → several equally short routes.
PILLARS = Grid.from_rows([
    "#######",
    "#.....#",
    "#.#.#.#",
    "#.....#",
    "#######",
])


def _assert_walkable(grid: Grid, start, path):
    prev = start
    for cell in path:
        assert grid.is_open(*cell), f"{cell} is not open"
        dr = abs(cell[0] - prev[0])
        dc = abs(cell[1] - prev[1])
        assert dr + dc == 1, f"{prev} → {cell} is not a 4-neighbour step"
        prev = cell


def _distances(grid: Grid, start) -> dict:
    dist = {start: 0}
    q = deque([start])
    while q:
        cell = q.popleft()
        for nxt in grid.open_neighbors(cell):
            if nxt not in dist:
                dist[nxt] = dist[cell] + 1
                q.append(nxt)
    return dist


# ═══════════════════════════════════════════════════════════════════════
#  Known layouts
# ═══════════════════════════════════════════════════════════════════════

def test_unique_route():
    path = shortest_path(U_BEND, (4, 1), (4, 5))
    assert path == [
        (3, 1), (2, 1), (1, 1), (1, 2), (1, 3),
        (1, 4), (1, 5), (2, 5), (3, 5), (4, 5),
    ], path
    ok("U-bend route is exact, start-exclusive and goal-inclusive")

    assert path_length(U_BEND, (4, 1), (4, 5)) == 10
    ok("path_length matches")


def test_equal_length_routes():
    path = shortest_path(PILLARS, (1, 1), (3, 5))
    assert len(path) == 6, path
    assert path[-1] == (3, 5)
    _assert_walkable(PILLARS, (1, 1), path)
    ok("Pillar maze: a 6-step path with valid steps (route itself unspecified)")


def test_no_path_cases():
    assert shortest_path(U_BEND, (4, 1), (3, 3)) == []
    assert path_length(U_BEND, (4, 1), (3, 3)) is None
    ok("Sealed pocket → empty path")

    assert shortest_path(U_BEND, (4, 1), (2, 2)) == []
    assert shortest_path(U_BEND, (2, 2), (4, 1)) == []
    ok("Wall endpoint → empty path")

    assert shortest_path(U_BEND, (4, 1), (40, 1)) == []
    assert shortest_path(U_BEND, (-1, 1), (4, 1)) == []
    ok("Out-of-bounds endpoint → empty path")

    assert shortest_path(U_BEND, (1, 3), (1, 3)) == []
    assert path_length(U_BEND, (1, 3), (1, 3)) == 0
    ok("start == goal → empty path, length 0")

    assert shortest_path(U_BEND, (3, 3), (4, 3)) == [(4, 3)]
    ok("Path inside the pocket still works")


# ═══════════════════════════════════════════════════════════════════════
#  Generated mazes
# ═══════════════════════════════════════════════════════════════════════

def test_matches_independent_flood():
    rng = random.Random(99)
    checked = 0
    for seed in range(8):
        grid = generate_maze(15, 21, random.Random(seed))
        cells = grid.open_cells()
        for _ in range(15):
            start = rng.choice(cells)
            goal = rng.choice(cells)
            dist = _distances(grid, start)
            path = shortest_path(grid, start, goal)
            assert len(path) == dist[goal], \
                f"seed {seed}: {start}→{goal} got {len(path)}, expected {dist[goal]}"
            _assert_walkable(grid, start, path)
            if path:
                assert path[-1] == goal and start not in path
            checked += 1
    ok(f"{checked} random pairs: BFS length == flood distance, steps valid")


def test_every_cell_reachable_from_start():
    grid = generate_maze(11, 11, random.Random(5))
    for cell in grid.open_cells():
        if cell == (1, 1):
            continue
        assert shortest_path(grid, (1, 1), cell), f"no path to {cell}"
    ok("A path exists from (1,1) to every open cell")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Unique route", test_unique_route),
        ("Equal-length routes", test_equal_length_routes),
        ("No-path cases", test_no_path_cases),
        ("Independent flood cross-check", test_matches_independent_flood),
        ("Reachability", test_every_cell_reachable_from_start),
    ]

    for name, fn in sections:
        print(f"\n=== {name} ===")
        try:
            fn()
        except Exception:
            _failed += 1
            print(f"  [FAIL] {name}")
            traceback.print_exc()

    print(f"\n{'=' * 60}")
    print(f"  Pathfinding Tests: {_passed} passed, {_failed} failed")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)

"""test_maze.py — Grid and maze-generation invariants.

Checks, over many seeds and sizes:
  - every open cell is reachable from (1, 1)
  - the border is solid wall
  - the open cells form a tree (adjacent open pairs == open cells - 1)
  - the room lattice is fully carved, even/even cells stay wall
  - seeded generation is repeatable

Run:  python test_maze.py   (or let pytest collect it)
"""
from __future__ import annotations
import random, sys, traceback
from collections import deque

from core import tuning
tuning.reset()

from core.constants import CELL_OPEN, CELL_WALL, MAZE_START
from core.grid import Grid
from logic.maze import generate_maze


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")


# ── Helpers ──────────────────────────────────────────────────────────

SIZES = [(5, 5), (5, 7), (7, 7), (9, 13), (15, 21), (6, 8), (10, 10), (21, 31)]
SEEDS = range(12)


def _mazes():
    for rows, cols in SIZES:
        for seed in SEEDS:
            yield rows, cols, seed, generate_maze(rows, cols, random.Random(seed))


def _flood(grid: Grid, start: tuple[int, int]) -> set[tuple[int, int]]:
    seen = {start}
    q = deque([start])
    while q:
        cell = q.popleft()
        for nxt in grid.open_neighbors(cell):
            if nxt not in seen:
                seen.add(nxt)
                q.append(nxt)
    return seen


def _open_edges(grid: Grid) -> int:
    """Count horizontally / vertically adjacent open pairs, each once."""
    edges = 0
    for r, c in grid.open_cells():
        if grid.is_open(r, c + 1):
            edges += 1
        if grid.is_open(r + 1, c):
            edges += 1
    return edges


# ═══════════════════════════════════════════════════════════════════════
#  Grid
# ═══════════════════════════════════════════════════════════════════════

def test_grid_bounds_and_border():
    g = Grid.from_rows([
        ".....",
        ".....",
        ".....",
        ".....",
    ])
    # Border is forced to wall even when the source says open
    for c in range(5):
        assert not g.is_open(0, c) and not g.is_open(3, c)
    for r in range(4):
        assert not g.is_open(r, 0) and not g.is_open(r, 4)
    ok("Border forced to wall on hand-built grid")

    assert g.is_open(1, 1) and g.is_open(2, 3)
    assert g.open_count == 6
    ok("Interior of hand-built grid stays open")

    for r, c in [(-1, 0), (0, -1), (4, 0), (0, 5), (100, 100), (-50, 2)]:
        assert g.is_open(r, c) is False
        assert not g.in_bounds(r, c)
    ok("Out-of-bounds reads return False instead of raising")


def test_grid_is_read_only():
    g = Grid.from_rows(["#####", "#...#", "#####"])
    copy = g.to_lists()
    copy[1][2] = CELL_WALL
    assert g.is_open(1, 2), "mutating to_lists() must not touch the grid"
    assert not hasattr(g, "set") and not hasattr(g, "__setitem__")
    ok("Grid has no mutators and to_lists() is a copy")

    assert list(g.open_neighbors((1, 2))) == [(1, 1), (1, 3)]
    ok("open_neighbors yields only open 4-neighbours")

    assert str(g) == "#####\n#...#\n#####"
    assert Grid.from_rows(["#####", "#...#", "#####"]) == g
    ok("ASCII round-trip and equality")


def test_grid_rejects_bad_shapes():
    for rows in ([], ["###", "##"], ["#x#"]):
        try:
            Grid.from_rows(rows)
        except ValueError:
            continue
        raise AssertionError(f"expected ValueError for {rows!r}")
    ok("Empty, ragged and unknown-char grids rejected")


# ═══════════════════════════════════════════════════════════════════════
#  Maze generation
# ═══════════════════════════════════════════════════════════════════════

def test_connectivity():
    for rows, cols, seed, g in _mazes():
        reached = _flood(g, MAZE_START)
        assert reached == set(g.open_cells()), \
            f"{rows}x{cols} seed {seed}: {g.open_count - len(reached)} cells unreachable"
    ok(f"Every open cell reachable from {MAZE_START} ({len(SIZES) * len(SEEDS)} mazes)")


def test_border_is_wall():
    for rows, cols, seed, g in _mazes():
        for c in range(cols):
            assert not g.is_open(0, c) and not g.is_open(rows - 1, c)
        for r in range(rows):
            assert not g.is_open(r, 0) and not g.is_open(r, cols - 1)
    ok("Border solid for all generated mazes")


def test_acyclic_spanning_tree():
    for rows, cols, seed, g in _mazes():
        assert _open_edges(g) == g.open_count - 1, \
            f"{rows}x{cols} seed {seed}: {_open_edges(g)} edges, {g.open_count} cells"
    ok("Adjacent open pairs == open cells - 1 (tree, no cycles)")


def test_room_lattice():
    for rows, cols, seed, g in _mazes():
        rooms = ((rows - 1) // 2) * ((cols - 1) // 2)
        assert g.open_count == 2 * rooms - 1, \
            f"{rows}x{cols}: expected {2 * rooms - 1} open, got {g.open_count}"
        for r in range(1, rows - 1, 2):
            for c in range(1, cols - 1, 2):
                assert g.is_open(r, c), f"room ({r},{c}) not carved"
        for r in range(0, rows, 2):
            for c in range(0, cols, 2):
                assert not g.is_open(r, c), f"lattice post ({r},{c}) carved"
    ok("All rooms carved, lattice posts intact, open == 2*rooms - 1")


def test_small_sizes():
    g = generate_maze(5, 5, random.Random(3))
    assert g.open_count == 7
    ok("5x5 maze has 4 rooms + 3 bridges")

    g = generate_maze(3, 3, random.Random(0))
    assert g.open_cells() == [MAZE_START]
    ok("3x3 maze is only the start room")

    for rows, cols in [(2, 5), (5, 2), (0, 0), (-3, 7)]:
        try:
            generate_maze(rows, cols, random.Random(0))
        except ValueError:
            continue
        raise AssertionError(f"expected ValueError for {rows}x{cols}")
    ok("Sizes below 3 raise ValueError")


def test_seeded_determinism():
    a = generate_maze(15, 21, random.Random(1234))
    b = generate_maze(15, 21, random.Random(1234))
    assert a == b
    ok("Same seed → identical maze")

    variants = {str(generate_maze(15, 21, random.Random(s))) for s in range(6)}
    assert len(variants) > 1
    ok(f"Different seeds → {len(variants)} distinct mazes out of 6")

    g = generate_maze(9, 9)
    assert g.is_open(*MAZE_START)
    ok("Unseeded generation works")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Grid bounds & border", test_grid_bounds_and_border),
        ("Grid read-only", test_grid_is_read_only),
        ("Grid bad shapes", test_grid_rejects_bad_shapes),
        ("Connectivity", test_connectivity),
        ("Border invariant", test_border_is_wall),
        ("Acyclicity", test_acyclic_spanning_tree),
        ("Room lattice", test_room_lattice),
        ("Small sizes", test_small_sizes),
        ("Seeded determinism", test_seeded_determinism),
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
    print(f"  Maze Tests: {_passed} passed, {_failed} failed")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)

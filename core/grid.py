"""core/grid.py — Read-only wall/open cell grid.

The grid is the single spatial truth for a round.  It is built once
(by ``logic.maze.generate_maze`` or by hand via ``Grid.from_rows``)
and never mutated afterwards — storage is a tuple of tuples.

Out-of-bounds reads behave like walls so neighbour scans never need
their own bounds checks::

    g = Grid.from_rows([
        "#####",
        "#...#",
        "#####",
    ])
    g.is_open(1, 2)    # True
    g.is_open(-4, 99)  # False, never raises
"""

from __future__ import annotations
from typing import Iterable, Iterator, Sequence

from core.constants import CELL_OPEN, CELL_WALL, DIR_OFFSETS

Cell = tuple[int, int]

_CHAR_TO_CELL = {".": CELL_OPEN, " ": CELL_OPEN, "#": CELL_WALL}


class Grid:
    """Immutable rows × cols occupancy map with a forced wall border."""

    __slots__ = ("_rows", "_cols", "_cells", "_open_count")

    def __init__(self, cells: Sequence[Sequence[int]]):
        rows = len(cells)
        cols = len(cells[0]) if rows else 0
        if rows == 0 or cols == 0:
            raise ValueError("grid must have at least one row and column")
        if any(len(row) != cols for row in cells):
            raise ValueError("grid rows must all have the same length")

        frozen: list[tuple[int, ...]] = []
        for r, row in enumerate(cells):
            border_row = r == 0 or r == rows - 1
            frozen.append(tuple(
                CELL_WALL if border_row or c == 0 or c == cols - 1
                else (CELL_OPEN if v == CELL_OPEN else CELL_WALL)
                for c, v in enumerate(row)
            ))

        self._rows = rows
        self._cols = cols
        self._cells: tuple[tuple[int, ...], ...] = tuple(frozen)
        self._open_count = sum(row.count(CELL_OPEN) for row in self._cells)

    @classmethod
    def from_rows(cls, rows: Iterable[str | Sequence[int]]) -> "Grid":
        """Build a grid from ASCII rows (``#`` wall, ``.`` open) or int rows."""
        cells: list[list[int]] = []
        for row in rows:
            if isinstance(row, str):
                try:
                    cells.append([_CHAR_TO_CELL[ch] for ch in row])
                except KeyError as exc:
                    raise ValueError(f"unknown grid character {exc.args[0]!r}") from None
            else:
                cells.append([int(v) for v in row])
        return cls(cells)

    # -- Shape --

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def open_count(self) -> int:
        return self._open_count

    # -- Queries --

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def is_open(self, row: int, col: int) -> bool:
        """True for an in-bounds open cell; False for walls and OOB."""
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            return False
        return self._cells[row][col] == CELL_OPEN

    def open_cells(self) -> list[Cell]:
        """All open cells in row-major order."""
        return [
            (r, c)
            for r, row in enumerate(self._cells)
            for c, v in enumerate(row)
            if v == CELL_OPEN
        ]

    def open_neighbors(self, cell: Cell) -> Iterator[Cell]:
        """Yield the open 4-neighbours of *cell* (up, down, left, right)."""
        r, c = cell
        for dr, dc in DIR_OFFSETS:
            if self.is_open(r + dr, c + dc):
                yield (r + dr, c + dc)

    def to_lists(self) -> list[list[int]]:
        """Mutable copy of the cell values (for renderers / debugging)."""
        return [list(row) for row in self._cells]

    # -- Dunder --

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __str__(self) -> str:
        return "\n".join(
            "".join("." if v == CELL_OPEN else "#" for v in row)
            for row in self._cells
        )

    def __repr__(self) -> str:
        return f"Grid({self._rows}x{self._cols}, open={self._open_count})"

"""components.spatial — Grid position and movement directions.

All coordinates are cells: ``row`` grows downward, ``col`` grows right.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


@dataclass
class Cell:
    """Which maze cell an entity occupies.  Always an open cell."""
    row: int = 1
    col: int = 1

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


class Direction(Enum):
    """A one-cell cardinal step.  Value is the (d_row, d_col) offset."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "Direction":
        """Accept ``"up"``, ``"UP"`` or browser-style ``"ArrowUp"``."""
        key = name.strip()
        if key.lower().startswith("arrow"):
            key = key[5:]
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"unknown direction {name!r}") from None

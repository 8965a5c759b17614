"""logic/ghost.py — Ghost pursuit (AI) and manual stepping.

AI cycle
--------
Every ``move_interval`` ticks the AI ghost:

1. picks the nearest live survivor by *straight-line* distance — not
   maze distance, so in a winding maze it may chase a survivor that is
   physically close but many corridors away;
2. runs BFS from its cell to that survivor's cell;
3. walks up to ``speed`` cells along the path and throws the rest away.

No survivors → no movement.  An unreachable target is written to the
DevLog and the ghost waits for the next cycle.

Manual ghosts ignore the cycle entirely; ``step_ghost`` moves them one
cell immediately, or not at all when the step would hit a wall.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import Cell, Direction, GhostState, GhostMode, SurvivorState, DevLog, RoundClock
from core.grid import Grid
from logic.pathfinding import shortest_path

if TYPE_CHECKING:
    from core.ecs import World


def nearest_survivor(world: "World", origin: tuple[int, int]) -> tuple[int, Cell] | None:
    """Return ``(eid, cell)`` of the closest survivor to *origin*.

    Distance is Euclidean; ties go to the earliest-spawned survivor.
    """
    orow, ocol = origin
    best: tuple[int, Cell] | None = None
    best_dsq = 0
    for eid, cell, _surv in world.query(Cell, SurvivorState):
        dr = cell.row - orow
        dc = cell.col - ocol
        dsq = dr * dr + dc * dc  # squared: same ordering, no sqrt
        if best is None or dsq < best_dsq:
            best = (eid, cell)
            best_dsq = dsq
    return best


def ghost_pursuit_system(world: "World", grid: Grid) -> None:
    """Advance every AI ghost one pursuit cycle if its interval elapsed."""
    clock = world.res(RoundClock)
    log = world.res(DevLog)
    t = clock.tick if clock else 0

    for eid, cell, ghost in world.query(Cell, GhostState):
        if ghost.mode is not GhostMode.AI:
            continue

        ghost.cooldown += 1
        if ghost.cooldown < ghost.move_interval:
            continue
        ghost.cooldown = 0

        target = nearest_survivor(world, cell.as_tuple())
        if target is None:
            continue
        target_eid, target_cell = target
        if target_cell.as_tuple() == cell.as_tuple():
            continue  # already on top of it

        path = shortest_path(grid, cell.as_tuple(), target_cell.as_tuple())
        if not path:
            if log:
                log.record(eid, "pathfind", "UnreachableTarget", t=t, details={
                    "from": cell.as_tuple(), "target": target_eid,
                    "to": target_cell.as_tuple(),
                })
            continue

        cell.row, cell.col = path[min(ghost.speed, len(path)) - 1]


def step_ghost(world: "World", grid: Grid, direction: Direction) -> bool:
    """Move the ghost one cell in *direction* if that cell is open.

    Returns True when the ghost moved.  A blocked or out-of-bounds step
    is not an error — the ghost just stays where it is.
    """
    found = world.query_one(Cell, GhostState)
    if found is None:
        return False
    _eid, cell, _ghost = found
    dr, dc = direction.offset
    nr, nc = cell.row + dr, cell.col + dc
    if not grid.is_open(nr, nc):
        return False
    cell.row, cell.col = nr, nc
    return True

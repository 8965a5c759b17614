"""logic/tick.py — System tick orchestration.

One call to ``tick_systems`` is one simulation step.  The order is fixed
and matters:

    clock → ghost pursuit → survivor walk → collisions → purge

Collisions run after *both* kinds of movement so a survivor stepping
onto the ghost and the ghost stepping onto a survivor count the same.
The termination check and the event drain belong to the caller
(``RoundController.tick``), which runs them right after this returns.

Usage::

    from logic.tick import tick_systems
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING

from components import RoundClock
from core.events import EventBus
from core.grid import Grid
from logic.ghost import ghost_pursuit_system
from logic.survivors import survivor_move_system, collision_system

if TYPE_CHECKING:
    from core.ecs import World


def tick_systems(world: "World", grid: Grid, rng: random.Random,
                 bus: EventBus | None = None) -> list[int]:
    """Run all gameplay systems for one tick.

    Parameters
    ----------
    world : World
        The round's ECS world.
    grid : Grid
        The round's maze.
    rng : random.Random
        Shared round RNG (survivor walks).
    bus : EventBus | None
        Receives hit / elimination events; not drained here.

    Returns
    -------
    list[int]
        Survivors eliminated this tick (already purged).
    """
    clock = world.res(RoundClock)
    if clock:
        clock.tick += 1

    ghost_pursuit_system(world, grid)
    survivor_move_system(world, grid, rng)

    killed = collision_system(world, bus)
    world.purge()
    return killed

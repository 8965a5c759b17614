"""logic/survivors.py — Survivor wandering and ghost contact.

Per tick, per survivor, exactly one of:

* hypnotized  → count the hypnosis timer down, stay put;
* cooling off → count ``move_cooldown`` up, stay put;
* ready       → reset the cooldown and step into the first open cell of
                a shuffled direction list (stay put if boxed in).

``collision_system`` runs after *all* movement.  Damage applies on every
tick a survivor shares the ghost's cell — hypnosis freezes the survivor,
it does not protect it.
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING

from components import Cell, GhostState, SurvivorState, DevLog, RoundClock, HypnosisConfig
from core.constants import DIR_OFFSETS, HYPNOSIS_TICKS
from core.events import EventBus, SurvivorHit, SurvivorEliminated
from core.grid import Grid

if TYPE_CHECKING:
    from core.ecs import World


def survivor_move_system(world: "World", grid: Grid, rng: random.Random) -> None:
    """Tick hypnosis / cooldown timers and random-walk ready survivors."""
    for _eid, cell, surv in world.query(Cell, SurvivorState):
        if surv.hypnosis_remaining > 0:
            surv.hypnosis_remaining -= 1
            continue

        if surv.move_cooldown < surv.move_interval:
            surv.move_cooldown += 1
            continue
        surv.move_cooldown = 0

        dirs = list(DIR_OFFSETS)
        rng.shuffle(dirs)
        for dr, dc in dirs:
            if grid.is_open(cell.row + dr, cell.col + dc):
                cell.row += dr
                cell.col += dc
                break


def collision_system(world: "World", bus: EventBus | None = None) -> list[int]:
    """Hit every survivor standing on the ghost's cell.

    Each co-located survivor loses 1 HP and is (re)hypnotized.  Those at
    0 HP are killed; the caller purges them.  Returns the killed eids.
    """
    found = world.query_one(Cell, GhostState)
    if found is None:
        return []
    _geid, gcell, _ghost = found
    ghost_at = gcell.as_tuple()

    clock = world.res(RoundClock)
    log = world.res(DevLog)
    hyp = world.res(HypnosisConfig)
    t = clock.tick if clock else 0
    hypnosis_ticks = hyp.ticks if hyp else HYPNOSIS_TICKS

    # Collect first; killing while iterating must not skip anyone.
    hits = [(eid, cell, surv)
            for eid, cell, surv in world.query(Cell, SurvivorState)
            if cell.as_tuple() == ghost_at]

    killed: list[int] = []
    for eid, cell, surv in hits:
        surv.hp -= 1
        surv.hypnosis_remaining = hypnosis_ticks
        if log:
            log.record(eid, "collision", f"hit, hp → {surv.hp}", t=t,
                       details={"cell": ghost_at})
        if bus:
            bus.emit(SurvivorHit(eid=eid, hp_left=surv.hp,
                                 row=cell.row, col=cell.col, tick=t))
        if surv.hp <= 0:
            world.kill(eid)
            killed.append(eid)

    if killed:
        left = world.count(SurvivorState)
        for eid in killed:
            if log:
                log.record(eid, "collision", "eliminated", t=t,
                           details={"survivors_left": left})
            if bus:
                bus.emit(SurvivorEliminated(eid=eid, survivors_left=left, tick=t))
    return killed

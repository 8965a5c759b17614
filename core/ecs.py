"""
core/ecs.py — Entity-Component-System

Entities are ints.  Components are any object, stored by type.  A round
has exactly one World; the ghost and each survivor are entities that
share a ``Cell`` component and carry their own state component.

    w = World()
    e = w.spawn()
    w.add(e, Cell(1, 1))
    w.add(e, SurvivorState(hp=3))

    for eid, cell, surv in w.query(Cell, SurvivorState):
        ...

Killing is deferred: ``kill()`` hides the entity from queries right
away, ``purge()`` drops its components.  Systems that collect victims
while iterating therefore never skip a neighbour.
"""

from __future__ import annotations
from typing import Any, Iterator


class World:
    def __init__(self):
        self._next_id = 0
        self._stores: dict[type, dict[int, Any]] = {}
        self._dead: set[int] = set()

    # -- Entities --

    def spawn(self) -> int:
        self._next_id += 1
        return self._next_id

    def kill(self, eid: int):
        self._dead.add(eid)

    def alive(self, eid: int) -> bool:
        return 0 < eid <= self._next_id and eid not in self._dead and any(
            eid in store for store in self._stores.values())

    def purge(self):
        """Remove dead entities from all stores.  Call once per tick."""
        if not self._dead:
            return
        for store in self._stores.values():
            for eid in self._dead:
                store.pop(eid, None)
        self._dead.clear()

    # -- Components --

    def add(self, eid: int, comp: Any):
        self._stores.setdefault(type(comp), {})[eid] = comp

    def get(self, eid: int, comp_type: type) -> Any | None:
        return self._stores.get(comp_type, {}).get(eid)

    # -- Queries --

    def query(self, *types: type) -> Iterator[tuple]:
        """Yield (eid, comp1, comp2, ...) for live entities with ALL types.

        Results come out in spawn order, so "first match wins" rules
        (nearest-target ties, placement order) stay reproducible.
        """
        if not types:
            return
        buckets = [self._stores.get(t, {}) for t in types]
        smallest = min(buckets, key=len)
        for eid in sorted(smallest):
            if eid in self._dead:
                continue
            if all(eid in b for b in buckets):
                yield (eid, *(b[eid] for b in buckets))

    def query_one(self, *types: type) -> tuple | None:
        """Return first match or None."""
        for result in self.query(*types):
            return result
        return None

    def count(self, comp_type: type) -> int:
        return sum(1 for eid in self._stores.get(comp_type, {})
                   if eid not in self._dead)

    # -- Resources (singletons, not tied to entities) --

    def set_res(self, resource: Any):
        self._stores.setdefault(type(resource), {})[-1] = resource

    def res(self, res_type: type) -> Any | None:
        return self._stores.get(res_type, {}).get(-1)


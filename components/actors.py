"""components.actors — Ghost and survivor state.

The ghost and the survivors are independent components: an entity is a
ghost because it carries ``GhostState``, a survivor because it carries
``SurvivorState``.  Both also carry a ``Cell``.  Nothing is shared
between the two except that position component.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from core.constants import (
    GHOST_SPEED, GHOST_MOVE_INTERVAL,
    SURVIVOR_HP, SURVIVOR_MOVE_INTERVAL,
)


class GhostMode(Enum):
    AI = "ai"            # pursues the nearest survivor on its own
    MANUAL = "manual"    # moved only by submitted directional intents


@dataclass
class GhostState:
    """The pursuer.  Exactly one per round.

    ``speed`` is how many path cells the ghost advances each time it
    recomputes its pursuit.  ``move_interval`` is the number of ticks
    between recomputations; ``cooldown`` counts toward it.
    """
    speed: int = GHOST_SPEED
    mode: GhostMode = GhostMode.AI
    move_interval: int = GHOST_MOVE_INTERVAL
    cooldown: int = 0


@dataclass
class SurvivorState:
    """A wandering target.

    ``hypnosis_remaining`` — ticks left frozen after a hit (0 = free).
    ``move_cooldown``      — idle ticks counted since the last step.
    ``move_interval``      — idle ticks required before the next step.
    """
    hp: int = SURVIVOR_HP
    max_hp: int = SURVIVOR_HP
    hypnosis_remaining: int = 0
    move_cooldown: int = 0
    move_interval: int = SURVIVOR_MOVE_INTERVAL

    @property
    def hypnotized(self) -> bool:
        return self.hypnosis_remaining > 0

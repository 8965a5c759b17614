"""components — ECS component dataclasses, organised by domain.

Submodules
----------
spatial        Cell, Direction
actors         GhostState, SurvivorState, GhostMode
resources      RoundClock, HypnosisConfig
dev_log        DevLog

All public names are re-exported here so callers can write
``from components import Cell``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Cell, Direction

# ── Actors ───────────────────────────────────────────────────────────
from components.actors import GhostState, SurvivorState, GhostMode

# ── World resources / singletons ─────────────────────────────────────
from components.resources import RoundClock, HypnosisConfig
from components.dev_log import DevLog

__all__ = [
    # spatial
    "Cell", "Direction",
    # actors
    "GhostState", "SurvivorState", "GhostMode",
    # resources
    "RoundClock", "HypnosisConfig", "DevLog",
]

"""components.resources — World-level singletons (not per-entity)."""

from __future__ import annotations
from dataclasses import dataclass

from core.constants import HYPNOSIS_TICKS


@dataclass
class RoundClock:
    """Number of ticks applied since the round started.

    Single source of truth for dev-log timestamps and event stamps.
    Advanced once at the top of every tick.
    """
    tick: int = 0


@dataclass
class HypnosisConfig:
    """Per-round hit response, read by the collision system."""
    ticks: int = HYPNOSIS_TICKS

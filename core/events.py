"""core/events.py — Lightweight event bus.

Decouples the round simulation from whoever wants to *react* to it
(HUD messages, sound, debug overlays).  Each RoundController owns one
bus::

    bus = controller.bus
    bus.subscribe("SurvivorEliminated", on_eliminated)

The controller emits while it ticks and drains once at the end of the
tick, so handlers always see a fully applied tick.

Design rules:
  - Events are plain dataclasses — no behaviour.
  - ``emit()`` is O(1) (just appends).
  - ``drain()`` processes all queued events in FIFO order.
  - Handlers may emit new events; those are processed in the same drain.
"""

from __future__ import annotations
import traceback
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass
class SurvivorHit:
    """The ghost shared a cell with a survivor this tick."""
    eid: int
    hp_left: int
    row: int
    col: int
    tick: int = 0


@dataclass
class SurvivorEliminated:
    """A survivor's HP reached zero and it left the live set."""
    eid: int
    survivors_left: int
    tick: int = 0


@dataclass
class RoundFinished:
    """The round entered a terminal state.

    ``state`` is the ``RoundState`` value name (``"GHOST_WINS"`` or
    ``"ENDED"``) so the event carries no import on logic/.
    """
    state: str
    message: str = ""
    tick: int = 0


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

class EventBus:
    """Fire-and-forget event bus owned by a round."""

    def __init__(self):
        self._queue: list[Any] = []
        self._subs: dict[str, list[Callable]] = defaultdict(list)

    # ── Public API ───────────────────────────────────────────────────

    def emit(self, event) -> None:
        """Queue an event for processing on next ``drain()``."""
        self._queue.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Register *handler* to receive events of *event_type*.

        *event_type* is the class name, e.g. ``"SurvivorHit"``.
        """
        self._subs[event_type].append(handler)

    def drain(self) -> int:
        """Process all queued events.  Returns number processed.

        A failing handler is reported and skipped; it never stops the
        tick that is draining.
        """
        processed = 0
        safety = 1000  # handlers emitting forever
        while self._queue and safety > 0:
            batch = self._queue[:]
            self._queue.clear()
            for event in batch:
                name = type(event).__name__
                for handler in self._subs.get(name, []):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        traceback.print_exc()
            processed += len(batch)
            safety -= 1
        return processed

    def clear(self) -> None:
        """Discard all pending events."""
        self._queue.clear()

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, subs={len(self._subs)})"

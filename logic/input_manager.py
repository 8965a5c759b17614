"""logic/input_manager.py — Intent-based input layer.

Sits between raw pygame events and round actions.  The scene feeds in
raw events; the manager maps them to *intents* based on the current
**input context** (lobby or round).  The round never sees keycodes —
only ``Direction`` values and intent names.

Usage (in chase_scene):

    self.input = InputManager()
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)

    if self.input.just("start_round"):
        ...
    for direction in self.input.ghost_directions():
        controller.submit_ghost_intent(direction)
"""

from __future__ import annotations
from enum import Enum, auto
import pygame

from components.spatial import Direction


# ── Input contexts ──────────────────────────────────────────────────

class InputContext(Enum):
    """Determines which key-bindings are active."""
    LOBBY = auto()   # between rounds: role / speed / start
    ROUND = auto()   # a round is running


# ── Intent names ────────────────────────────────────────────────────
# Lobby:  toggle_role  speed_up  speed_down  start_round  quit  reload_tuning
# Round:  ghost_up  ghost_down  ghost_left  ghost_right  end_round  reload_tuning


# ── Key → direction (feeds the round binds) ─────────────────────

KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_UP:    Direction.UP,
    pygame.K_w:     Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_s:     Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_a:     Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d:     Direction.RIGHT,
}

_INTENT_DIRECTIONS: dict[str, Direction] = {
    "ghost_up":    Direction.UP,
    "ghost_down":  Direction.DOWN,
    "ghost_left":  Direction.LEFT,
    "ghost_right": Direction.RIGHT,
}


# ── Default key bindings ────────────────────────────────────────────

_LOBBY_BINDS: dict[str, list[int]] = {
    "toggle_role":   [pygame.K_r, pygame.K_TAB],
    "speed_up":      [pygame.K_RIGHTBRACKET, pygame.K_EQUALS, pygame.K_KP_PLUS],
    "speed_down":    [pygame.K_LEFTBRACKET, pygame.K_MINUS, pygame.K_KP_MINUS],
    "start_round":   [pygame.K_RETURN, pygame.K_SPACE],
    "quit":          [pygame.K_ESCAPE],
    "reload_tuning": [pygame.K_F5],
}

_ROUND_BINDS: dict[str, list[int]] = {
    "ghost_up":      [k for k, d in KEY_DIRECTIONS.items() if d is Direction.UP],
    "ghost_down":    [k for k, d in KEY_DIRECTIONS.items() if d is Direction.DOWN],
    "ghost_left":    [k for k, d in KEY_DIRECTIONS.items() if d is Direction.LEFT],
    "ghost_right":   [k for k, d in KEY_DIRECTIONS.items() if d is Direction.RIGHT],
    "end_round":     [pygame.K_ESCAPE],
    "reload_tuning": [pygame.K_F5],
}


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Context-aware input mapper.

    Call ``begin_frame()`` before processing events and ``feed(event)``
    for each pygame event, then query with ``just(intent)``.

    Ghost steps are discrete, one cell per key press, so there is no
    held-key state.
    """

    def __init__(self):
        self.context: InputContext = InputContext.LOBBY
        # Intents pressed *this frame*, in arrival order
        self._pressed: list[str] = []

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call at the start of each frame before feeding events."""
        self._pressed.clear()

    def feed(self, event: pygame.event.Event):
        """Feed a raw pygame event.  Only key presses map to intents."""
        if event.type != pygame.KEYDOWN:
            return
        for intent, keys in self._active_binds().items():
            if event.key in keys:
                self._pressed.append(intent)

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame."""
        return intent in self._pressed

    def ghost_directions(self) -> list[Direction]:
        """Every ghost step pressed this frame, oldest first."""
        return [_INTENT_DIRECTIONS[i] for i in self._pressed
                if i in _INTENT_DIRECTIONS]

    # ── internal ────────────────────────────────────────────────

    def _active_binds(self) -> dict[str, list[int]]:
        if self.context == InputContext.ROUND:
            return _ROUND_BINDS
        return _LOBBY_BINDS

"""scenes/chase_scene.py — The game screen: lobby + running round.

Lobby (no round running, or the last one finished):
    R / Tab      toggle role — "ghost" (you steer the ghost) or
                 "survivor" (watch the AI ghost hunt)
    [ / ]  - / + ghost speed
    Enter/Space  start a round
    Esc          quit

Round:
    Arrows/WASD  steer the ghost (ghost role only), one cell per press
    Esc          end the round

The scene never touches entities.  It forwards intents to the
RoundController, ticks it at a fixed rate and draws the snapshots it
returns.
"""

from __future__ import annotations
import pygame

from core import tuning
from core.app import App
from core.constants import (
    TICK_RATE, TILE_SIZE, HUD_HEIGHT,
    GHOST_SPEED, GHOST_MIN_SPEED, GHOST_MAX_SPEED,
)
from core.events import RoundFinished, SurvivorEliminated
from core.scene import Scene
from components import GhostMode
from logic.input_manager import InputManager, InputContext
from logic.round import RoundController, RoundConfig, RoundSnapshot, InvalidConfiguration
from scenes.chase_draw import draw_maze, draw_actors, draw_hud

ROLE_GHOST = "ghost"
ROLE_SURVIVOR = "survivor"


class ChaseScene(Scene):
    def __init__(self, controller: RoundController | None = None):
        self.controller = controller or RoundController()
        self.input = InputManager()
        self.role = ROLE_GHOST
        self.ghost_speed = int(tuning.get("ghost", "speed", GHOST_SPEED))
        self.snapshot: RoundSnapshot | None = None
        self.message = "Press Enter to start"

        self.controller.bus.subscribe("RoundFinished", self._on_round_finished)
        self.controller.bus.subscribe("SurvivorEliminated", self._on_eliminated)

    # ── Scene hooks ──────────────────────────────────────────────────

    def on_enter(self, app: App):
        self.input.context = InputContext.LOBBY

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)

    def update(self, dt: float, app: App):
        if self.input.just("reload_tuning"):
            tuning.reload()

        if self.input.context == InputContext.LOBBY:
            self._update_lobby(app)
        else:
            self._update_round(dt)

        self.input.begin_frame()

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill((0, 0, 0))
        tile = int(tuning.get("render", "tile_size", TILE_SIZE))
        hud = int(tuning.get("render", "hud_height", HUD_HEIGHT))

        if self.controller.grid is not None:
            draw_maze(surface, self.controller.grid, tile, oy=hud)
        if self.snapshot is not None:
            draw_actors(surface, app, self.snapshot, tile, oy=hud)

        running = self.input.context == InputContext.ROUND
        draw_hud(
            surface, app, hud,
            survivors_left=self.snapshot.survivors_left if self.snapshot else None,
            role_label="Ghost (you steer)" if self.role == ROLE_GHOST
            else "Survivor (AI ghost)",
            speed=self.ghost_speed,
            message=self.message,
            hint="Esc: end round" if running
            else "Enter: start  R: role  [ ]: speed  Esc: quit",
        )

    # ── Lobby ────────────────────────────────────────────────────────

    def _update_lobby(self, app: App):
        if self.input.just("quit"):
            app.pop_scene()
            return
        if self.input.just("toggle_role"):
            self.role = ROLE_SURVIVOR if self.role == ROLE_GHOST else ROLE_GHOST
        lo = int(tuning.get("ghost", "min_speed", GHOST_MIN_SPEED))
        hi = int(tuning.get("ghost", "max_speed", GHOST_MAX_SPEED))
        if self.input.just("speed_up"):
            self.ghost_speed = min(hi, self.ghost_speed + 1)
        if self.input.just("speed_down"):
            self.ghost_speed = max(lo, self.ghost_speed - 1)
        if self.input.just("start_round"):
            self._start_round(app)

    def _start_round(self, app: App):
        mode = GhostMode.MANUAL if self.role == ROLE_GHOST else GhostMode.AI
        config = RoundConfig.from_tuning(ghost_speed=self.ghost_speed,
                                         ghost_mode=mode)
        try:
            self.controller.start(config)
        except InvalidConfiguration as exc:
            print(f"[ROUND] cannot start: {exc}")
            self.message = f"Cannot start: {exc}"
            return

        tile = int(tuning.get("render", "tile_size", TILE_SIZE))
        hud = int(tuning.get("render", "hud_height", HUD_HEIGHT))
        grid = self.controller.grid
        app.resize(grid.cols * tile, grid.rows * tile + hud)

        self.snapshot = self.controller.snapshot()
        self.message = ""
        self.tick_rate = float(tuning.get("round", "tick_rate", TICK_RATE))
        self.reset_clock()
        self.input.context = InputContext.ROUND

    # ── Round ────────────────────────────────────────────────────────

    def _update_round(self, dt: float):
        if self.input.just("end_round"):
            self.controller.end()

        for direction in self.input.ghost_directions():
            self.controller.submit_ghost_intent(direction)

        for _ in range(self.fixed_steps(dt)):
            self.snapshot = self.controller.tick()

        if self.controller.state is not None and self.controller.state.terminal:
            self.snapshot = self.controller.snapshot()
            self.input.context = InputContext.LOBBY

    # ── Event handlers ───────────────────────────────────────────────

    def _on_round_finished(self, event: RoundFinished):
        self.message = event.message

    def _on_eliminated(self, event: SurvivorEliminated):
        if event.survivors_left:
            self.message = f"Survivor down! {event.survivors_left} left"

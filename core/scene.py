"""
core/scene.py — Scene interface and fixed-step clock

Every screen is a Scene.  The app holds a stack of them; only the top
scene gets update/draw calls.

Scenes that run a simulation at a fixed tick rate pull their step
count from ``fixed_steps(dt)`` instead of ticking once per frame:

    def update(self, dt, app):
        for _ in range(self.fixed_steps(dt)):
            self.snapshot = self.controller.tick()
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    tick_rate: float = 60.0
    max_steps_per_frame: int = 5   # after a stall, drop time instead of fast-forwarding

    _accum: float = 0.0

    def on_enter(self, app: App):
        """Called when this scene becomes active (pushed or revealed)."""

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""

    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def update(self, dt: float, app: App):
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass

    # -- Fixed-step clock --

    def fixed_steps(self, dt: float) -> int:
        """Bank *dt* seconds and return how many whole ticks are due."""
        step = 1.0 / self.tick_rate
        self._accum += dt
        steps = 0
        while self._accum >= step and steps < self.max_steps_per_frame:
            self._accum -= step
            steps += 1
        if steps == self.max_steps_per_frame:
            self._accum = 0.0
        return steps

    def reset_clock(self):
        self._accum = 0.0

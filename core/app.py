"""
core/app.py — Pygame application shell

Handles the window, main loop, and scene stack.  Gameplay lives in
Scenes; the app only pumps events and frames.

    app = App(title="Maze Chase", width=840, height=648)
    app.push_scene(ChaseScene(...))
    app.run()

The frame rate is the display rate only.  Scenes that simulate use a
fixed-step accumulator on ``dt`` so the round advances at TICK_RATE
regardless of how fast frames arrive.
"""

from __future__ import annotations
import pygame
from core.scene import Scene


class App:
    def __init__(self, title: str = "Maze Chase", width: int = 840,
                 height: int = 648, fps: int = 60):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = fps
        self.dt = 0.0

        # Scene stack; only the top scene is active
        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("arial", 16)
        self.font_sm = pygame.font.SysFont("arial", 12)
        self.font_lg = pygame.font.SysFont("arial", 22, bold=True)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)
        else:
            self.running = False

    def resize(self, width: int, height: int):
        """Resize the window (e.g. when a new round changes maze size)."""
        if self.screen.get_size() != (width, height):
            self.screen = pygame.display.set_mode((width, height))

    # -- Main loop --

    def run(self):
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif self.scene:
                    self.scene.handle_event(event, self)

            if self.scene:
                self.scene.update(self.dt, self)
                self.scene.draw(self.screen, self)

            pygame.display.flip()

        pygame.quit()

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None, center: bool = False):
        """Quick text draw.  Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        if center:
            rect = img.get_rect(center=(x, y))
            return surface.blit(img, rect)
        return surface.blit(img, (x, y))

"""scenes/chase_draw.py — Rendering helpers for the chase scene.

All pure-draw functions live here so that ChaseScene.draw() stays thin.
Every function receives the data it needs as parameters; nothing reads
the controller directly, only ``Grid`` and ``RoundSnapshot`` values.
"""

from __future__ import annotations
import pygame
from core.app import App
from core.constants import (
    CELL_OPEN, COLOR_OPEN, COLOR_WALL, COLOR_GHOST, COLOR_SURVIVOR,
    COLOR_HYPNOTIZED, COLOR_TEXT, COLOR_HUD_BG,
)
from core.grid import Grid
from logic.round import RoundSnapshot


# ── Maze ────────────────────────────────────────────────────────────

def draw_maze(surface: pygame.Surface, grid: Grid, tile: int, oy: int = 0):
    for row, cells in enumerate(grid.to_lists()):
        for col, value in enumerate(cells):
            color = COLOR_OPEN if value == CELL_OPEN else COLOR_WALL
            pygame.draw.rect(surface, color,
                             (col * tile, oy + row * tile, tile, tile))


# ── Actors ──────────────────────────────────────────────────────────

def _cell_center(cell: tuple[int, int], tile: int, oy: int) -> tuple[int, int]:
    row, col = cell
    return col * tile + tile // 2, oy + row * tile + tile // 2


def draw_actors(surface: pygame.Surface, app: App, snap: RoundSnapshot,
                tile: int, oy: int = 0):
    """Survivors first, ghost on top; hypnotized survivors turn purple."""
    radius = max(3, tile // 4)
    for surv in snap.survivors:
        cx, cy = _cell_center(surv.position, tile, oy)
        color = COLOR_HYPNOTIZED if surv.hypnotized else COLOR_SURVIVOR
        pygame.draw.circle(surface, color, (cx, cy), radius)
        app.draw_text(surface, str(surv.hp), cx, cy, color=COLOR_TEXT,
                      font=app.font_sm, center=True)

    gx, gy = _cell_center(snap.ghost, tile, oy)
    pygame.draw.circle(surface, COLOR_GHOST, (gx, gy), radius)


# ── HUD ─────────────────────────────────────────────────────────────

def draw_hud(surface: pygame.Surface, app: App, height: int, *,
             survivors_left: int | None, role_label: str, speed: int,
             message: str, hint: str):
    width = surface.get_width()
    pygame.draw.rect(surface, COLOR_HUD_BG, (0, 0, width, height))

    left = "Survivors Left: -" if survivors_left is None else \
        f"Survivors Left: {survivors_left}"
    app.draw_text(surface, left, 8, 6)
    app.draw_text(surface, f"Role: {role_label}   Speed: {speed}", 8, 26,
                  font=app.font_sm)

    if message:
        app.draw_text(surface, message, width // 2, height // 2,
                      color=(255, 220, 90), font=app.font_lg, center=True)

    hint_img = app.font_sm.render(hint, True, (170, 170, 170))
    surface.blit(hint_img, (width - hint_img.get_width() - 8, 28))

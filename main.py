"""
main.py — Bootstrap

1. Load tuning
2. Create the app, sized for the configured maze
3. Push the chase scene
4. Run
"""

from core import tuning
from core.app import App
from core.constants import (
    DEFAULT_ROWS, DEFAULT_COLS, TILE_SIZE, HUD_HEIGHT, TICK_RATE,
)
from logic.round import RoundController
from scenes.chase_scene import ChaseScene


def main():
    tuning.load()

    rows = int(tuning.get("maze", "rows", DEFAULT_ROWS))
    cols = int(tuning.get("maze", "cols", DEFAULT_COLS))
    tile = int(tuning.get("render", "tile_size", TILE_SIZE))
    hud = int(tuning.get("render", "hud_height", HUD_HEIGHT))

    app = App(title="Maze Chase", width=cols * tile, height=rows * tile + hud,
              fps=int(tuning.get("round", "tick_rate", TICK_RATE)))
    app.push_scene(ChaseScene(RoundController()))
    app.run()


if __name__ == "__main__":
    main()

"""logic/round.py — Round lifecycle: setup, ticking, termination.

The RoundController is the only thing outside code talks to.  It owns
the maze, the ECS world holding the ghost and the survivors, the round
RNG, the event bus and the state machine::

    rc = RoundController()
    rc.start(RoundConfig(rows=15, cols=21, survivor_count=5))
    while rc.state is RoundState.IN_PROGRESS:
        snap = rc.tick()          # call at TICK_RATE from any scheduler

State machine
-------------
    IN_PROGRESS ──(last survivor eliminated)──▶ GHOST_WINS
    IN_PROGRESS ──(end())─────────────────────▶ ENDED

Both exits are terminal: further ``tick()`` calls return the final
snapshot unchanged and intents are ignored.  There is no
"survivors win" outcome.
"""

from __future__ import annotations
import dataclasses
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from components import (
    Cell, Direction, GhostState, GhostMode, SurvivorState,
    RoundClock, HypnosisConfig, DevLog,
)
from core import tuning
from core.constants import (
    DEFAULT_ROWS, DEFAULT_COLS, MIN_ROUND_SIZE,
    GHOST_SPEED, GHOST_MOVE_INTERVAL,
    SURVIVOR_COUNT, SURVIVOR_HP, HYPNOSIS_TICKS, SURVIVOR_MOVE_INTERVAL,
    PLACEMENT_ATTEMPTS, MSG_GHOST_WINS, MSG_ENDED_BY_PLAYER,
)
from core.ecs import World
from core.events import EventBus, RoundFinished
from core.grid import Grid
from logic.ghost import step_ghost
from logic.maze import generate_maze
from logic.tick import tick_systems


class InvalidConfiguration(ValueError):
    """A round cannot start with the given configuration."""


class RoundState(Enum):
    IN_PROGRESS = "in_progress"
    GHOST_WINS = "ghost_wins"
    ENDED = "ended"

    @property
    def terminal(self) -> bool:
        return self is not RoundState.IN_PROGRESS


# ── Configuration ────────────────────────────────────────────────────

_INT_FIELDS = (
    "rows", "cols", "survivor_count", "ghost_speed", "survivor_hp",
    "hypnosis_ticks", "survivor_move_interval", "ghost_move_interval",
    "placement_attempts",
)


@dataclass
class RoundConfig:
    """Everything needed to set up one round.

    The first five fields are the ones a front-end exposes; the rest
    default to ``core/constants.py`` and are mostly for tuning and tests.
    """
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    survivor_count: int = SURVIVOR_COUNT
    ghost_speed: int = GHOST_SPEED
    ghost_mode: GhostMode = GhostMode.AI
    survivor_hp: int = SURVIVOR_HP
    hypnosis_ticks: int = HYPNOSIS_TICKS
    survivor_move_interval: int = SURVIVOR_MOVE_INTERVAL
    ghost_move_interval: int = GHOST_MOVE_INTERVAL
    placement_attempts: int = PLACEMENT_ATTEMPTS
    seed: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.ghost_mode, str):
            try:
                self.ghost_mode = GhostMode(self.ghost_mode.lower())
            except ValueError:
                raise InvalidConfiguration(
                    f"unknown ghost_mode {self.ghost_mode!r}") from None

    @classmethod
    def from_tuning(cls, **overrides) -> "RoundConfig":
        """Build a config from ``data/tuning.toml``; kwargs win."""
        values = dict(
            rows=int(tuning.get("maze", "rows", DEFAULT_ROWS)),
            cols=int(tuning.get("maze", "cols", DEFAULT_COLS)),
            survivor_count=int(tuning.get("survivor", "count", SURVIVOR_COUNT)),
            ghost_speed=int(tuning.get("ghost", "speed", GHOST_SPEED)),
            survivor_hp=int(tuning.get("survivor", "hp", SURVIVOR_HP)),
            hypnosis_ticks=int(tuning.get("survivor", "hypnosis_ticks", HYPNOSIS_TICKS)),
            survivor_move_interval=int(tuning.get(
                "survivor", "move_interval", SURVIVOR_MOVE_INTERVAL)),
            ghost_move_interval=int(tuning.get(
                "ghost", "move_interval", GHOST_MOVE_INTERVAL)),
            placement_attempts=int(tuning.get(
                "round", "placement_attempts", PLACEMENT_ATTEMPTS)),
        )
        values.update(overrides)
        return cls(**values)

    def validate(self) -> None:
        """Raise ``InvalidConfiguration`` naming the first bad field."""
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
        if self.rows < MIN_ROUND_SIZE or self.cols < MIN_ROUND_SIZE:
            raise InvalidConfiguration(
                f"maze must be at least {MIN_ROUND_SIZE}x{MIN_ROUND_SIZE}, "
                f"got {self.rows}x{self.cols}")
        if self.survivor_count < 0:
            raise InvalidConfiguration(
                f"survivor_count must be >= 0, got {self.survivor_count}")
        for name in ("ghost_speed", "survivor_hp", "survivor_move_interval",
                     "ghost_move_interval", "placement_attempts"):
            value = getattr(self, name)
            if value < 1:
                raise InvalidConfiguration(f"{name} must be >= 1, got {value}")
        if self.hypnosis_ticks < 0:
            raise InvalidConfiguration(
                f"hypnosis_ticks must be >= 0, got {self.hypnosis_ticks}")
        if not isinstance(self.ghost_mode, GhostMode):
            raise InvalidConfiguration(f"unknown ghost_mode {self.ghost_mode!r}")


# ── Snapshots (read-only projections for renderers) ─────────────────

@dataclass(frozen=True)
class SurvivorView:
    eid: int
    position: tuple[int, int]
    hp: int
    hypnotized: bool


@dataclass(frozen=True)
class RoundSnapshot:
    ghost: tuple[int, int]
    survivors: tuple[SurvivorView, ...] = field(default_factory=tuple)
    state: RoundState = RoundState.IN_PROGRESS
    tick: int = 0
    message: str = ""

    @property
    def survivors_left(self) -> int:
        return len(self.survivors)


# ── Controller ───────────────────────────────────────────────────────

class RoundController:
    """Owns and advances one round at a time.

    The controller can be reused: every ``start()`` / ``stage()``
    replaces the previous round wholesale.  The event bus survives
    across rounds so front-end subscriptions only happen once.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.bus = EventBus()
        self.world: World | None = None
        self.grid: Grid | None = None
        self.config: RoundConfig | None = None
        self.state: RoundState | None = None
        self.message = ""
        self._round_rng = self.rng

    # -- Setup --

    def start(self, config: RoundConfig | None = None) -> None:
        """Generate a maze and place the ghost and survivors at random.

        Raises ``InvalidConfiguration`` (and leaves any previous round
        untouched) when the config is bad or placement runs out of
        attempts.
        """
        if config is None:
            config = RoundConfig.from_tuning()
        else:
            config = dataclasses.replace(config)   # caller edits must not reach the round
        config.validate()
        rng = random.Random(config.seed) if config.seed is not None else self.rng

        grid = generate_maze(config.rows, config.cols, rng)
        ghost_at, survivor_cells = _place_actors(grid, config, rng)
        self._begin(grid, ghost_at, survivor_cells, config, rng)

    def stage(self, grid: Grid, ghost_at: tuple[int, int],
              survivors_at: Sequence[tuple[int, int]],
              config: RoundConfig | None = None) -> None:
        """Start a round on a given grid with fixed placements.

        ``rows``, ``cols`` and ``survivor_count`` are taken from the
        arguments, not from *config*.  Every cell must be open.  Unlike
        random placement, staged actors may share a cell; that is how
        contact is set up deliberately.
        """
        config = dataclasses.replace(
            config or RoundConfig(),
            rows=grid.rows, cols=grid.cols, survivor_count=len(survivors_at))
        config.validate()

        cells = [tuple(ghost_at)] + [tuple(c) for c in survivors_at]
        for cell in cells:
            if len(cell) != 2 or not grid.is_open(*cell):
                raise InvalidConfiguration(f"cell {cell} is not an open cell")

        rng = random.Random(config.seed) if config.seed is not None else self.rng
        self._begin(grid, cells[0], cells[1:], config, rng)

    def _begin(self, grid: Grid, ghost_at: tuple[int, int],
               survivor_cells: Sequence[tuple[int, int]],
               config: RoundConfig, rng: random.Random) -> None:
        world = World()
        world.set_res(RoundClock())
        world.set_res(DevLog())
        world.set_res(HypnosisConfig(ticks=config.hypnosis_ticks))

        ghost = world.spawn()
        world.add(ghost, Cell(*ghost_at))
        world.add(ghost, GhostState(speed=config.ghost_speed,
                                    mode=config.ghost_mode,
                                    move_interval=config.ghost_move_interval))

        for row, col in survivor_cells:
            eid = world.spawn()
            world.add(eid, Cell(row, col))
            world.add(eid, SurvivorState(hp=config.survivor_hp,
                                         max_hp=config.survivor_hp,
                                         move_interval=config.survivor_move_interval))

        self.world = world
        self.grid = grid
        self.config = config
        self._round_rng = rng
        self.state = RoundState.IN_PROGRESS
        self.message = ""
        self.bus.clear()
        world.res(DevLog).record(ghost, "round", "started", details={
            "size": (grid.rows, grid.cols),
            "survivors": len(survivor_cells),
            "mode": config.ghost_mode.value,
        })
        print(f"[ROUND] started {grid.rows}x{grid.cols}: ghost at {tuple(ghost_at)}, "
              f"{len(survivor_cells)} survivors, speed {config.ghost_speed}, "
              f"{config.ghost_mode.value}")

    # -- Per-tick --

    def tick(self) -> RoundSnapshot:
        """Advance one tick and return the resulting snapshot.

        No-op on a finished round.  Raises ``RuntimeError`` before the
        first ``start()`` / ``stage()``.
        """
        self._require_round()
        if self.state is not RoundState.IN_PROGRESS:
            return self.snapshot()

        tick_systems(self.world, self.grid, self._round_rng, self.bus)

        if self.world.count(SurvivorState) == 0:
            self._finish(RoundState.GHOST_WINS, MSG_GHOST_WINS)

        self.bus.drain()
        return self.snapshot()

    def submit_ghost_intent(self, direction: Direction | str) -> None:
        """Step a manually controlled ghost one cell, right now.

        Ignored unless the ghost is MANUAL and the round is in progress.
        Steps into walls or off the grid, and key names that are not a
        direction, are silently dropped.
        """
        if self.world is None or self.state is not RoundState.IN_PROGRESS:
            return
        _eid, _cell, ghost = self.world.query_one(Cell, GhostState)
        if ghost.mode is not GhostMode.MANUAL:
            return
        if isinstance(direction, str):
            try:
                direction = Direction.parse(direction)
            except ValueError:
                return
        step_ghost(self.world, self.grid, direction)

    def end(self, reason: str = MSG_ENDED_BY_PLAYER) -> None:
        """Force the round into ENDED.  No-op if it already finished."""
        if self.state is not RoundState.IN_PROGRESS:
            return
        self._finish(RoundState.ENDED, reason)
        self.bus.drain()

    def _finish(self, state: RoundState, message: str) -> None:
        self.state = state
        self.message = message
        t = self.world.res(RoundClock).tick
        self.world.res(DevLog).record(-1, "round", state.name, t=t,
                                      details={"message": message})
        self.bus.emit(RoundFinished(state=state.name, message=message, tick=t))
        print(f"[ROUND] {state.name} at tick {t}: {message}")

    # -- Read-only views --

    def snapshot(self) -> RoundSnapshot:
        self._require_round()
        _geid, gcell, _ghost = self.world.query_one(Cell, GhostState)
        survivors = tuple(
            SurvivorView(eid=eid, position=cell.as_tuple(), hp=surv.hp,
                         hypnotized=surv.hypnotized)
            for eid, cell, surv in self.world.query(Cell, SurvivorState)
        )
        return RoundSnapshot(
            ghost=gcell.as_tuple(),
            survivors=survivors,
            state=self.state,
            tick=self.world.res(RoundClock).tick,
            message=self.message,
        )

    @property
    def started(self) -> bool:
        return self.world is not None

    @property
    def log(self) -> DevLog | None:
        return self.world.res(DevLog) if self.world else None

    def _require_round(self) -> None:
        if self.world is None:
            raise RuntimeError("no round has been started")


# ── Placement ────────────────────────────────────────────────────────

def _place_actors(grid: Grid, config: RoundConfig, rng: random.Random
                  ) -> tuple[tuple[int, int], list[tuple[int, int]]]:
    """Ghost on a random open cell, then survivors on distinct ones.

    Each survivor redraws on collision up to ``placement_attempts``
    times before the round is declared impossible.
    """
    open_cells = grid.open_cells()
    if len(open_cells) < config.survivor_count + 1:
        raise InvalidConfiguration(
            f"{config.survivor_count} survivors and a ghost need "
            f"{config.survivor_count + 1} open cells, maze has {len(open_cells)}")

    ghost_at = rng.choice(open_cells)
    taken = {ghost_at}
    placed: list[tuple[int, int]] = []
    for i in range(config.survivor_count):
        for _ in range(config.placement_attempts):
            cell = rng.choice(open_cells)
            if cell not in taken:
                break
        else:
            raise InvalidConfiguration(
                f"could not place survivor {i + 1} within "
                f"{config.placement_attempts} attempts")
        taken.add(cell)
        placed.append(cell)
    return ghost_at, placed

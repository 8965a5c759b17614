"""core — engine layer: grid, ECS, events, tuning, pygame shell.

Nothing in here knows about ghosts or survivors; gameplay lives in
``components`` and ``logic``.
"""

__all__ = ["app", "constants", "ecs", "events", "grid", "scene", "tuning"]

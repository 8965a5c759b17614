"""logic — Game systems package.

Top-level modules
-----------------
maze           — randomized Prim's maze generation
pathfinding    — BFS shortest paths on the grid
ghost          — ghost pursuit system + manual stepping
survivors      — survivor random walk + ghost contact / damage
tick           — per-tick system orchestrator
round          — RoundController: setup, state machine, snapshots
input_manager  — raw pygame keys → intents / directions
"""

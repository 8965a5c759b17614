"""scenes — pygame screens.

chase_scene  — lobby + running round (the only screen)
chase_draw   — pure draw helpers for the chase scene
"""

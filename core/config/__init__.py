"""Configuration package for the Big Fish game.

Constants are grouped by concern (display, entities, session) and re-exported
through core/constants.py. ``GameConfig`` bundles the runtime-tunable subset.
"""

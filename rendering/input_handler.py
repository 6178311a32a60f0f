"""Keyboard to PlayerInput mapping."""

from typing import Sequence

import pygame

from core.entities.player import PlayerInput

UP_KEYS = (pygame.K_w, pygame.K_UP)
DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)
LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
PAUSE_KEYS = (pygame.K_ESCAPE,)


def _any_pressed(pressed: Sequence[bool], keys: Sequence[int]) -> bool:
    return any(pressed[key] for key in keys)


def read_player_input(pressed: Sequence[bool]) -> PlayerInput:
    """Build a PlayerInput from ``pygame.key.get_pressed()`` style state.

    WASD and the arrow keys steer; Escape requests a pause.
    """
    return PlayerInput(
        move_up=_any_pressed(pressed, UP_KEYS),
        move_down=_any_pressed(pressed, DOWN_KEYS),
        move_left=_any_pressed(pressed, LEFT_KEYS),
        move_right=_any_pressed(pressed, RIGHT_KEYS),
        pause=_any_pressed(pressed, PAUSE_KEYS),
    )

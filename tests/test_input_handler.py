"""Tests for mapping keyboard state to player input."""

import pygame

from rendering.input_handler import read_player_input


class Pressed(dict):
    """Stand-in for ``pygame.key.get_pressed()``: unlisted keys are up."""

    def __missing__(self, key) -> bool:
        return False


class TestReadPlayerInput:
    def test_nothing_pressed(self) -> None:
        intent = read_player_input(Pressed())
        assert not any(
            (intent.move_up, intent.move_down, intent.move_left, intent.move_right, intent.pause)
        )

    def test_wasd_and_arrows_are_equivalent(self) -> None:
        assert read_player_input(Pressed({pygame.K_w: True})).move_up
        assert read_player_input(Pressed({pygame.K_UP: True})).move_up
        assert read_player_input(Pressed({pygame.K_a: True})).move_left
        assert read_player_input(Pressed({pygame.K_RIGHT: True})).move_right

    def test_escape_pauses(self) -> None:
        assert read_player_input(Pressed({pygame.K_ESCAPE: True})).pause

"""Tests for the state machine and the game phase transitions."""

from enum import Enum

import pytest

from core.state_machine import (
    GAME_PHASE_TRANSITIONS,
    GamePhase,
    StateMachine,
    create_game_state_machine,
)


class Light(Enum):
    RED = "red"
    GREEN = "green"


class TestStateMachine:
    """Generic transition validation and history."""

    def test_initial_state_must_be_declared(self) -> None:
        with pytest.raises(ValueError):
            StateMachine(Light.RED, {Light.GREEN: [Light.RED]})

    def test_declared_transition_succeeds(self) -> None:
        machine = StateMachine(Light.RED, {Light.RED: [Light.GREEN], Light.GREEN: []})
        result = machine.try_transition(Light.GREEN)
        assert result.is_ok()
        assert machine.state is Light.GREEN

    def test_undeclared_transition_is_err_and_keeps_state(self) -> None:
        machine = StateMachine(Light.RED, {Light.RED: [], Light.GREEN: []})
        result = machine.try_transition(Light.GREEN)
        assert result.is_err()
        assert "RED -> GREEN" in result.error
        assert machine.state is Light.RED

    def test_transition_raises_on_invalid(self) -> None:
        machine = StateMachine(Light.RED, {Light.RED: [], Light.GREEN: []})
        with pytest.raises(ValueError):
            machine.transition(Light.GREEN)

    def test_history_is_bounded(self) -> None:
        machine = StateMachine(
            Light.RED,
            {Light.RED: [Light.GREEN], Light.GREEN: [Light.RED]},
            track_history=True,
            max_history=3,
        )
        for frame in range(5):
            machine.transition(Light.GREEN if machine.state is Light.RED else Light.RED, frame)

        history = machine.history
        assert len(history) == 3
        assert [t.frame for t in history] == [2, 3, 4]


class TestGamePhases:
    """The declared screen and session transitions."""

    def test_starts_on_home(self) -> None:
        assert create_game_state_machine().state is GamePhase.HOME

    @pytest.mark.parametrize(
        "path",
        [
            [GamePhase.SETTINGS, GamePhase.HOME],
            [GamePhase.HISTORY, GamePhase.HOME],
            [GamePhase.PLAYING, GamePhase.PAUSED, GamePhase.PLAYING],
            [GamePhase.PLAYING, GamePhase.PAUSED, GamePhase.HOME],
            [GamePhase.PLAYING, GamePhase.ENDED, GamePhase.PLAYING],
            [GamePhase.PLAYING, GamePhase.ENDED, GamePhase.HOME],
        ],
    )
    def test_valid_paths(self, path) -> None:
        machine = create_game_state_machine()
        for phase in path:
            machine.transition(phase)
        assert machine.state is path[-1]

    @pytest.mark.parametrize(
        "path, invalid",
        [
            ([], GamePhase.PAUSED),
            ([], GamePhase.ENDED),
            ([GamePhase.SETTINGS], GamePhase.PLAYING),
            ([GamePhase.HISTORY], GamePhase.SETTINGS),
            ([GamePhase.PLAYING], GamePhase.HOME),
            ([GamePhase.PLAYING], GamePhase.SETTINGS),
            ([GamePhase.PLAYING, GamePhase.PAUSED], GamePhase.ENDED),
            ([GamePhase.PLAYING, GamePhase.ENDED], GamePhase.PAUSED),
        ],
    )
    def test_invalid_transitions_rejected(self, path, invalid) -> None:
        machine = create_game_state_machine()
        for phase in path:
            machine.transition(phase)
        assert machine.try_transition(invalid).is_err()

    def test_every_phase_is_declared(self) -> None:
        assert set(GAME_PHASE_TRANSITIONS) == set(GamePhase)

"""State machine abstractions for explicit phase management.

The game moves between screens (home, settings, history) and session phases
(playing, paused, ended). Rather than letting any code assign any phase,
every valid transition is declared up front and anything else is rejected:

    game = create_game_state_machine()
    game.transition(GamePhase.PLAYING)   # OK from HOME
    game.transition(GamePhase.SETTINGS)  # Raises! PLAYING -> SETTINGS is not declared

UI-triggered transitions use ``try_transition`` and inspect the Result, so a
stray button press in the wrong phase is ignored rather than fatal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, List, TypeVar

from core.result import Err, Ok, Result

S = TypeVar("S", bound=Enum)


@dataclass
class StateTransition(Generic[S]):
    """Record of a state transition for debugging.

    Attributes:
        from_state: The state before transition
        to_state: The state after transition
        frame: The session frame when transition occurred
        reason: Optional description of why transition happened
    """

    from_state: S
    to_state: S
    frame: int
    reason: str = ""


class StateMachine(Generic[S]):
    """A generic state machine with explicit transition validation."""

    def __init__(
        self,
        initial_state: S,
        valid_transitions: Dict[S, List[S]],
        track_history: bool = False,
        max_history: int = 100,
    ) -> None:
        """Initialize the state machine.

        Args:
            initial_state: The starting state
            valid_transitions: Map of state -> list of valid target states
            track_history: Whether to record transition history
            max_history: Maximum number of transitions to keep in history
        """
        if initial_state not in valid_transitions:
            raise ValueError(
                f"Initial state {initial_state} not in valid_transitions. "
                f"Valid states: {list(valid_transitions.keys())}"
            )

        self._state = initial_state
        self._transitions = valid_transitions
        self._track_history = track_history
        self._max_history = max_history
        self._history: List[StateTransition[S]] = []

    @property
    def state(self) -> S:
        """Get the current state."""
        return self._state

    @property
    def history(self) -> List[StateTransition[S]]:
        """Get transition history (empty if tracking disabled)."""
        return self._history.copy()

    def can_transition(self, target: S) -> bool:
        return target in self._transitions.get(self._state, [])

    def try_transition(self, target: S, frame: int = 0, reason: str = "") -> Result[S, str]:
        """Attempt to transition to a new state.

        Returns:
            Ok(new_state) on success, Err(message) if the transition is not declared
        """
        if not self.can_transition(target):
            valid_targets = self._transitions.get(self._state, [])
            return Err(
                f"Invalid transition: {self._state.name} -> {target.name}. "
                f"Valid targets from {self._state.name}: {[t.name for t in valid_targets]}"
            )

        old_state = self._state
        self._state = target

        if self._track_history:
            self._record_transition(old_state, target, frame, reason)

        return Ok(target)

    def transition(self, target: S, frame: int = 0, reason: str = "") -> S:
        """Transition to a new state, raising on invalid transition.

        Raises:
            ValueError: If the transition is invalid
        """
        result = self.try_transition(target, frame, reason)
        if result.is_err():
            raise ValueError(result.error)
        return result.unwrap()

    def _record_transition(self, from_state: S, to_state: S, frame: int, reason: str) -> None:
        self._history.append(
            StateTransition(
                from_state=from_state,
                to_state=to_state,
                frame=frame,
                reason=reason,
            )
        )

        if len(self._history) > self._max_history:
            self._history = self._history[-self._max_history :]

    def __repr__(self) -> str:
        return f"StateMachine(state={self._state.name})"


# ============================================================================
# Game Phase State Machine
# ============================================================================


class GamePhase(Enum):
    """Screens and session phases of the game."""

    HOME = "home"
    SETTINGS = "settings"
    HISTORY = "history"
    PLAYING = "playing"
    PAUSED = "paused"
    ENDED = "ended"  # Terminal for the session; a new one starts from here or HOME


GAME_PHASE_TRANSITIONS: Dict[GamePhase, List[GamePhase]] = {
    GamePhase.HOME: [GamePhase.PLAYING, GamePhase.SETTINGS, GamePhase.HISTORY],
    GamePhase.SETTINGS: [GamePhase.HOME],
    GamePhase.HISTORY: [GamePhase.HOME],
    GamePhase.PLAYING: [GamePhase.PAUSED, GamePhase.ENDED],
    GamePhase.PAUSED: [GamePhase.PLAYING, GamePhase.HOME],
    GamePhase.ENDED: [GamePhase.PLAYING, GamePhase.HOME],
}


def create_game_state_machine(track_history: bool = True) -> StateMachine[GamePhase]:
    """Create a state machine for the game's screens and phases.

    Args:
        track_history: Whether to track transition history

    Returns:
        A StateMachine starting on the HOME screen
    """
    return StateMachine(
        initial_state=GamePhase.HOME,
        valid_transitions=GAME_PHASE_TRANSITIONS,
        track_history=track_history,
    )

"""Game session orchestration.

GameSession owns the current SessionState and the game phase state machine.
The frontend calls its menu operations in response to button presses and
calls ``step()`` once per rendered frame while playing:

    session = GameSession(records, snapshots, rng)
    session.start_new_game()
    while running:
        session.step(delta_time, keyboard_intent())
        renderer.draw(session.render_view())

Per-frame order while PLAYING:
    1. Pause intent short-circuits to PAUSED (and snapshots the session)
    2. Player fish moves
    3. Spawner culls and spawns enemies
    4. Enemies move
    5. Collisions and victory are resolved
    6. The player is clamped inside the play area
    7. HUD fields are synced from the player fish

Persistence happens only on transitions: the snapshot on pause, the ledger
when a session ends. Write failures are logged and the game carries on.
"""

import logging
import random
from typing import List, Optional

from core.config.game_config import GameConfig
from core.entities.player import PlayerFish, PlayerInput
from core.entities.tiers import TIER_STATS
from core.exceptions import SessionError
from core.events import EventBus, PhaseChangedEvent, SessionEndedEvent
from core.persistence.records import GameRecord, RecordStore
from core.persistence.snapshots import SnapshotStatus, SnapshotStore
from core.render_view import EnemyView, PlayerView, RenderView
from core.session_state import SessionState
from core.state_machine import GamePhase, StateMachine, create_game_state_machine
from core.systems.collision import CollisionOutcome, CollisionResolver, clamp_to_play_area
from core.util.rng import make_rng

logger = logging.getLogger(__name__)

NOTICE_NO_SAVE = "No saved game found"
NOTICE_CORRUPT_SAVE = "Saved game is corrupted"


class GameSession:
    """Drives screens, sessions and their persistence side effects.

    Attributes:
        records: Completed-game ledger (injected)
        snapshots: Paused-session slot (injected)
        rng: Random source shared by every spawner this session creates
        config: Game configuration
        event_bus: Bus for phase, eat, damage and end-of-session events
        state: The current SessionState
        notice: Message for the home screen after a failed continue
    """

    def __init__(
        self,
        records: RecordStore,
        snapshots: SnapshotStore,
        rng: random.Random,
        config: Optional[GameConfig] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.records = records
        self.snapshots = snapshots
        self.rng = rng
        self.config = config if config is not None else GameConfig()
        self.event_bus = event_bus if event_bus is not None else EventBus()

        player_cfg = self.config.player
        self.collision_resolver = CollisionResolver(
            victory_size=player_cfg.victory_size,
            damage=player_cfg.collision_damage,
            cooldown=player_cfg.collision_cooldown,
            event_bus=self.event_bus,
        )

        self._machine: StateMachine[GamePhase] = create_game_state_machine()
        self.state: SessionState = self._fresh_state()
        self.notice: Optional[str] = None

    @classmethod
    def create(cls, config: Optional[GameConfig] = None) -> "GameSession":
        """Wire a session to the on-disk ledger and snapshot named by ``config``."""
        config = config if config is not None else GameConfig.from_env()
        rng = make_rng(config.seed)
        records = RecordStore.load(config.persistence.records_path)
        snapshots = SnapshotStore(config.persistence.snapshot_path, rng)
        return cls(records, snapshots, rng, config=config)

    # ------------------------------------------------------------------
    # Phase bookkeeping
    # ------------------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        return self._machine.state

    @property
    def phase_history(self):
        return self._machine.history

    def _change_phase(self, target: GamePhase, reason: str = "") -> bool:
        """Move to ``target`` if the transition is declared.

        Returns:
            False (with a warning) if the transition is not allowed
        """
        previous = self._machine.state
        result = self._machine.try_transition(target, frame=self.state.frame, reason=reason)
        if result.is_err():
            logger.warning("Ignoring phase change: %s", result.error)
            return False

        logger.info("Phase %s -> %s (%s)", previous.name, target.name, reason or "no reason")
        self.event_bus.emit(
            PhaseChangedEvent(
                frame=self.state.frame,
                from_phase=previous.value,
                to_phase=target.value,
                reason=reason,
            )
        )
        return True

    def _fresh_state(self) -> SessionState:
        player_cfg = self.config.player
        spawn_cfg = self.config.spawn
        player = PlayerFish(
            size=player_cfg.start_size,
            health=player_cfg.start_health,
            speed=player_cfg.speed,
        )
        return SessionState.new(
            self.rng,
            spawn_interval=spawn_cfg.spawn_interval,
            max_enemies=spawn_cfg.max_enemies,
            player=player,
        )

    # ------------------------------------------------------------------
    # Menu operations
    # ------------------------------------------------------------------

    def start_new_game(self) -> bool:
        """Begin a fresh session from HOME or ENDED, discarding any snapshot."""
        if self.phase not in (GamePhase.HOME, GamePhase.ENDED):
            logger.warning("Cannot start a new game from %s", self.phase.name)
            return False

        self.state = self._fresh_state()
        self.snapshots.clear()
        self.notice = None
        return self._change_phase(GamePhase.PLAYING, "new game")

    def restart(self) -> bool:
        """Play again from the end screen."""
        if self.phase is not GamePhase.ENDED:
            logger.warning("Restart is only available once a session has ended")
            return False
        return self.start_new_game()

    def continue_game(self) -> bool:
        """Resume the snapshotted session from HOME.

        If there is no usable snapshot, ``notice`` is set and the game stays
        on HOME.
        """
        if self.phase is not GamePhase.HOME:
            logger.warning("Continue is only available from HOME, not %s", self.phase.name)
            return False

        loaded = self.snapshots.load_result()
        if loaded.status is SnapshotStatus.MISSING:
            self.notice = NOTICE_NO_SAVE
            return False
        if loaded.status is SnapshotStatus.CORRUPT or loaded.session is None:
            self.notice = NOTICE_CORRUPT_SAVE
            return False

        self.state = loaded.session
        self.notice = None
        return self._change_phase(GamePhase.PLAYING, "continue saved game")

    def pause(self) -> bool:
        """Pause and snapshot the running session."""
        if not self._change_phase(GamePhase.PAUSED, "pause"):
            return False

        result = self.snapshots.save(self.state)
        if result.is_err():
            logger.warning("Paused without a snapshot: %s", result.error)
        return True

    def resume(self) -> bool:
        """Continue from PAUSED with the in-memory session."""
        return self._change_phase(GamePhase.PLAYING, "resume")

    def return_home(self) -> bool:
        """Go back to HOME from a menu screen, the pause screen or the end screen.

        Leaving a paused game keeps its snapshot so it can be continued.
        """
        return self._change_phase(GamePhase.HOME, "return home")

    def open_settings(self) -> bool:
        return self._change_phase(GamePhase.SETTINGS, "open settings")

    def open_history(self) -> bool:
        return self._change_phase(GamePhase.HISTORY, "open history")

    def clear_notice(self) -> None:
        self.notice = None

    # ------------------------------------------------------------------
    # History screen
    # ------------------------------------------------------------------

    def history(self) -> List[GameRecord]:
        """Completed games, newest first."""
        return self.records.records_newest_first()

    def delete_record(self, record_id: int) -> bool:
        """Delete a record and persist the ledger if anything was removed."""
        removed = self.records.delete_record(record_id)
        if removed:
            result = self.records.save()
            if result.is_err():
                logger.warning("Record #%d deleted in memory only: %s", record_id, result.error)
        return removed

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def step(self, delta_time: float, intent: PlayerInput) -> Optional[CollisionOutcome]:
        """Advance the running session by one frame.

        Does nothing outside PLAYING.

        Raises:
            SessionError: If delta_time is negative

        Returns:
            The collision outcome for the frame, or None if nothing was simulated
        """
        if delta_time < 0:
            raise SessionError(f"delta_time cannot be negative, got {delta_time}")
        if self.phase is not GamePhase.PLAYING:
            return None

        if intent.pause:
            self.pause()
            return None

        state = self.state
        state.input = intent
        state.frame += 1
        width = self.config.display.screen_width
        height = self.config.display.screen_height

        state.player.update(delta_time, intent)

        state.spawner.update(delta_time, state.enemies, width, height, state.player.size)
        for enemy in state.enemies:
            enemy.update(delta_time)

        outcome = self.collision_resolver.resolve(state)

        if outcome.session_over:
            state.sync_display_fields()
            self._end_session(outcome)
            return outcome

        clamp_to_play_area(state.player, width, height)
        state.sync_display_fields()
        return outcome

    def _end_session(self, outcome: CollisionOutcome) -> None:
        state = self.state
        record = self.records.add_record(state.score, state.player.size)
        result = self.records.save()
        if result.is_err():
            logger.warning("Game record kept in memory only: %s", result.error)

        self.snapshots.clear()
        self._change_phase(GamePhase.ENDED, "victory" if outcome.victory else "defeat")
        self.event_bus.emit(
            SessionEndedEvent(
                frame=state.frame,
                victory=outcome.victory,
                score=state.score,
                size=state.player.size,
                record_id=record.id,
            )
        )

    # ------------------------------------------------------------------
    # Render collaborator
    # ------------------------------------------------------------------

    def render_view(self) -> RenderView:
        state = self.state
        player = state.player
        return RenderView(
            phase=self.phase.value,
            player=PlayerView(
                x=player.position.x,
                y=player.position.y,
                size=player.size,
                display_size=player.display_size,
                facing_right=player.facing_right,
            ),
            enemies=tuple(
                EnemyView(
                    x=enemy.position.x,
                    y=enemy.position.y,
                    tier=enemy.tier.name,
                    direction=enemy.direction.value,
                    display_size=enemy.display_size,
                    color=TIER_STATS[enemy.tier].color,
                )
                for enemy in state.living_enemies()
            ),
            health=state.health,
            size=state.size,
            score=state.score,
            is_victory=state.is_victory,
            notice=self.notice,
        )

"""Pygame frontend for Big Fish.

Owns the window, clock and keyboard, and forwards everything else to a
GameSession. Menu screens are driven by single key presses; play is driven
by held keys read every frame.
"""

import logging
from typing import Optional

import pygame

from core.config.game_config import GameConfig
from core.entities.player import PlayerInput
from core.events import FishEatenEvent, PlayerDamagedEvent, SessionEndedEvent
from core.session import GameSession
from core.state_machine import GamePhase
from rendering.game_renderer import GameRenderer
from rendering.input_handler import read_player_input

logger = logging.getLogger(__name__)


class BigFishGame:
    """The windowed game.

    Attributes:
        config: Game configuration
        session: The core game session
        screen: Pygame display surface
        clock: Pygame clock for frame rate
        renderer: Draws the current screen
        running: False once the player quits
        history_cursor: Index of the selected row on the history screen
    """

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config if config is not None else GameConfig.from_env()
        self.session = GameSession.create(self.config)
        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.renderer: Optional[GameRenderer] = None
        self.running: bool = False
        self.history_cursor: int = 0

        bus = self.session.event_bus
        bus.subscribe(FishEatenEvent, lambda e: logger.debug("Ate %s (+%d)", e.tier, e.score_gained))
        bus.subscribe(PlayerDamagedEvent, lambda e: logger.debug("Bitten by %s, health %d", e.tier, e.health))
        bus.subscribe(
            SessionEndedEvent,
            lambda e: logger.info("Session over: %s, score %d", "won" if e.victory else "lost", e.score),
        )

    def setup_game(self) -> bool:
        """Open the window. Returns False if no display is available."""
        pygame.init()
        display = self.config.display
        try:
            self.screen = pygame.display.set_mode((display.screen_width, display.screen_height))
        except pygame.error as e:
            logger.error("Couldn't set the display mode: %s", e)
            return False

        pygame.display.set_caption("Big Fish")
        self.clock = pygame.time.Clock()
        self.renderer = GameRenderer(self.screen)
        return True

    def handle_key(self, key: int) -> None:
        """React to a single key press on menu screens."""
        session = self.session
        phase = session.phase

        if phase is GamePhase.HOME:
            session.clear_notice()
            if key == pygame.K_c:
                session.continue_game()
            elif key == pygame.K_n:
                session.start_new_game()
            elif key == pygame.K_s:
                session.open_settings()
            elif key == pygame.K_h:
                self.history_cursor = 0
                session.open_history()
            elif key == pygame.K_q:
                self.running = False
        elif phase is GamePhase.SETTINGS:
            if key == pygame.K_b:
                session.return_home()
        elif phase is GamePhase.HISTORY:
            self._handle_history_key(key)
        elif phase is GamePhase.PAUSED:
            if key == pygame.K_r:
                session.resume()
            elif key == pygame.K_m:
                session.return_home()
        elif phase is GamePhase.ENDED:
            if key == pygame.K_r:
                session.restart()
            elif key == pygame.K_m:
                session.return_home()

    def _handle_history_key(self, key: int) -> None:
        """Move the selection with Up/Down, delete the selected record with D."""
        history = self.session.history()
        if key == pygame.K_b:
            self.session.return_home()
        elif key == pygame.K_UP:
            self.history_cursor = max(0, self.history_cursor - 1)
        elif key == pygame.K_DOWN:
            self.history_cursor = min(max(0, len(history) - 1), self.history_cursor + 1)
        elif key == pygame.K_d and history:
            selected = history[min(self.history_cursor, len(history) - 1)]
            self.session.delete_record(selected.id)
            # Keep the cursor on the row that slid into the deleted one's place
            self.history_cursor = min(self.history_cursor, max(0, len(history) - 2))

    def draw(self) -> None:
        view = self.session.render_view()
        phase = self.session.phase
        if phase is GamePhase.HOME:
            self.renderer.draw_home(view)
        elif phase is GamePhase.SETTINGS:
            self.renderer.draw_settings()
        elif phase is GamePhase.HISTORY:
            self.renderer.draw_history(self.session.history(), self.history_cursor)
        elif phase is GamePhase.PLAYING:
            self.renderer.draw_game(view)
        elif phase is GamePhase.PAUSED:
            self.renderer.draw_paused(view)
        else:
            self.renderer.draw_ended(view)
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: one session step per rendered frame."""
        if not self.setup_game():
            return

        self.running = True
        frame_rate = self.config.display.frame_rate
        while self.running:
            delta_time = self.clock.tick(frame_rate) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and self.session.phase is not GamePhase.PLAYING:
                    self.handle_key(event.key)

            if self.session.phase is GamePhase.PLAYING:
                intent: PlayerInput = read_player_input(pygame.key.get_pressed())
                self.session.step(delta_time, intent)

            self.draw()

        pygame.quit()


def main() -> None:
    BigFishGame().run()


if __name__ == "__main__":
    main()

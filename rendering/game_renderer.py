"""Pygame drawing for the Big Fish screens.

Everything is drawn from a RenderView (plus record lists for the history
screen); the renderer never reaches into the live session.
"""

from typing import List, Sequence, Tuple

import pygame

from core.constants import (
    BACKGROUND_COLOR,
    HIGHLIGHT_COLOR,
    HUD_COLOR,
    PLAYER_COLOR,
    TEXT_COLOR,
    play_band,
)
from core.entities.tiers import tier_legend
from core.persistence.records import GameRecord
from core.render_view import EnemyView, PlayerView, RenderView

EYE_COLOR = (255, 255, 255)
PUPIL_COLOR = (0, 0, 0)
HISTORY_ROWS = 8


class GameRenderer:
    """Renders menus, the play field and the HUD.

    Attributes:
        screen: Pygame surface to render to
        title_font: Font for screen titles
        font: Font for HUD and menu text
    """

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.title_font = pygame.font.Font(None, 64)
        self.font = pygame.font.Font(None, 28)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _text(self, text: str, pos: Tuple[int, int], color=TEXT_COLOR, font=None, center=False) -> None:
        surface = (font or self.font).render(text, True, color)
        rect = surface.get_rect()
        if center:
            rect.center = pos
        else:
            rect.topleft = pos
        self.screen.blit(surface, rect)

    def _menu(
        self, title: str, lines: Sequence[str], notice: str = None, highlight: int = None
    ) -> None:
        width, height = self.screen.get_size()
        self.screen.fill(BACKGROUND_COLOR)
        self._text(title, (width // 2, height // 6), font=self.title_font, center=True)

        y = height // 3
        for index, line in enumerate(lines):
            color = HIGHLIGHT_COLOR if index == highlight else TEXT_COLOR
            self._text(line, (width // 2, y), color=color, center=True)
            y += 36

        if notice:
            self._text(notice, (width // 2, height - 60), color=HIGHLIGHT_COLOR, center=True)

    def _draw_fish(self, x: float, y: float, radius: float, color, facing_right: bool) -> None:
        center = (int(x), int(y))
        pygame.draw.circle(self.screen, color, center, max(1, int(radius)))

        # Tail on the side opposite the facing direction
        sign = -1 if facing_right else 1
        tail = [
            (x + sign * radius, y),
            (x + sign * radius * 1.5, y - radius * 0.5),
            (x + sign * radius * 1.5, y + radius * 0.5),
        ]
        pygame.draw.polygon(self.screen, color, tail)

        eye_x = x - sign * radius * 0.3
        eye_y = y - radius * 0.3
        eye_r = max(1, int(radius * 0.2))
        pygame.draw.circle(self.screen, EYE_COLOR, (int(eye_x), int(eye_y)), eye_r)
        pygame.draw.circle(self.screen, PUPIL_COLOR, (int(eye_x), int(eye_y)), max(1, eye_r // 2))

    def _draw_player(self, player: PlayerView) -> None:
        self._draw_fish(player.x, player.y, player.display_size, PLAYER_COLOR, player.facing_right)

    def _draw_enemy(self, enemy: EnemyView) -> None:
        facing_right = enemy.direction == "left_to_right"
        self._draw_fish(enemy.x, enemy.y, enemy.display_size, enemy.color, facing_right)

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def draw_home(self, view: RenderView) -> None:
        self._menu(
            "Big Fish",
            [
                "C - Continue saved game",
                "N - New game",
                "S - Settings",
                "H - History",
                "Q - Quit",
            ],
            notice=view.notice,
        )

    def draw_settings(self) -> None:
        lines = [
            "Move with WASD or the arrow keys",
            "Eat smaller fish to grow and score",
            "Larger fish bite: 50 health per hit",
            "Escape pauses the game",
            "",
        ]
        lines.extend(tier_legend())
        lines.append("B - Back")
        self._menu("Settings", lines)

    def draw_history(self, records: List[GameRecord], selected: int = 0) -> None:
        """List records, scrolling so the ``selected`` row is always visible."""
        highlight = None
        if records:
            first = max(0, selected - HISTORY_ROWS + 1)
            lines = [
                f"#{r.id}  score {r.score}  size {r.player_size:.2f}  "
                f"{r.timestamp.strftime('%Y-%m-%d %H:%M:%S')}"
                for r in records[first : first + HISTORY_ROWS]
            ]
            highlight = selected - first
            lines.append("Up/Down - Select    D - Delete selected")
        else:
            lines = ["No games played yet"]
        lines.append("B - Back")
        self._menu("History", lines, highlight=highlight)

    def draw_game(self, view: RenderView) -> None:
        width, height = self.screen.get_size()
        top, bottom = play_band(height)
        self.screen.fill(BACKGROUND_COLOR)

        pygame.draw.rect(self.screen, HUD_COLOR, (0, 0, width, int(top)))
        pygame.draw.rect(self.screen, HUD_COLOR, (0, int(bottom), width, height - int(bottom)))

        for enemy in view.enemies:
            self._draw_enemy(enemy)
        self._draw_player(view.player)

        hud = f"Health: {view.health}    Size: {view.size:.2f}    Score: {view.score}"
        self._text(hud, (20, int(top) // 2 - 10))
        self._text("Esc - Pause", (20, int(bottom) + 20))

    def draw_paused(self, view: RenderView) -> None:
        self._menu(
            "Paused",
            [f"Score {view.score}, size {view.size:.2f}", "R - Resume", "M - Main menu"],
        )

    def draw_ended(self, view: RenderView) -> None:
        title = "You rule the sea!" if view.is_victory else "Game over"
        self._menu(
            title,
            [f"Final score {view.score}, size {view.size:.2f}", "R - Play again", "M - Main menu"],
        )

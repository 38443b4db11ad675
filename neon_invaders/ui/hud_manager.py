"""
hud_manager.py
--------------
Score/lives overlay plus the start and game-over screens.

Responsibilities
----------------
- Keep cached text surfaces for score and lives, refreshed by session events.
- Show the title screen in MENU and the final score in GAME_OVER.
- Queue everything on the UI/OVERLAY layers of the DrawManager.
"""

import os

import pygame

from neon_invaders.core.debug.debug_logger import DebugLogger
from neon_invaders.core.runtime.game_settings import Colors, Display, Layers
from neon_invaders.core.runtime.game_state import GameState
from neon_invaders.core.services.event_manager import (
    GameOverEvent,
    GameStartedEvent,
    ScoreChangedEvent,
)


class HUDManager:
    """Renders HUD text and state overlays for one session."""

    PADDING = 12

    def __init__(self, events, width=Display.WIDTH, height=Display.HEIGHT, font_path=None):
        """
        Args:
            events (EventManager): The session's dispatcher.
            width, height: Playfield size for centring overlays.
            font_path (str): Optional TTF file. Falls back to pygame's default font.
        """
        self.width = width
        self.height = height

        pygame.font.init()
        self.font = self._load_font(font_path, 24)
        self.title_font = self._load_font(font_path, 56)

        self._score_surface = None
        self._lives_surface = None
        self._final_score = 0
        self.refresh(score=0, lives=0)

        events.subscribe(ScoreChangedEvent, self._on_score_changed)
        events.subscribe(GameStartedEvent, self._on_game_started)
        events.subscribe(GameOverEvent, self._on_game_over)

        DebugLogger.init_entry("HUDManager")

    def _load_font(self, path, size):
        if path:
            if os.path.exists(path):
                return pygame.font.Font(path, size)
            DebugLogger.warn(f"Missing font '{path}', using default", category="ui")
        return pygame.font.Font(None, size)

    # ===========================================================
    # Event Handlers
    # ===========================================================

    def _on_score_changed(self, event: ScoreChangedEvent):
        self._score_surface = self._text(f"SCORE {event.score}")

    def _on_game_started(self, event: GameStartedEvent):
        self.refresh(score=0, lives=event.lives)

    def _on_game_over(self, event: GameOverEvent):
        self._final_score = event.final_score

    def refresh(self, score, lives):
        """Rebuild both cached HUD labels."""
        self._score_surface = self._text(f"SCORE {score}")
        self._lives_surface = self._text(f"LIVES {lives}")

    def _text(self, text, font=None, color=Colors.TEXT):
        return (font or self.font).render(text, True, color)

    # ===========================================================
    # Drawing
    # ===========================================================

    def draw(self, draw_manager, snapshot):
        """Queue the HUD for the current frame."""
        if snapshot.state is GameState.PLAYING:
            draw_manager.queue_draw(self._score_surface, (self.PADDING, self.PADDING), Layers.UI)
            lives_x = self.width - self._lives_surface.get_width() - self.PADDING
            draw_manager.queue_draw(self._lives_surface, (lives_x, self.PADDING), Layers.UI)
        elif snapshot.state is GameState.MENU:
            self._draw_overlay(draw_manager, "NEON INVADERS", "Press SPACE or click to start")
        else:
            self._draw_overlay(
                draw_manager, "GAME OVER",
                f"Final score {self._final_score}  -  press SPACE or click to restart"
            )

    def _draw_overlay(self, draw_manager, title, subtitle):
        title_surface = self._text(title, self.title_font, Colors.TEXT_ACCENT)
        subtitle_surface = self._text(subtitle)

        cx, cy = self.width // 2, self.height // 2
        draw_manager.queue_draw(title_surface, title_surface.get_rect(center=(cx, cy - 30)), Layers.OVERLAY)
        draw_manager.queue_draw(subtitle_surface, subtitle_surface.get_rect(center=(cx, cy + 30)), Layers.OVERLAY)

"""
main_loop.py
------------
pygame host that drives a GameSession.

Responsibilities:
- Initialize pygame and the presentation systems
- Sample input and forward start requests
- Tick the session once per rendered frame with a clamped delta
- Render the session snapshot and HUD
"""

import pygame

from neon_invaders.core.debug.debug_logger import DebugLogger
from neon_invaders.core.runtime.game_session import GameSession
from neon_invaders.core.runtime.game_settings import Display, GameConfig, Physics
from neon_invaders.core.runtime.game_state import GameState
from neon_invaders.core.services.input_manager import InputManager
from neon_invaders.graphics.draw_manager import DrawManager
from neon_invaders.ui.hud_manager import HUDManager


class MainLoop:
    """Core runtime controller managing the game's main loop."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config: GameConfig = None, fps: int = Display.FPS, font_path=None):
        DebugLogger.section("Initializing MainLoop")

        self.config = config or GameConfig()
        self.fps = fps

        self._init_pygame()
        self.session = GameSession(self.config)
        self.input_manager = InputManager()
        self.draw_manager = DrawManager()
        self.hud = HUDManager(self.session.events, self.config.width, self.config.height,
                              font_path=font_path)

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub(f"Target FPS {self.fps}")

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.config.width, self.config.height))
        pygame.display.set_caption(Display.CAPTION)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {self.config.width}x{self.config.height}")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute the loop until the window is closed."""
        DebugLogger.section("Game Loop")

        while self.running:
            # Frame timing with safety clamp
            raw_ms = float(self.clock.tick(self.fps))
            frame_ms = min(raw_ms, Physics.MAX_FRAME_TIME_MS)
            if raw_ms > frame_ms:
                DebugLogger.warn(f"Slow frame {raw_ms:.0f} ms clamped to {frame_ms:.0f} ms", category="timing")
            self.step(frame_ms)

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def step(self, frame_ms: float):
        """One frame: events -> input -> tick -> draw."""
        self._handle_events()
        if not self.running:
            return

        self.input_manager.update(frame_ms)
        self.session.inputs = self.input_manager.sample()
        self.session.tick(frame_ms)
        self._draw()

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                return

            if event.type == pygame.WINDOWFOCUSLOST:
                self.input_manager.release_all()
                continue

            if self.input_manager.handle_event(event, self.session.state):
                self.input_manager.release_all()
                self.session.start_game()

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        snapshot = self.session.snapshot()

        self.draw_manager.clear()
        if snapshot.state is GameState.PLAYING:
            self.draw_manager.queue_snapshot(snapshot)
        self.hud.draw(self.draw_manager, snapshot)
        self.draw_manager.render(self.screen)

        pygame.display.flip()
